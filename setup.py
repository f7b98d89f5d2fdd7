"""
DeployMesh 项目构建配置

Describes the resources a job ships to the worker nodes of a Ray cluster.
"""

from setuptools import setup, find_packages
import os

# 读取 README 文件
def read_readme():
    with open("README.md", "r", encoding="utf-8") as fh:
        return fh.read()

# 读取版本信息
def read_version():
    with open("deploymesh/__init__.py", "r", encoding="utf-8") as fh:
        for line in fh:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"

# 读取依赖文件
def read_requirements(filename):
    requirements = []
    if os.path.exists(filename):
        with open(filename, "r", encoding="utf-8") as fh:
            requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]
    return requirements

setup(
    name="deploymesh-core",
    version=read_version(),
    description="Resource descriptors for shipping job code and data to Ray workers",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["deploymesh", "deploymesh.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: System :: Distributed Computing",
    ],
    python_requires=">=3.9",
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "dev": read_requirements("requirements-dev.txt"),
    },
    entry_points={
        "console_scripts": [
            "deploymesh=deploymesh.cli:main",
        ],
    },
    zip_safe=False,
    keywords=[
        "distributed-computing",
        "ray",
        "runtime-env",
        "deployment",
        "cluster",
    ],
)
