"""Tests for the deploymesh command line."""

from __future__ import annotations

import json
from pathlib import Path
from textwrap import dedent

import pytest
from click.testing import CliRunner

from deploymesh.cli import cli
from deploymesh.core.runtime_env import ATTACHMENTS_ENV_VAR


@pytest.fixture
def manifest(tmp_path: Path) -> Path:
    (tmp_path / "words.txt").write_text("alpha\n", encoding="utf-8")
    path = tmp_path / "deploymesh.yaml"
    path.write_text(
        dedent(
            """
            resources:
              classes:
                - deploymesh.core.registry:JobResources
              entries:
                - {type: file, location: words.txt, id: words}
            """
        ),
        encoding="utf-8",
    )
    return path


def test_show_prints_descriptors(manifest: Path):
    result = CliRunner().invoke(cli, ["show", str(manifest)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["words"]["type"] == "file"
    assert payload["deploymesh/core/registry.py"]["type"] == "class"


def test_show_runtime_env(manifest: Path):
    result = CliRunner().invoke(cli, ["show", str(manifest), "--runtime-env"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert len(payload["py_modules"]) == 1
    assert "words" in json.loads(payload["env_vars"][ATTACHMENTS_ENV_VAR])


def test_show_reports_invalid_manifest(tmp_path: Path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("resources:\n  entries:\n    - {type: file, location: missing.txt}\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["show", str(bad)])

    assert result.exit_code == 1
    assert "Not an existing, readable file" in result.output


def test_describe_class():
    result = CliRunner().invoke(cli, ["describe-class", "deploymesh.core.registry:JobResources"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["id"] == "deploymesh/core/registry.py"
    assert payload["type"] == "class"
    assert payload["location"].startswith("file://")


def test_describe_class_rejects_bad_import_path():
    result = CliRunner().invoke(cli, ["describe-class", "JobResources"])

    assert result.exit_code == 1
    assert "module:attr" in result.output


def test_invalid_log_level_is_rejected(manifest: Path):
    result = CliRunner().invoke(cli, ["--log-level", "chatty", "show", str(manifest)])

    assert result.exit_code == 2
    assert "Unknown log level" in result.output
