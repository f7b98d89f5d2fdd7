"""Command line entry point for inspecting job resources."""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import click

from deploymesh.core.config import get_manifest, import_class
from deploymesh.core.entities.resource_config import ResourceConfig
from deploymesh.core.runtime_env import build_runtime_env
from deploymesh.core.utils import configure_logging, demote_ray_logging

logger = logging.getLogger(__name__)


@click.group()
@click.option("--log-level", default="WARNING", help="Log level for deploymesh loggers.")
def cli(log_level: str):
    """DeployMesh CLI - inspect the resources a job ships to the cluster."""
    try:
        configure_logging(log_level, stream=sys.stderr)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc
    demote_ray_logging()


@cli.command("show")
@click.argument("manifest", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--runtime-env", is_flag=True, help="Print the Ray runtime_env instead of the descriptors.")
def show(manifest: Optional[str], runtime_env: bool):
    """Print the resources declared in MANIFEST (or the discovered manifest)."""
    try:
        resources = get_manifest(manifest).build()
    except (ValueError, ImportError, AttributeError) as exc:
        raise click.ClickException(str(exc)) from exc

    if runtime_env:
        try:
            payload = build_runtime_env(resources)
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
    else:
        payload = resources.to_dict()
    click.echo(json.dumps(payload, indent=2, sort_keys=True))


@cli.command("describe-class")
@click.argument("import_path")
def describe_class(import_path: str):
    """Print the descriptor derived for IMPORT_PATH ('module:attr')."""
    try:
        config = ResourceConfig.from_class(import_class(import_path))
    except (ValueError, ImportError, AttributeError) as exc:
        raise click.ClickException(str(exc)) from exc
    logger.info("Resolved %s -> %s", import_path, config.location)
    click.echo(json.dumps(config.to_dict(), indent=2))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
