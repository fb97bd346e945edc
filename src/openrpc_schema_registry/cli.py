"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from openrpc_schema_registry.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from openrpc_schema_registry.generation_run import (
    GenerationError,
    GenerationRequest,
    execute_schema_generation,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openrpc-schema-registry")
def cli() -> None:
    """JSON Schema components generator for OpenRPC documents."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate an example YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-schemas")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON type configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional JSON file to write; prints to stdout when omitted",
)
@click.option(
    "--document",
    "as_document",
    is_flag=True,
    default=False,
    help="Wrap the schemas in an OpenRPC document built from the 'document' section.",
)
@click.option(
    "--log-level",
    "log_level",
    required=False,
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Emit registry log records to stderr at this level",
)
def generate_schemas(
    config_path: str, output_path: str | None, as_document: bool, log_level: str | None
) -> None:
    """Register the configured types and emit the resolved schema tree."""
    if log_level:
        logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    try:
        outcome = execute_schema_generation(
            GenerationRequest(
                config_path=config_path,
                output_path=output_path,
                as_document=as_document,
            )
        )
    except GenerationError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    else:
        click.echo(json.dumps(outcome.payload, indent=2))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
