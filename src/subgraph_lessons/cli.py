"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from subgraph_lessons.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from subgraph_lessons.graphql_gateway import SubgraphGateway
from subgraph_lessons.lesson_execution import (
    DocumentationLessonRequest,
    ExportLessonRequest,
    LessonExecutionError,
    ManifestLessonRequest,
    QueryLessonRequest,
    execute_documentation_lesson,
    execute_export_lesson,
    execute_manifest_lesson,
    execute_query_lesson,
)
from subgraph_lessons.manifest_ingestion import Manifest
from subgraph_lessons.results_writing import ExportFormat

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="subgraph-lessons")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Subgraph query, export and schema documentation lessons."""
    _configure_logging(verbose)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML lesson configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML lesson configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="query")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML lesson configuration file",
)
@click.option(
    "--query-file",
    "query_path",
    required=False,
    type=click.Path(path_type=str),
    help="GraphQL query file overriding the configured query",
)
def query(config_path: str, query_path: str | None) -> None:
    """Send one GraphQL query and print the response data as JSON."""
    try:
        outcome = execute_query_lesson(
            QueryLessonRequest(config_path=config_path, query_path=query_path),
            gateway_factory=SubgraphGateway,
        )
    except LessonExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(outcome.data, indent=2, ensure_ascii=False))


@cli.command(name="export")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML lesson configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the export file to write",
)
@click.option(
    "--format",
    "export_format",
    type=click.Choice([item.value for item in ExportFormat]),
    default=ExportFormat.CSV.value,
    show_default=True,
    help="Export file format",
)
def export(config_path: str, output_path: str, export_format: str) -> None:
    """Run the configured query and write its records to a file."""
    try:
        outcome = execute_export_lesson(
            ExportLessonRequest(
                config_path=config_path,
                output_path=output_path,
                export_format=ExportFormat(export_format),
            ),
            gateway_factory=SubgraphGateway,
        )
    except LessonExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


@cli.command(name="manifest")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML lesson configuration file (needed with --cid)",
)
@click.option("--cid", "manifest_cid", required=False, help="Content identifier of the manifest")
@click.option(
    "--file",
    "manifest_path",
    required=False,
    type=click.Path(path_type=str),
    help="Local manifest YAML file",
)
def manifest(config_path: str | None, manifest_cid: str | None, manifest_path: str | None) -> None:
    """Fetch a subgraph manifest and print its summary."""
    try:
        loaded = execute_manifest_lesson(
            ManifestLessonRequest(
                config_path=config_path,
                manifest_cid=manifest_cid,
                manifest_path=manifest_path,
            ),
            gateway_factory=SubgraphGateway,
        )
    except LessonExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(_manifest_summary(loaded))


@cli.command(name="document")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML lesson configuration file (needed with CIDs)",
)
@click.option("--manifest-cid", required=False, help="Content identifier of the manifest")
@click.option(
    "--manifest-file",
    "manifest_path",
    required=False,
    type=click.Path(path_type=str),
    help="Local manifest YAML file",
)
@click.option(
    "--schema-cid",
    required=False,
    help="Content identifier of the schema (defaults to the manifest's schema link)",
)
@click.option(
    "--schema-file",
    "schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="Local GraphQL schema file",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory for overview.md and entities.md",
)
# pylint: disable=too-many-arguments
def document(
    config_path: str | None,
    manifest_cid: str | None,
    manifest_path: str | None,
    schema_cid: str | None,
    schema_path: str | None,
    output_dir: str | None,
) -> None:
    """Generate Markdown documentation for a subgraph manifest and schema."""
    try:
        outcome = execute_documentation_lesson(
            DocumentationLessonRequest(
                config_path=config_path,
                manifest_cid=manifest_cid,
                manifest_path=manifest_path,
                schema_cid=schema_cid,
                schema_path=schema_path,
                output_dir=output_dir,
            ),
            gateway_factory=SubgraphGateway,
        )
    except LessonExecutionError as exc:
        raise CliError(str(exc)) from exc
    for notice in outcome.notices:
        click.echo(notice, err=True)
    click.echo(str(outcome.paths.overview))
    click.echo(str(outcome.paths.entities))


# pylint: enable=too-many-arguments


def _manifest_summary(loaded: Manifest) -> str:
    lines = [
        f"specVersion: {loaded.spec_version}",
        f"description: {loaded.description or '-'}",
        f"repository: {loaded.repository or '-'}",
        f"schema: {loaded.schema_file or '-'}",
        "dataSources:",
    ]
    for source in loaded.data_sources:
        network = f" [{source.network}]" if source.network else ""
        lines.append(f"  - {source.name}{network}: {source.address or '-'}")
    if loaded.templates:
        lines.append("templates:")
        lines.extend(f"  - {template.name}" for template in loaded.templates)
    return "\n".join(lines)


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
