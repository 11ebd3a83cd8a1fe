"""CLI smoke tests."""

from click.testing import CliRunner
from subgraph_lessons.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("generate-config", "query", "export", "manifest", "document"):
        assert command in result.output


def test_document_help_lists_sources() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["document", "--help"])

    assert result.exit_code == 0
    assert "--manifest-cid" in result.output
    assert "--schema-file" in result.output
