"""CLI smoke tests."""

from click.testing import CliRunner
from admin_form_schema.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "schema-map" in result.output
    assert "generate-config" in result.output
    assert "--verbose" in result.output
