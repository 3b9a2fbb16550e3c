"""CLI smoke tests."""

from click.testing import CliRunner
from popover_labels.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "render-label" in result.output
    assert "check-model" in result.output
