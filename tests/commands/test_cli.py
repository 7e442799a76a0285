"""Tests for top-level CLI behavior."""

from click.testing import CliRunner

from sen_mime.cli.cli import cli
from sen_mime.core.context import MimeContext


def test_no_command_prints_usage_and_fails() -> None:
    result = CliRunner().invoke(cli, [], obj=MimeContext.for_test())

    assert result.exit_code == 1
    assert "Usage:" in result.output
    for command in ("install", "delete", "uninstall", "list"):
        assert command in result.output


def test_unknown_command_is_a_usage_error() -> None:
    result = CliRunner().invoke(cli, ["frobnicate"], obj=MimeContext.for_test())

    assert result.exit_code == 2
    assert "No such command" in result.output


def test_short_help_flag() -> None:
    result = CliRunner().invoke(cli, ["-h"], obj=MimeContext.for_test())

    assert result.exit_code == 0
    assert "Usage:" in result.output
