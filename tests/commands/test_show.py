"""Tests for the show command."""

import json

from click.testing import CliRunner

from sen_mime.cli.cli import cli
from sen_mime.core.context import MimeContext
from sen_mime.core.registry.fake import FakeMimeRegistry
from sen_mime.core.types import AttributeSpec, AttributeValueType, TypeRecord


def _context() -> MimeContext:
    registry = FakeMimeRegistry(
        records=[
            TypeRecord(
                mime_type="application/x-sen-note",
                short_description="SEN Note",
                extensions=("note",),
            )
        ]
    )
    return MimeContext.for_test(registry=registry)


def test_show_record() -> None:
    result = CliRunner().invoke(cli, ["show", "application/x-sen-note"], obj=_context())

    assert result.exit_code == 0, result.output
    assert "application/x-sen-note" in result.output
    assert "SEN Note" in result.output


def test_show_json() -> None:
    result = CliRunner().invoke(
        cli, ["show", "--json", "application/x-sen-note"], obj=_context()
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["type"] == "application/x-sen-note"
    assert data["short_description"] == "SEN Note"
    assert data["extensions"] == ["note"]


def test_show_not_installed() -> None:
    result = CliRunner().invoke(cli, ["show", "entity/robot"], obj=_context())

    assert result.exit_code == 1
    assert "failed to show MIME type entity/robot: MIME type entity/robot is not installed" in (
        result.output
    )


def test_show_prints_bracketed_text_literally() -> None:
    registry = FakeMimeRegistry(
        records=[
            TypeRecord(
                mime_type="image/x-sen-photo",
                short_description="Photo [raw] image",
                long_description="Notes [/draft]",
                sniffer_rule='0.80 [0:32] ("RAW")',
                attributes=(
                    AttributeSpec("attr:tags", "Tags [bold]", AttributeValueType.STRING),
                ),
            )
        ]
    )
    ctx = MimeContext.for_test(registry=registry)

    result = CliRunner().invoke(cli, ["show", "image/x-sen-photo"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Photo [raw] image" in result.output
    assert "Notes [/draft]" in result.output
    assert '0.80 [0:32] ("RAW")' in result.output
    assert "Tags [bold]" in result.output
