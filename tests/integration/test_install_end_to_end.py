"""End-to-end install, list and delete over real files."""

from pathlib import Path

from click.testing import CliRunner

from sen_mime.cli.cli import cli
from sen_mime.core.context import MimeContext
from sen_mime.core.global_config import GlobalConfig, InMemoryGlobalConfigOps
from sen_mime.core.indices.real import FilesystemIndexStore
from sen_mime.core.registry.real import FilesystemMimeRegistry
from sen_mime.core.resources.real import TomlResources

NOTE_CONTAINER = """
[[resource]]
type = "CSTR"
name = "META:TYPE"
data = "application/x-sen-note"

[[resource]]
type = "MSDC"
name = "META:S:DESC"
data = "SEN Note"

[[resource]]
type = "MSGG"
name = "META:ATTR_INFO"
data = { attributes = [{ name = "attr:title", display_name = "Title", searchable = true }] }
"""

PERSON_CONTAINER = """
[[resource]]
type = "CSTR"
name = "META:TYPE"
data = "entity/person"

[[resource]]
type = "MSDC"
name = "META:S:DESC"
data = "Person"
"""


def _context(tmp_path: Path) -> MimeContext:
    config = GlobalConfig(
        mime_db_root=tmp_path / "mime_db",
        index_root=tmp_path / "volume",
        optional_field_policy="continue",
    )
    return MimeContext(
        resources=TomlResources(),
        registry=FilesystemMimeRegistry(config.mime_db_root),
        indices=FilesystemIndexStore(config.index_root),
        config_ops=InMemoryGlobalConfigOps(config=config),
        global_config=config,
        cwd=tmp_path,
    )


def test_install_list_delete(tmp_path: Path) -> None:
    note = tmp_path / "note.toml"
    note.write_text(NOTE_CONTAINER, encoding="utf-8")
    person = tmp_path / "person.toml"
    person.write_text(PERSON_CONTAINER, encoding="utf-8")
    ctx = _context(tmp_path)
    runner = CliRunner()

    first = runner.invoke(cli, ["install", str(note)], obj=ctx)
    assert first.exit_code == 0, first.output
    assert "adding attribute index attr:title (string)... OK" in first.output
    assert FilesystemIndexStore(tmp_path / "volume").has_index("attr:title")

    second = runner.invoke(cli, ["install", str(note)], obj=ctx)
    assert second.exit_code == 0, second.output
    assert "is already installed, updating..." in second.output
    assert "already exists, skipped" in second.output

    assert runner.invoke(cli, ["install", str(person)], obj=ctx).exit_code == 0

    listing = runner.invoke(cli, ["list"], obj=ctx)
    assert listing.exit_code == 0, listing.output
    assert '        types = string("entity/person", 14 bytes)' in listing.output

    shown = runner.invoke(cli, ["show", "application/x-sen-note"], obj=ctx)
    assert shown.exit_code == 0, shown.output
    assert "SEN Note" in shown.output

    deleted = runner.invoke(cli, ["uninstall", "entity/person"], obj=ctx)
    assert deleted.exit_code == 0, deleted.output
    assert "successfully removed MIME type entity/person." in deleted.output
    assert not (tmp_path / "mime_db" / "entity" / "person.toml").exists()
