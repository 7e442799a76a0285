"""Tests for FakeResources test infrastructure."""

from pathlib import Path

import pytest

from sen_mime.core.errors import ContainerUnreadableError, MalformedContainerError
from sen_mime.core.resources.fake import FakeResources


def test_open_known_container() -> None:
    path = Path("/apps/note.rsrc")
    resources = FakeResources(
        containers={path: {("CSTR", "META:TYPE"): "application/x-sen-note"}}
    )

    container = resources.open_container(path)

    assert container.path == path
    assert container.list_resources() == [("CSTR", "META:TYPE")]
    assert resources.opened == [path]


def test_load_reports_string_size_with_terminator() -> None:
    path = Path("/apps/note.rsrc")
    resources = FakeResources(containers={path: {("MSDC", "META:S:DESC"): "SEN Note"}})

    value = resources.open_container(path).load("MSDC", "META:S:DESC")

    assert value is not None
    assert value.data == "SEN Note"
    assert value.size == len("SEN Note") + 1


def test_load_missing_resource() -> None:
    path = Path("/apps/note.rsrc")
    resources = FakeResources(containers={path: {}})

    container = resources.open_container(path)

    assert container.load("VICN", "META:ICON") is None
    assert resources.container(path).load_calls == [("VICN", "META:ICON")]


def test_unknown_path_is_unreadable() -> None:
    resources = FakeResources()

    with pytest.raises(ContainerUnreadableError):
        resources.open_container(Path("/missing.rsrc"))


def test_malformed_path() -> None:
    path = Path("/apps/broken.rsrc")
    resources = FakeResources(malformed={path})

    with pytest.raises(MalformedContainerError):
        resources.open_container(path)
