"""Tests for MIME type grammar and sniffer rule checks."""

import pytest

from sen_mime.core.mime_types import (
    MIME_TYPE_LENGTH,
    check_sniffer_rule,
    is_supertype,
    is_valid_mime_type,
    supertype_of,
)


@pytest.mark.parametrize(
    "mime_type",
    [
        "application/x-sen-note",
        "entity",
        "entity/person",
        "relation/knows",
        "text/plain",
        "application/vnd.ms-excel",
    ],
)
def test_valid_mime_types(mime_type: str) -> None:
    assert is_valid_mime_type(mime_type)


@pytest.mark.parametrize(
    "mime_type",
    [
        "",
        "/",
        "entity/",
        "/person",
        "a/b/c",
        "text/plain; charset=utf-8",
        "text/pla in",
        "text/(plain)",
        "entity/pérson",
        "../escaped",
        "entity/..",
        ".",
        "./person",
    ],
)
def test_invalid_mime_types(mime_type: str) -> None:
    assert not is_valid_mime_type(mime_type)


def test_type_length_limit() -> None:
    """A type string must be shorter than MIME_TYPE_LENGTH bytes."""
    just_fits = "entity/" + "x" * (MIME_TYPE_LENGTH - 1 - len("entity/"))
    too_long = just_fits + "x"

    assert is_valid_mime_type(just_fits)
    assert not is_valid_mime_type(too_long)


def test_supertype_helpers() -> None:
    assert is_supertype("entity")
    assert not is_supertype("entity/person")
    assert supertype_of("entity/person") == "entity"
    assert supertype_of("entity") == "entity"


@pytest.mark.parametrize(
    "rule",
    [
        '0.50 ("GIF8")',
        '0.80 [0:32] ("<?xml" | "<sen")',
        "1.0 (\"a)b\")",
        '0 ("\\"quoted\\"")',
    ],
)
def test_well_formed_sniffer_rules(rule: str) -> None:
    assert check_sniffer_rule(rule) is None


@pytest.mark.parametrize(
    ("rule", "problem"),
    [
        ("", "empty sniffer rule"),
        ('high ("GIF8")', "invalid priority"),
        ('1.5 ("GIF8")', "out of range"),
        ("0.5", "expected a pattern list"),
        ('0.5 ("GIF8"', "unclosed"),
        ('0.5 ("GIF8"))', "unbalanced"),
        ('0.5 ("GIF8)', "unterminated string"),
        ("0.5 [0:32]", "missing pattern list"),
    ],
)
def test_malformed_sniffer_rules(rule: str, problem: str) -> None:
    result = check_sniffer_rule(rule)

    assert result is not None
    assert problem in result
