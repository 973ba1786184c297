"""Tests for result sanitization."""

from typing import Any

from ua_classifier.application.services.sanitizer import (
    Sanitizer,
    fill_fallbacks,
    normalize_blanks,
)


def _raw_tree() -> dict[str, Any]:
    return {
        "ua_family": "",
        "ua_type": "",
        "os_meta": {"name": "Windows", "short_name": " ", "version": "10", "platform": ""},
        "bot_info": {
            "name": "Googlebot",
            "category": "Search bot",
            "url": "",
            "vendor": {"name": "Google Inc.", "url": ""},
        },
        "device": {"is_mobile": False, "is_tablet": False, "brand": "", "model": None},
        "tags": ["", "kept"],
        "ua_version": {"major": 0, "minor": None, "patch": None, "summary": ""},
    }


def test_normalize_blanks_replaces_empty_leaves_at_every_depth() -> None:
    """Given empty strings throughout the tree, when normalizing, then each becomes None."""
    result = normalize_blanks(_raw_tree())

    assert result["ua_family"] is None
    assert result["os_meta"]["short_name"] == " "
    assert result["os_meta"]["platform"] is None
    assert result["bot_info"]["vendor"]["url"] is None
    assert result["device"]["brand"] is None
    assert result["tags"] == [None, "kept"]
    assert result["ua_version"]["summary"] is None


def test_normalize_blanks_keeps_falsy_non_string_values() -> None:
    """Given False and 0 leaves, when normalizing, then they are not treated as blank."""
    result = normalize_blanks(_raw_tree())

    assert result["device"]["is_mobile"] is False
    assert result["ua_version"]["major"] == 0
    assert result["os_meta"]["version"] == "10"


def test_normalize_blanks_is_idempotent() -> None:
    """Given a tree, when normalizing twice, then the result equals normalizing once."""
    once = normalize_blanks(_raw_tree())

    assert normalize_blanks(once) == once


def test_normalize_blanks_does_not_mutate_input() -> None:
    """Given a tree, when normalizing, then the input is left unchanged."""
    tree = _raw_tree()

    normalize_blanks(tree)

    assert tree["ua_family"] == ""
    assert tree["bot_info"]["vendor"]["url"] == ""


def test_fill_fallbacks_uses_bot_category_when_ua_type_absent() -> None:
    """Given no ua_type, when filling fallbacks, then the bot category is used."""
    tree = {"ua_type": None, "bot_info": {"category": "Search bot"}}

    assert fill_fallbacks(tree)["ua_type"] == "Search bot"


def test_fill_fallbacks_keeps_existing_ua_type() -> None:
    """Given a ua_type, when filling fallbacks, then it is not overwritten."""
    tree = {"ua_type": "browser", "bot_info": {"category": "Search bot"}}

    assert fill_fallbacks(tree)["ua_type"] == "browser"


def test_fill_fallbacks_leaves_ua_type_absent_without_bot_category() -> None:
    """Given neither ua_type nor bot category, when filling fallbacks, then ua_type stays None."""
    tree = {"ua_type": None, "bot_info": {"category": None}}

    assert fill_fallbacks(tree)["ua_type"] is None


def test_sanitize_normalizes_before_filling_fallbacks() -> None:
    """Given an empty-string ua_type, when sanitizing, then the fallback sees it as absent."""
    result = Sanitizer().sanitize(_raw_tree())

    assert result["ua_type"] == "Search bot"
    assert result["bot_info"]["url"] is None


def test_fill_fallbacks_alone_does_not_treat_empty_string_as_absent() -> None:
    """Given a raw empty ua_type, when only filling fallbacks, then it is left as is."""
    tree = {"ua_type": "", "bot_info": {"category": "Search bot"}}

    assert fill_fallbacks(tree)["ua_type"] == ""


def test_normalize_blanks_keeps_whitespace_only_strings() -> None:
    """Given a whitespace-only leaf, when normalizing, then only the exact empty string is replaced."""
    result = normalize_blanks({"ua_type": " ", "ua_family": "\t", "os_family": ""})

    assert result == {"ua_type": " ", "ua_family": "\t", "os_family": None}
