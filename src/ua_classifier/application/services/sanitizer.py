"""Post-processing of assembled classification results."""

from typing import Any


def normalize_blanks(value: Any) -> Any:
    """Recursively replace empty string leaves with None.

    Dicts and lists are rebuilt, never mutated. Applying this twice gives the
    same result as applying it once.
    """
    if isinstance(value, dict):
        return {key: normalize_blanks(item) for key, item in value.items()}
    if isinstance(value, list):
        return [normalize_blanks(item) for item in value]
    if value == "":
        return None
    return value


def fill_fallbacks(tree: dict[str, Any]) -> dict[str, Any]:
    """Fill derived fields that the primary source left absent.

    ``ua_type`` falls back to the bot category, which may itself be None.
    Expects a tree that already went through :func:`normalize_blanks`.
    """
    if tree.get("ua_type") is not None:
        return tree
    bot_info = tree.get("bot_info") or {}
    return {**tree, "ua_type": bot_info.get("category")}


class Sanitizer:
    """Normalizes blanks to None, then back-fills derived fields."""

    def sanitize(self, tree: dict[str, Any]) -> dict[str, Any]:
        """Run both passes in order and return a new tree."""
        # Fallbacks must see the normalized None, not a raw empty string
        return fill_fallbacks(normalize_blanks(tree))
