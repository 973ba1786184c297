"""Dotted version string parsing.

Versions reported by classifiers are free-form text such as ``"537.36"``,
``"14.2"`` or ``"10.0.beta"``. Parsing keeps the distinction between a
segment that is missing (``None``) and a segment that is ``0``.
"""

from ua_classifier.domain.models.version_info import VersionInfo

VERSION_DELIMITER = "."


def _parse_segment(segments: list[str], index: int) -> int | None:
    """Return the numeric value of a segment, or None when missing or non-numeric."""
    if index >= len(segments):
        return None
    segment = segments[index].strip()
    if not segment.isascii() or not segment.isdigit():
        return None
    return int(segment)


def parse_version(version: str | None, summary: str) -> VersionInfo:
    """Parse a dotted version string into a VersionInfo.

    Args:
        version: Version text as reported by a classifier. May be empty or None.
        summary: Display string stored as-is on the result (e.g. ``"WebKit 14.2"``).

    Returns:
        VersionInfo with major/minor/patch set for each numeric segment present.
    """
    segments = version.split(VERSION_DELIMITER) if version else []
    return VersionInfo(
        major=_parse_segment(segments, 0),
        minor=_parse_segment(segments, 1),
        patch=_parse_segment(segments, 2),
        summary=summary,
    )


def version_summary(name: str | None, version: str | None) -> str:
    """Build the ``"<name> <version>"`` display string used for summaries."""
    return f"{name or ''} {version or ''}".strip()


def join_version_parts(*parts: str | None) -> str | None:
    """Join leading version parts as ``major.minor.patch[.patch_minor]``.

    A part is only included if every part before it is present, so
    ``("10", None, "3")`` yields ``"10"``.
    """
    leading: list[str] = []
    for part in parts:
        if not part:
            break
        leading.append(part)
    return VERSION_DELIMITER.join(leading) if leading else None
