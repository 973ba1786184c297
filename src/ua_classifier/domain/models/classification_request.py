"""Classification request domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassificationRequest:
    """A raw User-Agent header value to classify. Not validated."""

    user_agent: str
