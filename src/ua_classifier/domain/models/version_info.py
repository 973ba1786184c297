"""Version information domain model."""

from pydantic import BaseModel, ConfigDict


class VersionInfo(BaseModel):
    """Numeric version components plus a human-readable summary.

    A component is None when the classifier could not determine it, which is
    distinct from a component the classifier determined to be 0.
    """

    model_config = ConfigDict(frozen=True)

    major: int | None = None
    minor: int | None = None
    patch: int | None = None
    summary: str | None = None

    @property
    def is_absent(self) -> bool:
        """True when no component and no summary is known."""
        return (
            self.major is None
            and self.minor is None
            and self.patch is None
            and not self.summary
        )
