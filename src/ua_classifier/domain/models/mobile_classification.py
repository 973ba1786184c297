"""Mobile/tablet classification domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MobileClassification:
    """Form factor flags from the mobile/tablet classifier.

    Desktop is never reported directly; it is inferred from the other two flags.
    """

    is_mobile: bool = False
    is_tablet: bool = False

    @property
    def is_desktop(self) -> bool:
        """True when the client is neither mobile nor tablet."""
        return not self.is_mobile and not self.is_tablet

    @classmethod
    def absent(cls) -> "MobileClassification":
        """Result used when the classifier failed or is unavailable."""
        return cls()
