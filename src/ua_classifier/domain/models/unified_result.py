"""Unified classification result returned to callers."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ua_classifier.domain.models.device_classification import BotInfo, OsMeta
from ua_classifier.domain.models.version_info import VersionInfo


class DeviceBlock(BaseModel):
    """Form factor flags combined with device brand and model."""

    model_config = ConfigDict(frozen=True)

    is_mobile: bool = False
    is_tablet: bool = False
    is_desktop: bool = True
    brand: str | None = None
    model: str | None = None

    @model_validator(mode="after")
    def validate_desktop_flag(self) -> "DeviceBlock":
        """Ensure is_desktop is exactly 'neither mobile nor tablet'."""
        if self.is_desktop != (not self.is_mobile and not self.is_tablet):
            raise ValueError("is_desktop must equal not is_mobile and not is_tablet")
        return self


class ClientBlock(BaseModel):
    """Mutually exclusive bot/user flags."""

    model_config = ConfigDict(frozen=True)

    bot: bool = False
    user: bool = True

    @model_validator(mode="after")
    def validate_exclusive(self) -> "ClientBlock":
        """Ensure exactly one of bot and user is set."""
        if self.bot == self.user:
            raise ValueError("exactly one of bot and user must be true")
        return self


class UnifiedResult(BaseModel):
    """Merged, sanitized classification of one user-agent string.

    Every leaf is either a concrete value or None; empty strings never appear.
    """

    model_config = ConfigDict(frozen=True)

    client_summary: str | None = None
    ua_family: str | None = None
    ua_version: VersionInfo = Field(default_factory=VersionInfo)
    os_family: str | None = None
    os_version: VersionInfo = Field(default_factory=VersionInfo)
    ua_type: str | None = None
    bot_info: BotInfo = Field(default_factory=BotInfo)
    os_meta: OsMeta = Field(default_factory=OsMeta)
    ua_rendering_engine: str | None = None
    ua_rendering_engine_version: VersionInfo = Field(default_factory=VersionInfo)
    device: DeviceBlock = Field(default_factory=DeviceBlock)
    client: ClientBlock = Field(default_factory=ClientBlock)

    def to_dict(self) -> dict[str, Any]:
        """Return the result as a plain nested dictionary."""
        return self.model_dump()
