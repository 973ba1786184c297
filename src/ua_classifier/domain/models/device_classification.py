"""Device and bot classification domain models."""

from pydantic import BaseModel, ConfigDict, Field

from ua_classifier.domain.errors import InternalInconsistencyError
from ua_classifier.domain.models.version_info import VersionInfo


class BotVendor(BaseModel):
    """Organisation operating a bot."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    url: str | None = None


class BotInfo(BaseModel):
    """Identity of a detected bot or crawler."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    category: str | None = None
    url: str | None = None
    vendor: BotVendor = Field(default_factory=BotVendor)


class RenderingEngine(BaseModel):
    """Layout engine used by the client (e.g. Blink, WebKit, Gecko)."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    version: VersionInfo = Field(default_factory=VersionInfo)


class OsMeta(BaseModel):
    """Operating system details as reported by the device/bot classifier."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    short_name: str | None = None
    version: str | None = None
    platform: str | None = None


class DeviceClassification(BaseModel):
    """Output of the device/bot classifier.

    When ``is_bot`` is true only ``bot_info`` is meaningful; every human-client
    field stays in its absent default.
    """

    model_config = ConfigDict(frozen=True)

    is_bot: bool = False
    bot_info: BotInfo = Field(default_factory=BotInfo)
    rendering_engine: RenderingEngine = Field(default_factory=RenderingEngine)
    client_type: str | None = None
    client_name: str | None = None
    client_brand: str | None = None
    client_model: str | None = None
    os_meta: OsMeta = Field(default_factory=OsMeta)

    @classmethod
    def absent(cls) -> "DeviceClassification":
        """Result used when the classifier failed or is unavailable."""
        return cls()

    @property
    def has_client_identity(self) -> bool:
        """True when any human-client field carries a value."""
        return bool(
            self.rendering_engine.name
            or not self.rendering_engine.version.is_absent
            or self.client_type
            or self.client_name
            or self.client_brand
            or self.client_model
            or self.os_meta.name
            or self.os_meta.short_name
            or self.os_meta.version
            or self.os_meta.platform
        )

    def check_consistency(self) -> None:
        """Raise InternalInconsistencyError if both bot and client identities are set."""
        if self.is_bot and self.has_client_identity:
            raise InternalInconsistencyError(
                f"Bot '{self.bot_info.name}' reported together with client data "
                f"(type={self.client_type}, engine={self.rendering_engine.name})"
            )

    def bot_only(self) -> "DeviceClassification":
        """Copy keeping the bot identity and dropping all human-client fields."""
        return DeviceClassification(is_bot=self.is_bot, bot_info=self.bot_info)
