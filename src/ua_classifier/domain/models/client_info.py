"""Client software and OS information from the general user-agent classifier."""

from pydantic import BaseModel, ConfigDict, Field

from ua_classifier.domain.models.version_info import VersionInfo


class ClientInfo(BaseModel):
    """Family and version of either the user-agent software or the OS."""

    model_config = ConfigDict(frozen=True)

    family: str | None = None
    version: VersionInfo = Field(default_factory=VersionInfo)
    summary: str | None = None


class GeneralClassification(BaseModel):
    """Output of the general user-agent classifier."""

    model_config = ConfigDict(frozen=True)

    user_agent: ClientInfo = Field(default_factory=ClientInfo)
    os: ClientInfo = Field(default_factory=ClientInfo)
    client_summary: str | None = None

    @classmethod
    def absent(cls) -> "GeneralClassification":
        """Result used when the classifier failed or is unavailable."""
        return cls()
