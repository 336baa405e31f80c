"""Configuration for the osascript notifier."""

from pydantic import BaseModel, ConfigDict


class OsascriptConfig(BaseModel):
    """Configuration for the macOS osascript notifier."""

    model_config = ConfigDict(extra="forbid")

    binary: str = "osascript"
    # Played for failed notifications only
    failure_sound: str | None = "Basso"
