"""Configuration for the notify-send notifier."""

from pydantic import BaseModel, ConfigDict


class NotifySendConfig(BaseModel):
    """Configuration for the notify-send notifier."""

    model_config = ConfigDict(extra="forbid")

    binary: str = "notify-send"
    app_name: str = "Jasmine"
    # None leaves the expiry to the notification server
    expire_time_ms: int | None = None
