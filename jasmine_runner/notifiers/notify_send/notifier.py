"""Desktop notifications through libnotify's notify-send."""

import logging
from collections.abc import AsyncGenerator, Mapping, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Literal

from jasmine_runner.models.notification import Notification, NotificationImage
from jasmine_runner.notifiers.base import Notifier, run_notification_command
from jasmine_runner.notifiers.notify_send.config import NotifySendConfig

log = logging.getLogger(__name__)

IMAGE_TO_ICON: Mapping[NotificationImage, str] = {
    "success": "dialog-information",
    "failed": "dialog-error",
}


def urgency_for(priority: int) -> Literal["low", "normal", "critical"]:
    """Map a -2..2 priority to a libnotify urgency level."""
    if priority >= 2:
        return "critical"
    if priority <= -1:
        return "low"
    return "normal"


@dataclass(frozen=True, kw_only=True)
class NotifySendNotifier(Notifier):
    """Notifier backed by the notify-send command."""

    config: NotifySendConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: NotifySendConfig
    ) -> AsyncGenerator["NotifySendNotifier", None]:
        """Create notifier from configuration."""
        yield cls(config=config)

    def build_command(self, notification: Notification) -> Sequence[str]:
        """Return the notify-send argv for a notification."""
        command = [
            self.config.binary,
            "--app-name",
            self.config.app_name,
            "--urgency",
            urgency_for(notification.priority),
            "--icon",
            IMAGE_TO_ICON[notification.image],
        ]
        if self.config.expire_time_ms is not None:
            command.extend(["--expire-time", str(self.config.expire_time_ms)])
        command.extend(["--", notification.title, notification.message])
        return command

    async def notify(self, notification: Notification) -> None:
        """Show the notification on the desktop."""
        log.debug("Sending notification: title=%s", notification.title)
        await run_notification_command(self.build_command(notification))
