"""macOS notification center delivery through AppleScript."""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass

from jasmine_runner.models.notification import Notification
from jasmine_runner.notifiers.base import Notifier, run_notification_command
from jasmine_runner.notifiers.osascript.config import OsascriptConfig

log = logging.getLogger(__name__)


def applescript_string(value: str) -> str:
    """Quote a value as an AppleScript string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass(frozen=True, kw_only=True)
class OsascriptNotifier(Notifier):
    """Notifier backed by ``osascript -e 'display notification ...'``."""

    config: OsascriptConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: OsascriptConfig
    ) -> AsyncGenerator["OsascriptNotifier", None]:
        """Create notifier from configuration."""
        yield cls(config=config)

    def build_script(self, notification: Notification) -> str:
        """Return the AppleScript statement for a notification."""
        script = (
            f"display notification {applescript_string(notification.message)} "
            f"with title {applescript_string(notification.title)}"
        )
        if notification.image == "failed" and self.config.failure_sound:
            script += f" sound name {applescript_string(self.config.failure_sound)}"
        return script

    def build_command(self, notification: Notification) -> Sequence[str]:
        """Return the osascript argv for a notification."""
        return [self.config.binary, "-e", self.build_script(notification)]

    async def notify(self, notification: Notification) -> None:
        """Show the notification in the notification center."""
        log.debug("Sending notification: title=%s", notification.title)
        await run_notification_command(self.build_command(notification))
