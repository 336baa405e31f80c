"""Abstract base class for notification backends."""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from jasmine_runner.models.notification import Notification

log = logging.getLogger(__name__)


class NotificationError(Exception):
    """Raised when a notification cannot be delivered."""


@dataclass(frozen=True, kw_only=True)
class Notifier(ABC):
    """Abstract base for notification backends."""

    @abstractmethod
    async def notify(self, notification: Notification) -> None:
        """Deliver a notification.

        Args:
            notification: Message, title and severity to show

        Raises:
            NotificationError: If the notification could not be delivered

        """


async def run_notification_command(command: Sequence[str]) -> None:
    """Run a notification command, raising NotificationError on failure."""
    log.debug("Running notification command: %s", command[0])
    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise NotificationError(f"Cannot run {command[0]}: {e}") from e

    _, stderr = await process.communicate()

    if process.returncode != 0:
        raise NotificationError(
            f"{command[0]} failed with exit code {process.returncode}: "
            f"{stderr.decode(errors='replace').strip()}"
        )
