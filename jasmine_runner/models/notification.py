"""Models for notifications sent after a spec run."""

from dataclasses import dataclass
from typing import Literal

NotificationImage = Literal["success", "failed"]


@dataclass(frozen=True, kw_only=True)
class Notification:
    """A message to deliver through a notifier.

    Priority follows the usual -2 (lowest) to 2 (emergency) scale.
    """

    message: str
    title: str
    image: NotificationImage = "success"
    priority: int = 0
