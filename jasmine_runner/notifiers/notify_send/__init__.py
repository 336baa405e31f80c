"""notify-send notifier module."""

from jasmine_runner.notifiers.notify_send.config import NotifySendConfig
from jasmine_runner.notifiers.notify_send.manifest import notify_send_manifest
from jasmine_runner.notifiers.notify_send.notifier import NotifySendNotifier

__all__ = ["NotifySendConfig", "NotifySendNotifier", "notify_send_manifest"]
