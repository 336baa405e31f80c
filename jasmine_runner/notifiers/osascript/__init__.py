"""osascript notifier module."""

from jasmine_runner.notifiers.osascript.config import OsascriptConfig
from jasmine_runner.notifiers.osascript.manifest import osascript_manifest
from jasmine_runner.notifiers.osascript.notifier import OsascriptNotifier

__all__ = ["OsascriptConfig", "OsascriptNotifier", "osascript_manifest"]
