"""osascript notifier manifest."""

from jasmine_runner.notifiers.manifest import NotifierManifest
from jasmine_runner.notifiers.osascript.config import OsascriptConfig
from jasmine_runner.notifiers.osascript.notifier import OsascriptNotifier

osascript_manifest = NotifierManifest(
    key="osascript",
    config_cls=OsascriptConfig,
    notifier_factory=OsascriptNotifier.from_config,
    platforms=("darwin",),
)
