"""notify-send notifier manifest."""

from jasmine_runner.notifiers.manifest import NotifierManifest
from jasmine_runner.notifiers.notify_send.config import NotifySendConfig
from jasmine_runner.notifiers.notify_send.notifier import NotifySendNotifier

notify_send_manifest = NotifierManifest(
    key="notify-send",
    config_cls=NotifySendConfig,
    notifier_factory=NotifySendNotifier.from_config,
    platforms=("linux", "freebsd", "openbsd"),
)
