"""Loading of notifiers from entry points."""

import logging
import sys
from importlib.metadata import entry_points
from typing import Any

from jasmine_runner.config import default_notifier
from jasmine_runner.notifiers.manifest import NotifierManifest

log = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "jasmine_runner.notifiers"


class NotifierNotFoundError(Exception):
    """Raised when a notifier is not found."""


def load_notifier_manifest(key: str | None = None) -> NotifierManifest[Any]:
    """Load a notifier manifest by key.

    A notifier that does not support the current platform is still returned;
    its command is expected to fail, so a warning is logged.

    Args:
        key: The notifier key as registered in pyproject.toml
             (e.g., "notify-send", "osascript"). None selects the default
             notifier of the current platform.

    Returns:
        The notifier manifest instance

    Raises:
        NotifierNotFoundError: If no notifier with the given key is found

    """
    key = key or default_notifier()
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: NotifierManifest[Any] = entry.load()
            if not manifest.supports():
                log.warning(
                    "Notifier '%s' is not supported on %s, use '%s' instead",
                    key,
                    sys.platform,
                    default_notifier(),
                )
            return manifest

    available = sorted(e.name for e in entries)
    raise NotifierNotFoundError(
        f"Notifier '{key}' not found. Available notifiers: {available}. "
        f"The default on {sys.platform} is '{default_notifier()}'."
    )
