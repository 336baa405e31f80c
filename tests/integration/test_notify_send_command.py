"""Integration tests for notify-send delivery with a fake binary."""

import stat
from pathlib import Path

import pytest

from jasmine_runner.models.notification import Notification
from jasmine_runner.notifiers.base import NotificationError
from jasmine_runner.notifiers.notify_send import NotifySendConfig, NotifySendNotifier


def _fake_binary(path: Path, body: str) -> Path:
    path.write_text(f"#!/bin/sh\n{body}\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


async def test_delivers_arguments(tmp_path: Path) -> None:
    """Passes title and message as separate arguments."""
    record = tmp_path / "args.txt"
    binary = _fake_binary(
        tmp_path / "notify-send", f'for arg in "$@"; do echo "$arg" >> {record}; done'
    )
    notification = Notification(
        message="Jasmine ran 2 specs, 0 failures in 0.1s.", title="Jasmine results"
    )

    async with NotifySendNotifier.from_config(
        NotifySendConfig(binary=str(binary))
    ) as notifier:
        await notifier.notify(notification)

    assert record.read_text().splitlines()[-2:] == [
        "Jasmine results",
        "Jasmine ran 2 specs, 0 failures in 0.1s.",
    ]


async def test_raises_when_binary_fails(tmp_path: Path) -> None:
    """Raises NotificationError when notify-send exits with an error."""
    binary = _fake_binary(
        tmp_path / "notify-send", 'echo "Cannot connect to bus" >&2; exit 1'
    )

    async with NotifySendNotifier.from_config(
        NotifySendConfig(binary=str(binary))
    ) as notifier:
        with pytest.raises(NotificationError, match="Cannot connect to bus"):
            await notifier.notify(Notification(message="m", title="t"))
