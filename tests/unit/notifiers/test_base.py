"""Tests for the notification command helper."""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from jasmine_runner.notifiers.base import NotificationError, run_notification_command


def _process(returncode: int, stderr: bytes = b"") -> Mock:
    process = Mock()
    process.returncode = returncode
    process.communicate = AsyncMock(return_value=(None, stderr))
    return process


async def test_runs_command() -> None:
    """Runs the command and accepts a zero exit code."""
    with patch(
        "jasmine_runner.notifiers.base.asyncio.create_subprocess_exec",
        new_callable=AsyncMock,
        return_value=_process(0),
    ) as mock_exec:
        await run_notification_command(["notify-send", "title", "message"])

    assert mock_exec.call_args.args == ("notify-send", "title", "message")


async def test_raises_for_failed_command() -> None:
    """Raises NotificationError with the command's stderr."""
    with (
        patch(
            "jasmine_runner.notifiers.base.asyncio.create_subprocess_exec",
            new_callable=AsyncMock,
            return_value=_process(1, b"cannot open display\n"),
        ),
        pytest.raises(NotificationError, match="exit code 1: cannot open display"),
    ):
        await run_notification_command(["notify-send", "title", "message"])


async def test_raises_for_missing_binary() -> None:
    """Raises NotificationError when the binary cannot be started."""
    with (
        patch(
            "jasmine_runner.notifiers.base.asyncio.create_subprocess_exec",
            new_callable=AsyncMock,
            side_effect=FileNotFoundError("notify-send"),
        ),
        pytest.raises(NotificationError, match="Cannot run notify-send"),
    ):
        await run_notification_command(["notify-send", "title", "message"])
