"""Execution of the PhantomJS script that drives the Jasmine runner page."""

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from jasmine_runner.config import RunnerConfig

log = logging.getLogger(__name__)

SCRIPT_NAME = "run-jasmine.js"


def phantomjs_script() -> Path:
    """Return the path of the PhantomJS script shipped with the package."""
    return (Path(__file__).parent / "scripts" / SCRIPT_NAME).resolve()


def phantomjs_command(config: RunnerConfig) -> Sequence[str]:
    """Return the PhantomJS binary and script to execute."""
    script = config.phantomjs_script or phantomjs_script()
    return [config.phantomjs_bin, str(script)]


async def run_phantomjs(command: Sequence[str], suite_url: str) -> str:
    """Run PhantomJS against a runner URL and return what it wrote to stdout.

    The exit status is not checked: the script exits non-zero when specs
    fail but still reports the result on stdout.

    Raises:
        FileNotFoundError: If the PhantomJS binary does not exist

    """
    process = await asyncio.create_subprocess_exec(
        *command,
        suite_url,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()

    log.debug("PhantomJS exited with status %s", process.returncode)
    if stderr:
        log.debug("PhantomJS stderr: %s", stderr.decode(errors="replace").strip())

    return stdout.decode(errors="replace")
