"""Preflight checks run before any spec is executed."""

import asyncio
import logging
import re

import aiohttp
from yarl import URL

log = logging.getLogger(__name__)

MINIMUM_PHANTOMJS_VERSION = (1, 3, 0)

VERSION_PATTERN = re.compile(r"(\d+)\.(\d+)(?:\.(\d+))?")


async def runner_available(
    session: aiohttp.ClientSession, jasmine_url: str, timeout: float = 15
) -> bool:
    """Check that the Jasmine runner page can be loaded.

    Args:
        session: HTTP session used for the request
        jasmine_url: URL of the Jasmine runner page
        timeout: Seconds to wait for the response

    Returns:
        True if the page responded with HTTP 200

    """
    url = URL(jasmine_url)
    log.info("Checking Jasmine runner at %s", url)

    try:
        async with session.get(
            url, timeout=aiohttp.ClientTimeout(total=timeout)
        ) as response:
            if response.status == 200:
                return True
            log.error(
                "Jasmine test runner fails with response code %d", response.status
            )
            return False
    except (aiohttp.ClientError, TimeoutError) as e:
        log.error("Jasmine test runner not available at %s: %s", url, e)
        return False


def parse_version(output: str) -> tuple[int, int, int] | None:
    """Extract a major.minor[.patch] version from command output."""
    if (match := VERSION_PATTERN.search(output)) is None:
        return None
    major, minor, patch = match.groups()
    return int(major), int(minor), int(patch or 0)


async def phantomjs_bin_valid(phantomjs_bin: str) -> bool:
    """Check that the PhantomJS binary exists and is recent enough."""
    try:
        process = await asyncio.create_subprocess_exec(
            phantomjs_bin,
            "--version",
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.DEVNULL,
        )
    except OSError as e:
        log.error("PhantomJS executable couldn't be run at %s: %s", phantomjs_bin, e)
        return False

    stdout, _ = await process.communicate()
    output = stdout.decode(errors="replace").strip()

    if process.returncode != 0 or (version := parse_version(output)) is None:
        log.error("PhantomJS executable doesn't seem to work: %r", output)
        return False

    if version < MINIMUM_PHANTOMJS_VERSION:
        log.error(
            "PhantomJS version %s is too old, at least %s is required",
            ".".join(map(str, version)),
            ".".join(map(str, MINIMUM_PHANTOMJS_VERSION)),
        )
        return False

    log.debug("Using PhantomJS %s", output)
    return True
