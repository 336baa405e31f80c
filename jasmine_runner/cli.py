"""CLI entry point for the Jasmine runner."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Mapping, Sequence
from contextlib import AsyncExitStack
from pathlib import Path
from typing import Any

import aiohttp

from jasmine_runner.checks import phantomjs_bin_valid, runner_available
from jasmine_runner.config import RunnerConfig
from jasmine_runner.config_loader import load_runner_config
from jasmine_runner.models.result import JasmineResult
from jasmine_runner.notifiers.base import Notifier
from jasmine_runner.notifiers.loading import load_notifier_manifest
from jasmine_runner.runner import JasmineRunner

log = logging.getLogger("jasmine_runner")


async def preflight(config: RunnerConfig) -> bool:
    """Check that both the runner page and PhantomJS are usable."""
    async with aiohttp.ClientSession() as session:
        available = await runner_available(session, config.jasmine_url)
    return available and await phantomjs_bin_valid(config.phantomjs_bin)


async def build_config(
    config_path: Path | None, overrides: Mapping[str, Any]
) -> RunnerConfig:
    """Load the config file, if any, and apply command line overrides."""
    config = await load_runner_config(config_path) if config_path else RunnerConfig()
    return RunnerConfig.model_validate({**config.model_dump(), **overrides})


def exit_code_for(results: Sequence[JasmineResult]) -> int:
    """Return 1 if any run errored or had failures."""
    return 0 if all(result.successful for result in results) else 1


async def run(
    paths: Sequence[str],
    config: RunnerConfig,
    skip_checks: bool = False,
) -> int:
    """Run the specs and return exit code."""
    if not skip_checks and not await preflight(config):
        return 1

    if not paths:
        paths = [config.spec_dir]

    async with AsyncExitStack() as stack:
        notifier: Notifier | None = None
        if config.notification:
            log.debug("Loading notifier: %s", config.notifier)
            manifest = load_notifier_manifest(config.notifier)
            notifier = await stack.enter_async_context(
                manifest.create(config.notifier_config)
            )

        runner = JasmineRunner(config=config, notifier=notifier)
        results = await runner.run(paths)

    return exit_code_for(results)


def parse_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the config options given on the command line."""
    overrides: dict[str, Any] = {
        key: value
        for key, value in (
            ("jasmine_url", args.jasmine_url),
            ("phantomjs_bin", args.phantomjs_bin),
            ("notification", args.notification),
            ("hide_success", args.hide_success),
            ("message", args.message),
            ("notifier", args.notifier),
        )
        if value is not None
    }
    if args.notifier_config is not None:
        overrides["notifier_config"] = json.loads(args.notifier_config)
    return overrides


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run Jasmine specs headless through PhantomJS"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Spec files to run (default: the spec directory, i.e. all specs)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with runner options",
    )
    parser.add_argument("--jasmine-url", help="URL of the Jasmine test runner")
    parser.add_argument("--phantomjs-bin", help="Location of the PhantomJS binary")
    parser.add_argument(
        "--notification",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show system notifications",
    )
    parser.add_argument(
        "--hide-success",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Hide the success notification",
    )
    parser.add_argument("--message", help="Message logged when the run starts")
    parser.add_argument(
        "--notifier",
        help="Notifier key (notify-send, osascript)",
    )
    parser.add_argument(
        "--notifier-config",
        help="JSON configuration for the notifier",
    )
    parser.add_argument(
        "--skip-checks",
        action="store_true",
        help="Do not check the runner URL and PhantomJS binary before running",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    async def _main() -> int:
        config = await build_config(args.config, parse_overrides(args))
        return await run(args.paths, config, skip_checks=args.skip_checks)

    sys.exit(asyncio.run(_main()))


if __name__ == "__main__":  # pragma: no cover
    main()
