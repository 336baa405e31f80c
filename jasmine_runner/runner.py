"""Run Jasmine specs through PhantomJS and report the results.

The runner executes the PhantomJS script for each spec file, evaluates the
JSON result it writes to stdout, logs the outcome and sends optional
notifications.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from jasmine_runner.config import RunnerConfig
from jasmine_runner.models.notification import Notification
from jasmine_runner.models.result import JasmineResult, Stats
from jasmine_runner.notifiers.base import NotificationError, Notifier
from jasmine_runner.phantomjs import phantomjs_command, run_phantomjs
from jasmine_runner.suite import jasmine_suite

log = logging.getLogger(__name__)


def run_message(paths: Sequence[str], config: RunnerConfig) -> str:
    """Return the message announcing a run."""
    if config.message:
        return config.message
    if list(paths) == [config.spec_dir]:
        return "Run all specs"
    return f"Run specs {' '.join(paths)}"


def format_stats(stats: Stats) -> str:
    """Format run statistics for display."""
    plural = "" if stats.failures == 1 else "s"
    return (
        f"Jasmine ran {stats.specs} specs, {stats.failures} failure{plural} "
        f"in {stats.time}s."
    )


def format_failures(result: JasmineResult, stats_message: str) -> str:
    """Combine the failed spec messages and the stats into one message."""
    messages = "".join(
        f"Spec '{spec.description}' failed with '{spec.error_message or ''}'!\n"
        for spec in result.failed_specs
    )
    return messages + stats_message


@dataclass(frozen=True, kw_only=True)
class JasmineRunner:
    """Runs spec files one after the other and reports each result."""

    config: RunnerConfig
    notifier: Notifier | None = None

    async def run(self, paths: Sequence[str]) -> Sequence[JasmineResult]:
        """Run the supplied specs.

        Args:
            paths: Spec files, or the spec directory to run all specs

        Returns:
            The result for each path, in order. Empty if no paths were given.

        """
        if not paths:
            return []

        log.info(run_message(paths, self.config))

        results: list[JasmineResult] = []
        for path in paths:
            output = await self._run_jasmine_spec(path)
            results.append(await self.evaluate_result(output))

        return results

    async def _run_jasmine_spec(self, path: str) -> str:
        """Execute the PhantomJS script for a single spec file."""
        suite = jasmine_suite(path, self.config)
        log.info("Run Jasmine tests: %s", suite)
        return await run_phantomjs(phantomjs_command(self.config), suite)

    async def evaluate_result(self, output: str) -> JasmineResult:
        """Decode the PhantomJS output and report it.

        Raises:
            pydantic.ValidationError: If the output is not a valid result

        """
        result = JasmineResult.model_validate_json(output)

        if result.error is not None:
            await self._notify_runtime_error(result.error)
        elif result.stats is not None:
            await self._notify_spec_result(result, result.stats)

        return result

    async def _notify_runtime_error(self, error: str) -> None:
        """Report an error that kept the specs from running."""
        message = f"An error occurred: {error}"
        log.error(message)
        if self.config.notification:
            await self._notify(
                Notification(
                    message=message, title="Jasmine error", image="failed", priority=2
                )
            )

    async def _notify_spec_result(self, result: JasmineResult, stats: Stats) -> None:
        """Report a finished spec run, success or failure."""
        message = format_stats(stats)

        if stats.failures != 0:
            await self._notify_spec_failures(result, message)
            return

        log.info(message)
        if self.config.notification and not self.config.hide_success:
            await self._notify(Notification(message=message, title="Jasmine results"))

    async def _notify_spec_failures(
        self, result: JasmineResult, stats_message: str
    ) -> None:
        """Report all spec failures of a run as a single message."""
        message = format_failures(result, stats_message)
        log.error(message)
        if self.config.notification:
            await self._notify(
                Notification(
                    message=message,
                    title="Jasmine results",
                    image="failed",
                    priority=2,
                )
            )

    async def _notify(self, notification: Notification) -> None:
        if self.notifier is None:
            return
        try:
            await self.notifier.notify(notification)
        except NotificationError as e:
            log.warning("Notification could not be delivered: %s", e)
