"""Models for the JSON result written by the PhantomJS script."""

from collections.abc import Sequence
from typing import Self

from pydantic import Field, model_validator

from jasmine_runner.models.base import Model


class SpecResult(Model):
    """Outcome of a single Jasmine spec."""

    description: str = Field(..., description="Human-readable spec description")
    error_message: str | None = Field(
        default=None, description="Failure message reported by Jasmine"
    )
    # The shipped script only reports failing specs and omits the flag
    passed: bool = Field(default=False, description="Whether the spec passed")

    @property
    def failed(self) -> bool:
        """Return True if the spec did not pass."""
        return not self.passed


class SuiteResult(Model):
    """A described suite and the specs reported for it."""

    description: str = Field(default="", description="Suite description")
    specs: Sequence[SpecResult] = Field(default_factory=list)


class Stats(Model):
    """Run statistics."""

    specs: int = Field(..., description="Number of specs run")
    failures: int = Field(..., description="Number of failed specs")
    # Integer seconds stay integers
    time: int | float = Field(..., description="Elapsed time in seconds")


class JasmineResult(Model):
    """Complete result of one PhantomJS run.

    Either ``error`` is set (the runner page could not execute the specs) or
    ``stats`` and ``suites`` describe the run.
    """

    error: str | None = Field(default=None, description="Runtime error, if any")
    stats: Stats | None = Field(default=None)
    suites: Sequence[SuiteResult] = Field(default_factory=list)

    @model_validator(mode="after")
    def _require_stats_without_error(self) -> Self:
        if self.error is None and self.stats is None:
            raise ValueError("result must contain either 'error' or 'stats'")
        return self

    @property
    def failed_specs(self) -> Sequence[SpecResult]:
        """Failed specs in suite order."""
        return [spec for suite in self.suites for spec in suite.specs if spec.failed]

    @property
    def successful(self) -> bool:
        """Return True if the run had no error and no failures."""
        if self.error is not None or self.stats is None:
            return False
        return self.stats.failures == 0
