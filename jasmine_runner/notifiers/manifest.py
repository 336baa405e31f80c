"""Notifier manifest definition for the plugin system."""

import sys
from collections.abc import Callable, Mapping
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from jasmine_runner.notifiers.base import Notifier

ConfigT = TypeVar("ConfigT", bound=BaseModel)


class InvalidNotifierConfigError(ValueError):
    """Raised when the options given for a notifier do not validate."""


@dataclass(frozen=True, kw_only=True)
class NotifierManifest(Generic[ConfigT]):
    """Manifest describing a notifier plugin.

    Holds the configuration class, the factory that creates the notifier and
    the platforms whose notification command the notifier drives. Plugins
    are only imported once their key is requested.
    """

    key: str
    config_cls: type[ConfigT]
    notifier_factory: Callable[[ConfigT], AbstractAsyncContextManager[Notifier]]
    # Prefixes of sys.platform values
    platforms: tuple[str, ...]

    def supports(self, platform: str | None = None) -> bool:
        """Return True if the notifier works on the platform (default: current)."""
        return (platform or sys.platform).startswith(self.platforms)

    def create(
        self, options: Mapping[str, Any]
    ) -> AbstractAsyncContextManager[Notifier]:
        """Validate the notifier options and return the notifier factory context.

        Raises:
            InvalidNotifierConfigError: If the options do not validate

        """
        try:
            config = self.config_cls.model_validate(dict(options))
        except ValidationError as e:
            raise InvalidNotifierConfigError(
                f"Invalid options for notifier '{self.key}': {e}"
            ) from e
        return self.notifier_factory(config)
