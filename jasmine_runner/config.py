"""Configuration for the Jasmine runner."""

import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

ALL_SPECS_PATH = "spec/javascripts"


def default_notifier() -> str:
    """Return the notifier key for the current platform."""
    return "osascript" if sys.platform == "darwin" else "notify-send"


class RunnerConfig(BaseModel):
    """Options recognized by the runner."""

    jasmine_url: str = "http://localhost:8888/jasmine"
    phantomjs_bin: str = "phantomjs"
    # None uses the script shipped with the package
    phantomjs_script: Path | None = None
    notification: bool = True
    hide_success: bool = False
    spec_dir: str = ALL_SPECS_PATH
    message: str | None = None
    notifier: str = Field(default_factory=default_notifier)
    notifier_config: dict[str, Any] = Field(default_factory=dict)
