"""Shared fixtures."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from aioresponses import aioresponses as aioresponses_cls


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls, None, None]:
    """Mock aiohttp requests."""
    with aioresponses_cls() as mocked:
        yield mocked


@pytest.fixture
def write_spec(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a function to write spec files under spec/javascripts."""

    def _write(name: str, content: str) -> Path:
        spec_file = tmp_path / "spec" / "javascripts" / name
        spec_file.parent.mkdir(parents=True, exist_ok=True)
        spec_file.write_text(content)
        return spec_file

    return _write
