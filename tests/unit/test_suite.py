"""Tests for suite name extraction."""

from collections.abc import Callable
from pathlib import Path

import pytest

from jasmine_runner.config import RunnerConfig
from jasmine_runner.suite import jasmine_suite, suite_name_for

WriteSpec = Callable[[str, str], Path]


class TestSuiteNameFor:
    """Tests for suite_name_for function."""

    def test_returns_empty_for_spec_dir(self) -> None:
        """Running the spec directory runs all suites without a filter."""
        assert suite_name_for("spec/javascripts") == ""

    def test_returns_empty_for_custom_spec_dir(self) -> None:
        """Honors a configured spec directory."""
        assert suite_name_for("test/js", spec_dir="test/js") == ""

    def test_extracts_first_describe(self, write_spec: WriteSpec) -> None:
        """Uses the first describe call of the file."""
        spec = write_spec(
            "models_spec.js",
            "// Models\n"
            "describe('Models', function() {\n"
            "  describe('User', function() {});\n"
            "});\n",
        )

        assert suite_name_for(spec) == "?spec=Models"

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ('describe("Router", function() {', "?spec=Router"),
            ("describe 'Router', ->", "?spec=Router"),
            ('describe "Router", ->', "?spec=Router"),
            ("describe ('Router', function() {", "?spec=Router"),
        ],
    )
    def test_supports_describe_styles(
        self, write_spec: WriteSpec, line: str, expected: str
    ) -> None:
        """Matches JavaScript and CoffeeScript describe calls."""
        spec = write_spec("router_spec.coffee", f"{line}\n")

        assert suite_name_for(spec) == expected

    def test_escapes_query(self, write_spec: WriteSpec) -> None:
        """Escapes characters that are not allowed in a URI."""
        spec = write_spec("view_spec.js", 'describe("Todo list #1 view", ->\n')

        assert suite_name_for(spec) == "?spec=Todo%20list%20%231%20view"

    def test_keeps_reserved_characters(self, write_spec: WriteSpec) -> None:
        """Leaves reserved URI characters untouched."""
        spec = write_spec("api_spec.js", "describe('API: users/list', ->\n")

        assert suite_name_for(spec) == "?spec=API:%20users/list"

    def test_returns_empty_without_describe(self, write_spec: WriteSpec) -> None:
        """Returns an empty filter when no describe call is found."""
        spec = write_spec("helper.js", "var helper = function() {};\n")

        assert suite_name_for(spec) == ""

    def test_raises_for_missing_file(self, tmp_path: Path) -> None:
        """Raises FileNotFoundError for a file that does not exist."""
        with pytest.raises(FileNotFoundError):
            suite_name_for(tmp_path / "missing_spec.js")


def test_jasmine_suite_appends_filter(write_spec: WriteSpec) -> None:
    """Appends the suite filter to the runner URL."""
    spec = write_spec("models_spec.js", "describe('Models', ->\n")
    config = RunnerConfig(jasmine_url="http://localhost:3000/jasmine")

    assert jasmine_suite(spec, config) == "http://localhost:3000/jasmine?spec=Models"


def test_jasmine_suite_runs_all_for_spec_dir() -> None:
    """Uses the bare runner URL for the spec directory."""
    config = RunnerConfig(jasmine_url="http://localhost:3000/jasmine")

    assert jasmine_suite("spec/javascripts", config) == "http://localhost:3000/jasmine"
