"""Resolve the Jasmine runner URL for a spec file."""

import re
from pathlib import Path
from urllib.parse import quote

from jasmine_runner.config import ALL_SPECS_PATH, RunnerConfig

DESCRIBE_PATTERN = re.compile(r"""describe\s*[("']+(.*?)["')]+""")

# Characters left unescaped in a URI besides letters and digits
URI_SAFE = "-_.!~*'();/?:@&=+$,[]"


def suite_name_for(path: str | Path, spec_dir: str = ALL_SPECS_PATH) -> str:
    """Build the spec filter query for a spec file.

    The file is scanned from the top until the first ``describe`` call; its
    description becomes the ``spec`` filter. The spec directory itself runs
    every suite and gets no filter.

    Args:
        path: Spec file path
        spec_dir: Path that stands for "all specs"

    Returns:
        The escaped query string (e.g. ``?spec=My%20Suite``), or an empty string

    """
    if str(path) == spec_dir:
        return ""

    query_string = ""

    with open(path, encoding="utf-8") as spec_file:
        for line in spec_file:
            if match := DESCRIBE_PATTERN.search(line):
                query_string = f"?spec={match.group(1)}"
                break

    return quote(query_string, safe=URI_SAFE)


def jasmine_suite(path: str | Path, config: RunnerConfig) -> str:
    """Return the runner URL that runs only the suite of the given file."""
    return config.jasmine_url + suite_name_for(path, config.spec_dir)
