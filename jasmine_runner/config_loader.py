"""Load runner configuration from YAML files."""

import asyncio
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from jasmine_runner.config import RunnerConfig

log = logging.getLogger(__name__)


async def load_runner_config(config_path: Path) -> RunnerConfig:
    """Load and validate a runner configuration file.

    Args:
        config_path: Path to a YAML file holding a mapping of RunnerConfig options

    Returns:
        The validated configuration

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, not valid YAML, or fails validation

    """
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    content = await asyncio.to_thread(config_path.read_text)

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty config file: {config_path}")

    if not isinstance(data, dict):
        raise ValueError(
            f"Invalid runner config schema in {config_path}: expected a mapping"
        )

    try:
        config = RunnerConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid runner config schema in {config_path}: {e}") from e

    log.debug("Loaded runner config from %s", config_path)
    return config
