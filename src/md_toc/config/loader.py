"""Settings loading and merging logic."""

import json
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from md_toc.config.defaults import CONFIG_SEARCH_PATHS, ENV_PREFIX
from md_toc.config.models import TocSettings
from md_toc.exceptions import SettingsError
from md_toc.utils.logging import get_logger

logger = get_logger("config.loader")

YAML_SUFFIXES = (".yml", ".yaml")


def find_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file.

    Args:
        explicit_path: Explicitly specified config file path.

    Returns:
        Path to config file if found, None otherwise.

    Raises:
        FileNotFoundError: If an explicit path is given but does not exist.
    """
    if explicit_path is not None:
        if explicit_path.exists():
            return explicit_path
        raise FileNotFoundError(f"Config file not found: {explicit_path}")

    for search_path in CONFIG_SEARCH_PATHS:
        if search_path.exists():
            return search_path

    return None


def load_config_file(path: Path) -> dict[str, Any]:
    """Load settings from a JSON or YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed configuration dictionary (empty for an empty YAML file).

    Raises:
        SettingsError: If the file cannot be read, is not UTF-8, is not valid
            JSON/YAML, or does not hold a mapping.
    """
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise SettingsError(f"Failed to read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SettingsError(f"Failed to decode {path} as UTF-8: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SettingsError(f"Failed to parse {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Expected a mapping in {path}, got {type(data).__name__}")
    return data


def env_overrides() -> dict[str, Any]:
    """Collect overrides from MD_TOC_* environment variables."""
    overrides: dict[str, Any] = {}
    for field in ("folder_class", "file_class", "collapsible_href"):
        if value := os.environ.get(f"{ENV_PREFIX}{field.upper()}"):
            overrides[field] = value
    return overrides


def load_settings(
    config_path: Optional[Path] = None,
    **overrides: Any,
) -> TocSettings:
    """Load renderer settings.

    Settings are merged from the following sources (in order of priority):
    1. Keyword overrides that are not None (highest priority)
    2. MD_TOC_* environment variables
    3. Config file (if found)
    4. Default values (lowest priority)

    Args:
        config_path: Explicit config file path.
        **overrides: Individual setting overrides.

    Returns:
        Validated settings.

    Raises:
        SettingsError: If the merged values fail validation.
    """
    data: dict[str, Any] = {}

    found_config = find_config_file(config_path)
    if found_config is not None:
        logger.debug(f"Loading settings from {found_config}")
        data.update(load_config_file(found_config))

    data.update(env_overrides())
    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return TocSettings.model_validate(data)
    except ValidationError as e:
        source = found_config or "defaults"
        raise SettingsError(f"Invalid settings (from {source}): {e}") from e
