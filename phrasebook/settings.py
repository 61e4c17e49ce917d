"""Settings for the generated steps.

Defaults ship as ``defaults.yaml`` next to this module. A project file can
override any key, e.g.::

    flash:
      container: "div.alerts"
    json:
      media_type: "application/vnd.api+json"
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from phrasebook.exceptions import SettingsError

logger = logging.getLogger(__name__)

DEFAULTS_FILE = Path(__file__).parent / "defaults.yaml"
SETTINGS_ENV_VAR = "PHRASEBOOK_SETTINGS"


@dataclass(frozen=True)
class Settings:
    """Selectors and names the step bodies depend on."""

    flash_container: str = "#flash"
    flash_level_selector: str = ".{level}"
    json_media_type: str = "application/json"
    json_state_key: str = "json"
    wait_timeout: float = 0

    def flash_level(self, level: str) -> str:
        """CSS selector for the flash element of ``level`` inside the container."""
        return self.flash_level_selector.format(level=level)


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(f"Could not read settings from {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise SettingsError(f"Settings section '{name}' must be a mapping")
    return section


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings from the packaged defaults plus an optional override file.

    Args:
        path: Override file. Falls back to ``$PHRASEBOOK_SETTINGS`` when omitted.

    Returns:
        Settings instance

    Raises:
        SettingsError: If a file cannot be parsed or has the wrong shape
    """
    data = _read_yaml(DEFAULTS_FILE)

    override = path or os.environ.get(SETTINGS_ENV_VAR)
    if override:
        logger.info("Loading phrasebook settings from %s", override)
        data = _merge(data, _read_yaml(Path(override)))

    flash = _section(data, "flash")
    json_section = _section(data, "json")
    browser = _section(data, "browser")

    try:
        wait_timeout = float(browser.get("wait_timeout", 0) or 0)
    except (TypeError, ValueError) as e:
        raise SettingsError(f"browser.wait_timeout must be a number: {e}") from e

    return Settings(
        flash_container=str(flash.get("container", "#flash")),
        flash_level_selector=str(flash.get("level_selector", ".{level}")),
        json_media_type=str(json_section.get("media_type", "application/json")),
        json_state_key=str(json_section.get("state_key", "json")),
        wait_timeout=wait_timeout,
    )
