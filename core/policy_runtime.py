"""Plugin configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, NonNegativeInt, PositiveInt, ValidationError

logger = logging.getLogger("ws.config")

CONFIG_FILENAME = "hyprland_window_switcher.yaml"


class SwitcherConfig(BaseModel):
    """Effective window switcher settings."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    max_entries: PositiveInt = 10
    hyprctl_path: str = "hyprctl"
    prefix: str = ""
    focus_delay_ms: NonNegativeInt = 150

    @property
    def focus_delay(self) -> float:
        return self.focus_delay_ms / 1000.0


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when empty."""
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def load_plugin_config(config_dir: Path | str) -> SwitcherConfig:
    """Read the plugin config from ``config_dir``; any failure falls back to defaults."""
    path = Path(config_dir) / CONFIG_FILENAME
    if not path.exists():
        logger.info("No window switcher config at %s, using defaults", path)
        return SwitcherConfig()
    try:
        return SwitcherConfig.model_validate(load_yaml(path))
    except OSError as exc:
        logger.warning("Error reading window switcher config %s: %s", path, exc)
    except (yaml.YAMLError, ValidationError, ValueError) as exc:
        logger.warning("Error parsing window switcher config %s: %s", path, exc)
    return SwitcherConfig()
