"""Settings for the pipemon command line.

Settings live in ``.pipemon/config.yaml`` relative to the working directory
unless another path is given. A missing file means defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from pipeline_monitor.exceptions import SettingsError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(".pipemon")
CONFIG_FILE = CONFIG_DIR / "config.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class MonitorSettings(BaseModel):
    """User-tunable defaults for rendering."""

    default_preset: str = Field(
        default="riscv_rv32i",
        description="Preset rendered when no --preset is given",
    )
    template_dir: Optional[Path] = Field(
        default=None,
        description="Directory holding an alternative monitor.sv.j2",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level when no -v flag is given",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings(path: Optional[Union[str, Path]] = None) -> MonitorSettings:
    """Load settings from YAML.

    Args:
        path: Settings file; defaults to ``.pipemon/config.yaml``

    Returns:
        Parsed MonitorSettings, or defaults if the file does not exist

    Raises:
        SettingsError: If the file is unreadable, not valid YAML or fails
            validation
    """
    path = Path(path) if path else CONFIG_FILE
    if not path.exists():
        logger.info("No settings file at %s, using defaults", path)
        return MonitorSettings()

    logger.debug("Loading settings from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SettingsError(f"{path}: invalid YAML: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SettingsError(f"{path}: cannot read settings: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(f"{path}: expected a mapping, got {type(data).__name__}")

    try:
        return MonitorSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"{path}: {e}") from e


def settings_to_yaml(settings: MonitorSettings) -> str:
    """Convert settings to a YAML string."""
    data = settings.model_dump(exclude_none=True, mode="json")
    return yaml.dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def save_settings(
    settings: MonitorSettings,
    path: Optional[Union[str, Path]] = None,
) -> Path:
    """Write settings to YAML, creating the parent directory.

    Returns:
        Path to the saved file
    """
    path = Path(path) if path else CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(settings_to_yaml(settings))
    return path
