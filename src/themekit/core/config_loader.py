"""
Theme configuration persistence.

Handles reading and writing ThemeConfig to themekit.yaml in the project
root. The file holds the chosen seed colours, the fallback defaults and the
acceptance threshold.

Default location: {project_root}/themekit.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ThemeConfigError
from .ir.config import ThemeConfig

logger = logging.getLogger(__name__)

THEME_CONFIG_FILE = "themekit.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_theme_config_path(project_root: Path) -> Path:
    """Get the themekit.yaml file path."""
    return project_root / THEME_CONFIG_FILE


def theme_config_exists(project_root: Path) -> bool:
    """Check if a themekit.yaml exists in the project."""
    return get_theme_config_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def _parse_theme_config(data: dict[str, Any]) -> ThemeConfig:
    if not isinstance(data, dict):
        raise ThemeConfigError(f"Expected a mapping at the top level, got {type(data).__name__}")
    return ThemeConfig.model_validate(data)


def load_theme_config(project_root: Path, *, use_defaults: bool = True) -> ThemeConfig:
    """Load ThemeConfig from themekit.yaml.

    Args:
        project_root: Root directory of the project.
        use_defaults: If True, return the default ThemeConfig when the file
            doesn't exist or is empty.

    Returns:
        ThemeConfig instance.

    Raises:
        ThemeConfigError: If file doesn't exist (when use_defaults=False) or invalid.
    """
    config_path = get_theme_config_path(project_root)

    if not config_path.exists():
        if use_defaults:
            logger.debug("No themekit.yaml found, using defaults")
            return ThemeConfig()
        raise ThemeConfigError(f"Theme config not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)

        if not data:
            if use_defaults:
                logger.warning(f"Empty themekit.yaml at {config_path}, using defaults")
                return ThemeConfig()
            raise ThemeConfigError(f"Empty or invalid YAML in {config_path}")

        config = _parse_theme_config(data)
        logger.debug(f"Loaded theme config from {config_path}")
        return config

    except yaml.YAMLError as e:
        raise ThemeConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except ValidationError as e:
        raise ThemeConfigError(f"Invalid theme config schema in {config_path}: {e}") from e


def save_theme_config(project_root: Path, config: ThemeConfig) -> Path:
    """Save ThemeConfig to themekit.yaml.

    Args:
        project_root: Root directory of the project.
        config: ThemeConfig to save.

    Returns:
        Path to the saved themekit.yaml file.
    """
    config_path = get_theme_config_path(project_root)

    data = config.model_dump(mode="json", exclude_none=True)

    config_path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved theme config to {config_path}")
    return config_path
