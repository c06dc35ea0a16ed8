"""
Project configuration loading for the artifact builder.

Settings come from multiple sources:
1. Environment variables (highest precedence)
2. Config file given on the command line
3. ``.artifact-builder.yml`` in the project root
4. Default values (lowest precedence)
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from drupal_artifact_builder.config.models import ArtifactBuilderSettings
from drupal_artifact_builder.core.errors import ConfigError
from drupal_artifact_builder.core.structlog_logger import debug_enabled, get_struct_logger


logger = get_struct_logger(__name__)

PROJECT_CONFIG_FILENAMES = (".artifact-builder.yml", ".artifact-builder.yaml")


def find_config_file(root: Path, cli_config_path: str | Path | None = None) -> Path | None:
    """Return the configuration file to load, if any.

    A file passed explicitly must exist; project files are optional.
    """
    if cli_config_path:
        cli_path = Path(cli_config_path).expanduser()
        if not cli_path.is_absolute():
            cli_path = root / cli_path
        if not cli_path.is_file():
            raise ConfigError(
                f"Configuration file not found: {cli_path}",
                {"config_file": str(cli_path)},
            )
        return cli_path

    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = root / filename
        if candidate.is_file():
            return candidate
    return None


def _read_config_file(config_file: Path) -> dict[str, Any]:
    try:
        with config_file.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(
            f"Could not read configuration file {config_file}: {e}",
            {"config_file": str(config_file)},
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration file {config_file} must contain a mapping at the root",
            {"config_file": str(config_file)},
        )
    return data


def load_settings(
    root: Path, cli_config_path: str | Path | None = None
) -> ArtifactBuilderSettings:
    """Load settings for a project root.

    Args:
        root: Project root directory
        cli_config_path: Optional config file path provided via CLI

    Returns:
        Validated settings

    Raises:
        ConfigError: If the config file is missing, malformed, or invalid
    """
    config_file = find_config_file(root, cli_config_path)
    config_data: dict[str, Any] = {}

    if config_file is not None:
        config_data = _read_config_file(config_file)
        logger.debug("loaded_config_file", config_file=str(config_file))
    else:
        logger.debug("no_config_file_found", root=str(root))

    try:
        settings = ArtifactBuilderSettings(**config_data)
    except ValidationError as e:
        exc_info = debug_enabled()
        logger.error("invalid_configuration", error=str(e), exc_info=exc_info)
        raise ConfigError(
            f"Invalid configuration: {e}",
            {"config_file": str(config_file) if config_file else None},
        ) from e

    logger.debug(
        "settings_resolved",
        git_branch=settings.git_branch,
        extra_paths=settings.extra_paths,
        command_timeout=settings.command_timeout,
        log_level=settings.log_level,
    )
    return settings


__all__ = ["PROJECT_CONFIG_FILENAMES", "find_config_file", "load_settings"]
