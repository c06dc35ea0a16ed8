"""Configuration for the artifact builder."""

from .models import ENV_PREFIX, ArtifactBuilderSettings
from .project_config import PROJECT_CONFIG_FILENAMES, find_config_file, load_settings


__all__ = [
    "ENV_PREFIX",
    "PROJECT_CONFIG_FILENAMES",
    "ArtifactBuilderSettings",
    "find_config_file",
    "load_settings",
]
