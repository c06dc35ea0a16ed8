"""Configuration models for the artifact builder."""

import logging
from typing import Annotated, Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from drupal_artifact_builder.adapters.shell_adapter import DEFAULT_TIMEOUT


ENV_PREFIX = "ARTIFACT_BUILDER_"


class ArtifactBuilderSettings(BaseSettings):
    """Settings for one artifact build run.

    Precedence order (highest to lowest):
    1. Environment variables
    2. Constructor arguments (config file data)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override file configuration."""
        return (env_settings, init_settings)

    git_branch: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GIT_BRANCH", "git_branch"),
        description="Branch name to use instead of the checked-out branch",
    )

    extra_paths: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Extra files or folders added to the artifact",
    )

    command_timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Timeout in seconds for every shell command",
    )

    log_level: str = "WARNING"

    @field_validator("git_branch", mode="before")
    @classmethod
    def normalize_git_branch(cls, v: Any) -> str | None:
        if v is None:
            return None
        branch = str(v).strip()
        return branch or None

    @field_validator("extra_paths", mode="before")
    @classmethod
    def decode_extra_paths(cls, v: Any) -> list[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return [path.strip() for path in v.split(",") if path.strip()]
        if isinstance(v, list | tuple):
            return [str(path).strip() for path in v if str(path).strip()]
        raise ValueError("extra_paths must be a comma separated string or a list")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v

    def get_log_level_int(self) -> int:
        """Get the configured log level as a logging module constant."""
        return int(getattr(logging, self.log_level, logging.WARNING))


__all__ = ["ENV_PREFIX", "ArtifactBuilderSettings"]
