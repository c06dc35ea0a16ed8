"""Core test fixtures for the drupal_artifact_builder project."""

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from drupal_artifact_builder.adapters.file_adapter import FileSystemAdapter
from drupal_artifact_builder.config.models import ENV_PREFIX
from drupal_artifact_builder.core.logging import configure_structlog
from tests.test_utils.mock_helpers import FakeShellRunner, create_fake_git, make_project_tree


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def file_adapter() -> FileSystemAdapter:
    return FileSystemAdapter()


@pytest.fixture
def fake_git() -> FakeShellRunner:
    """Shell runner reporting a clean tree on branch ``main``."""
    return create_fake_git()


# ---- Project Tree Fixtures ----


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A complete project tree using ``docroot`` as document root."""
    return make_project_tree(tmp_path / "project")


@pytest.fixture
def web_project_root(tmp_path: Path) -> Path:
    """A project tree using ``web`` with a ``docroot`` symlink pointing at it."""
    return make_project_tree(
        tmp_path / "web-project",
        dirs=("web", "config", "drush", "vendor", "scripts"),
        symlinks={"docroot": "web"},
    )


# ---- Test Isolation Fixtures ----


@pytest.fixture(scope="session", autouse=True)
def structlog_configured() -> None:
    """Route structlog through stdlib logging like the CLI does."""
    configure_structlog(logging.INFO)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep the developer's environment and log handlers out of each test."""
    monkeypatch.delenv("GIT_BRANCH", raising=False)
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)

    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level

    yield

    root_logger.handlers = original_handlers
    root_logger.setLevel(original_level)
