"""Test fixtures for CLI tests."""

from collections.abc import Callable, Generator
from contextlib import AbstractContextManager
from unittest.mock import patch

import pytest

from tests.test_utils.mock_helpers import FakeShellRunner, create_fake_git


@pytest.fixture
def patch_shell() -> Callable[[FakeShellRunner], AbstractContextManager[object]]:
    """Patch the shell adapter factory used by the CLI commands."""

    def _patch(runner: FakeShellRunner) -> AbstractContextManager[object]:
        return patch(
            "drupal_artifact_builder.artifact.service.create_shell_adapter",
            return_value=runner,
        )

    return _patch


@pytest.fixture
def clean_git(
    patch_shell: Callable[[FakeShellRunner], AbstractContextManager[object]],
) -> Generator[FakeShellRunner, None, None]:
    """A clean working tree on branch ``main`` wired into the CLI."""
    runner = create_fake_git(branch="main")
    with patch_shell(runner):
        yield runner
