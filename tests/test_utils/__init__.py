"""Test utility functions."""

from tests.test_utils.mock_helpers import (
    FakeShellRunner,
    create_fake_git,
    git_status_output,
    make_project_tree,
)


__all__ = [
    "FakeShellRunner",
    "create_fake_git",
    "git_status_output",
    "make_project_tree",
]
