"""Tests for BranchResolver."""

from pathlib import Path

import pytest

from drupal_artifact_builder.artifact.branch import CURRENT_BRANCH_COMMAND, BranchResolver
from drupal_artifact_builder.core.errors import BranchUnresolvedError, CommandFailedError
from tests.test_utils.mock_helpers import FakeShellRunner, create_fake_git


ROOT = Path("/srv/site")


def test_override_wins_over_checked_out_branch():
    runner = create_fake_git(branch="feature/login")

    branch = BranchResolver(ROOT, runner, override="release").resolve()

    assert branch == "release"
    assert runner.calls == []


def test_detected_branch_without_override():
    runner = create_fake_git(branch="develop")

    assert BranchResolver(ROOT, runner).resolve() == "develop"
    assert runner.calls == [(" ".join(CURRENT_BRANCH_COMMAND), ROOT)]


@pytest.mark.parametrize("override", [None, "", "   "])
def test_empty_override_falls_back_to_git(override):
    runner = create_fake_git(branch="main")

    assert BranchResolver(ROOT, runner, override=override).resolve() == "main"


def test_detached_head_without_override_fails():
    runner = create_fake_git(branch="")

    with pytest.raises(BranchUnresolvedError, match="GIT_BRANCH"):
        BranchResolver(ROOT, runner).resolve()


def test_git_failure_propagates():
    runner = FakeShellRunner()

    with pytest.raises(CommandFailedError):
        BranchResolver(ROOT, runner).resolve()
