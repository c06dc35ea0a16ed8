"""Tests for PreflightValidator."""

from pathlib import Path

import pytest

from drupal_artifact_builder.artifact.git_status import GIT_STATUS_COMMAND, SHOW_PREFIX_COMMAND
from drupal_artifact_builder.artifact.manifest import compute_manifest
from drupal_artifact_builder.artifact.preflight import PreflightValidator
from drupal_artifact_builder.core.errors import (
    CommandFailedError,
    DirtyWorkingTreeError,
    NotProjectRootError,
)
from tests.test_utils.mock_helpers import (
    FakeShellRunner,
    create_fake_git,
    make_project_tree,
)


class TestAssertRootLocation:
    """Test the project root sanity check."""

    def test_complete_project_passes(self, project_root: Path, fake_git: FakeShellRunner):
        PreflightValidator(project_root, fake_git).assert_root_location()

    def test_symlinked_web_counts_as_document_root(
        self, tmp_path: Path, fake_git: FakeShellRunner
    ):
        root = make_project_tree(
            tmp_path,
            dirs=("public_html", "config"),
            symlinks={"web": "public_html"},
        )

        PreflightValidator(root, fake_git).assert_root_location()

    def test_dangling_symlink_counts_as_entry(
        self, tmp_path: Path, fake_git: FakeShellRunner
    ):
        root = make_project_tree(tmp_path, dirs=("config",), symlinks={"web": "missing"})

        PreflightValidator(root, fake_git).assert_root_location()

    def test_missing_composer_json_fails(self, tmp_path: Path, fake_git: FakeShellRunner):
        root = make_project_tree(tmp_path, dirs=("docroot", "config"), files=())

        with pytest.raises(NotProjectRootError) as exc_info:
            PreflightValidator(root, fake_git).assert_root_location()

        assert exc_info.value.missing == ["composer.json"]

    def test_missing_config_fails(self, tmp_path: Path, fake_git: FakeShellRunner):
        root = make_project_tree(tmp_path, dirs=("web",))

        with pytest.raises(NotProjectRootError) as exc_info:
            PreflightValidator(root, fake_git).assert_root_location()

        assert exc_info.value.missing == ["config"]

    def test_missing_document_root_fails(self, tmp_path: Path, fake_git: FakeShellRunner):
        root = make_project_tree(tmp_path, dirs=("config",))

        with pytest.raises(NotProjectRootError) as exc_info:
            PreflightValidator(root, fake_git).assert_root_location()

        assert exc_info.value.missing == ["docroot or web"]
        assert "root folder" in str(exc_info.value)

    def test_does_not_run_commands(self, project_root: Path, fake_git: FakeShellRunner):
        PreflightValidator(project_root, fake_git).assert_root_location()

        assert fake_git.calls == []


class TestArtifactCleanliness:
    """Test the working tree cleanliness check."""

    def test_clean_tree_passes(self, project_root: Path):
        runner = create_fake_git(status=[])
        validator = PreflightValidator(project_root, runner)

        report = validator.assert_artifact_content_is_clean(compute_manifest("docroot"))

        assert report.is_clean
        assert report.change_count == 0
        assert runner.calls == [
            (" ".join(SHOW_PREFIX_COMMAND), project_root),
            (" ".join(GIT_STATUS_COMMAND), project_root),
        ]

    def test_unrelated_changes_are_ignored(self, project_root: Path):
        runner = create_fake_git(
            status=[
                ("??", "notes.txt"),
                (" M", "README.md"),
                ("??", "deploy-artifact/"),
                ("??", "website.txt"),
            ]
        )
        validator = PreflightValidator(project_root, runner)

        report = validator.assert_artifact_content_is_clean(compute_manifest("docroot"))

        assert report.is_clean

    def test_dirty_artifact_paths_fail_with_exact_list(self, project_root: Path):
        runner = create_fake_git(
            status=[
                (" M", "docroot/index.php"),
                ("??", "notes.txt"),
                ("??", "config/sync/new.yml"),
                ("M ", "composer.json"),
                (" M", "composer.lock"),
            ]
        )
        validator = PreflightValidator(project_root, runner)

        with pytest.raises(DirtyWorkingTreeError) as exc_info:
            validator.assert_artifact_content_is_clean(compute_manifest("docroot"))

        assert exc_info.value.changed_paths == [
            "docroot/index.php",
            "config/sync/new.yml",
            "composer.json",
        ]
        assert "docroot/index.php" in str(exc_info.value)
        assert "notes.txt" not in str(exc_info.value)

    def test_project_in_work_tree_subfolder(self, project_root: Path):
        runner = create_fake_git(
            prefix="site/",
            status=[
                (" M", "site/config/sync/system.yml"),
                (" M", "config/app.yml"),
                ("??", "site/notes.txt"),
            ],
        )
        validator = PreflightValidator(project_root, runner)

        with pytest.raises(DirtyWorkingTreeError) as exc_info:
            validator.assert_artifact_content_is_clean(compute_manifest("docroot"))

        assert exc_info.value.changed_paths == ["config/sync/system.yml"]

    def test_extra_paths_are_checked(self, project_root: Path):
        runner = create_fake_git(status=[("??", "private/key.pem")])
        validator = PreflightValidator(project_root, runner)

        assert validator.check_artifact_content(compute_manifest("docroot")).is_clean
        with pytest.raises(DirtyWorkingTreeError):
            validator.assert_artifact_content_is_clean(
                compute_manifest("docroot", "private")
            )

    def test_rename_out_of_artifact_is_reported(self, project_root: Path):
        runner = create_fake_git(status=[("R ", "old-scripts/deploy.sh", "scripts/deploy.sh")])
        validator = PreflightValidator(project_root, runner)

        report = validator.check_artifact_content(compute_manifest("docroot"))

        assert report.changed_paths == ["old-scripts/deploy.sh"]

    def test_regex_metacharacters_in_extra_paths_match_literally(self, project_root: Path):
        runner = create_fake_git(status=[("??", "a.b/file"), ("??", "axb/file")])
        validator = PreflightValidator(project_root, runner)

        report = validator.check_artifact_content(compute_manifest("docroot", "a.b"))

        assert report.changed_paths == ["a.b/file"]

    def test_git_failure_propagates(self, project_root: Path):
        runner = FakeShellRunner()
        runner.set_response(list(SHOW_PREFIX_COMMAND), "\n")
        runner.set_response(
            list(GIT_STATUS_COMMAND),
            CommandFailedError(
                "git status --short -z",
                output="fatal: not a git repository",
                return_code=128,
            ),
        )
        validator = PreflightValidator(project_root, runner)

        with pytest.raises(CommandFailedError, match="not a git repository"):
            validator.assert_artifact_content_is_clean(compute_manifest("docroot"))
