"""Tests for ArtifactBuildService."""

from pathlib import Path

import pytest

from drupal_artifact_builder.artifact.service import create_artifact_build_service
from drupal_artifact_builder.config.models import ArtifactBuilderSettings
from drupal_artifact_builder.core.errors import (
    BranchUnresolvedError,
    DirtyWorkingTreeError,
    DocumentRootNotFoundError,
    NotProjectRootError,
)
from tests.test_utils.mock_helpers import create_fake_git, make_project_tree


class TestPrepare:
    """Test a full preflight run."""

    def test_clean_project_returns_context(self, project_root: Path):
        make_project_tree(project_root, dirs=(), files=("docroot/core/CHANGELOG.txt",))
        runner = create_fake_git(status=[("??", "notes.txt")], branch="main")
        service = create_artifact_build_service(
            project_root, ArtifactBuilderSettings(), shell_runner=runner
        )

        context = service.prepare("private")

        assert context.root == project_root
        assert context.document_root == "docroot"
        assert context.branch == "main"
        assert context.manifest.paths[0] == "docroot"
        assert context.manifest.paths[-1] == "private"
        assert context.development_files == ["docroot/core/CHANGELOG.txt"]

    def test_settings_supply_branch_and_extras(self, project_root: Path):
        runner = create_fake_git(branch="main")
        settings = ArtifactBuilderSettings(git_branch="release", extra_paths=["private"])
        service = create_artifact_build_service(project_root, settings, shell_runner=runner)

        context = service.prepare(scan_development_files=False)

        assert context.branch == "release"
        assert context.manifest.extra_paths == ("private",)
        assert context.development_files == []

    def test_cli_extras_replace_configured_extras(self, project_root: Path):
        settings = ArtifactBuilderSettings(extra_paths=["private"])
        service = create_artifact_build_service(
            project_root, settings, shell_runner=create_fake_git()
        )

        manifest = service.preview_manifest("patches")

        assert manifest.extra_paths == ("patches",)

    def test_root_location_checked_before_anything_else(self, tmp_path: Path):
        root = make_project_tree(tmp_path, dirs=("docroot",), files=())
        runner = create_fake_git()
        service = create_artifact_build_service(root, shell_runner=runner)

        with pytest.raises(NotProjectRootError):
            service.prepare()

        assert runner.calls == []

    def test_dirty_tree_stops_before_branch_resolution(self, project_root: Path):
        runner = create_fake_git(status=[(" M", "vendor/autoload.php")])
        service = create_artifact_build_service(project_root, shell_runner=runner)

        with pytest.raises(DirtyWorkingTreeError) as exc_info:
            service.prepare()

        assert exc_info.value.changed_paths == ["vendor/autoload.php"]
        assert runner.commands == [
            "git rev-parse --show-prefix",
            "git status --short -z -- .",
        ]

    def test_detached_head_fails(self, project_root: Path):
        service = create_artifact_build_service(
            project_root, shell_runner=create_fake_git(branch="")
        )

        with pytest.raises(BranchUnresolvedError):
            service.prepare()

    def test_symlinked_web_only_passes_root_check_but_has_no_document_root(
        self, tmp_path: Path
    ):
        root = make_project_tree(
            tmp_path,
            dirs=("public_html", "config", "drush", "vendor", "scripts"),
            symlinks={"web": "public_html"},
        )
        runner = create_fake_git()
        service = create_artifact_build_service(root, shell_runner=runner)

        service.preflight_validator.assert_root_location()
        with pytest.raises(DocumentRootNotFoundError):
            service.prepare()

        assert runner.calls == []

    def test_web_project_with_docroot_symlink(self, web_project_root: Path):
        service = create_artifact_build_service(
            web_project_root, shell_runner=create_fake_git()
        )

        context = service.prepare()

        assert context.document_root == "web"
        assert "docroot" in context.manifest

    def test_context_serializes_to_json_types(self, project_root: Path):
        service = create_artifact_build_service(
            project_root, shell_runner=create_fake_git(branch="main")
        )

        data = service.prepare().to_dict()

        assert data["root"] == str(project_root)
        assert data["branch"] == "main"
        assert data["manifest"]["paths"][0] == "docroot"
