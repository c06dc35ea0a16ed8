"""Preflight checks run before an artifact is assembled.

Two independent checks guard the build:

* the root location check makes sure the builder runs from a project root,
  so nothing destructive happens in an arbitrary directory;
* the cleanliness check makes sure no artifact path has uncommitted or
  untracked changes, so the artifact matches what is committed.

Changes outside the manifest are ignored: local scratch files elsewhere in
the tree never block a build.
"""

from pathlib import Path

from drupal_artifact_builder.adapters.file_adapter import create_file_adapter
from drupal_artifact_builder.adapters.shell_adapter import create_shell_adapter
from drupal_artifact_builder.artifact.docroot import DOCUMENT_ROOT_CANDIDATES
from drupal_artifact_builder.artifact.git_status import (
    GIT_STATUS_COMMAND,
    SHOW_PREFIX_COMMAND,
    parse_status,
    relative_to_prefix,
)
from drupal_artifact_builder.core.errors import DirtyWorkingTreeError, NotProjectRootError
from drupal_artifact_builder.core.structlog_logger import StructlogMixin
from drupal_artifact_builder.models.manifest import ArtifactManifest
from drupal_artifact_builder.models.results import CleanlinessReport
from drupal_artifact_builder.protocols.file_adapter_protocol import FileAdapterProtocol
from drupal_artifact_builder.protocols.shell_runner_protocol import ShellRunnerProtocol


ROOT_MARKERS: tuple[str, ...] = ("config", "composer.json")


class PreflightValidator(StructlogMixin):
    """Verify a project tree is safe to build an artifact from."""

    def __init__(
        self,
        root: Path,
        shell_runner: ShellRunnerProtocol | None = None,
        file_adapter: FileAdapterProtocol | None = None,
    ) -> None:
        self.root = root
        self.shell_runner = shell_runner or create_shell_adapter()
        self.file_adapter = file_adapter or create_file_adapter()

    def assert_root_location(self) -> None:
        """Check the root looks like a project root.

        Any document root candidate counts, symlinked or not, together with
        the ``config`` folder and ``composer.json``.

        Raises:
            NotProjectRootError: If one of the markers is missing
        """
        missing: list[str] = []

        if not any(
            self.file_adapter.exists(self.root / candidate)
            for candidate in DOCUMENT_ROOT_CANDIDATES
        ):
            missing.append(" or ".join(DOCUMENT_ROOT_CANDIDATES))

        missing.extend(
            marker
            for marker in ROOT_MARKERS
            if not self.file_adapter.exists(self.root / marker)
        )

        if missing:
            self.logger.error("not_project_root", missing=missing)
            raise NotProjectRootError(str(self.root), missing)

        self.logger.debug("root_location_verified")

    def _work_tree_prefix(self) -> str:
        """Project root relative to the top of the work tree, ``""`` or ``dir/``."""
        result = self.shell_runner.run(list(SHOW_PREFIX_COMMAND), cwd=self.root)
        return result.stdout.strip("\n")

    def check_artifact_content(self, manifest: ArtifactManifest) -> CleanlinessReport:
        """Report changed or untracked paths that belong to the artifact.

        Git reports paths from the top of the work tree, so they are rewritten
        relative to the project root first. The returned paths keep the order
        git reports them in.
        """
        prefix = self._work_tree_prefix()
        result = self.shell_runner.run(list(GIT_STATUS_COMMAND), cwd=self.root)
        entries = relative_to_prefix(parse_status(result.stdout), prefix)

        changed_paths = [
            entry.path
            for entry in entries
            if any(manifest.covers(path) for path in entry.paths)
        ]

        self.logger.debug(
            "artifact_status_checked",
            prefix=prefix,
            reported=len(entries),
            matching=len(changed_paths),
        )
        return CleanlinessReport(changed_paths=changed_paths)

    def assert_artifact_content_is_clean(
        self, manifest: ArtifactManifest
    ) -> CleanlinessReport:
        """Check no artifact path has uncommitted or untracked changes.

        Raises:
            DirtyWorkingTreeError: With the list of offending paths
        """
        report = self.check_artifact_content(manifest)
        if not report.is_clean:
            self.logger.error(
                "artifact_content_dirty",
                change_count=report.change_count,
                changed_paths=report.changed_paths,
            )
            raise DirtyWorkingTreeError(report.changed_paths)
        return report


__all__ = ["ROOT_MARKERS", "PreflightValidator"]
