"""Artifact build preparation service."""

from collections.abc import Sequence
from pathlib import Path

from drupal_artifact_builder.adapters.file_adapter import create_file_adapter
from drupal_artifact_builder.adapters.shell_adapter import create_shell_adapter
from drupal_artifact_builder.artifact.branch import BranchResolver
from drupal_artifact_builder.artifact.development_files import DevelopmentFileScanner
from drupal_artifact_builder.artifact.docroot import DocumentRootResolver
from drupal_artifact_builder.artifact.manifest import compute_manifest
from drupal_artifact_builder.artifact.preflight import PreflightValidator
from drupal_artifact_builder.config.models import ArtifactBuilderSettings
from drupal_artifact_builder.core.structlog_logger import StructlogMixin
from drupal_artifact_builder.models.manifest import ArtifactBuildContext, ArtifactManifest
from drupal_artifact_builder.protocols.file_adapter_protocol import FileAdapterProtocol
from drupal_artifact_builder.protocols.shell_runner_protocol import ShellRunnerProtocol


class ArtifactBuildService(StructlogMixin):
    """Verify a project tree and compute everything the artifact needs.

    Every check is a hard stop. The first failure propagates and nothing is
    returned for a partially verified tree.
    """

    def __init__(
        self,
        root: Path,
        settings: ArtifactBuilderSettings,
        document_root_resolver: DocumentRootResolver,
        preflight_validator: PreflightValidator,
        branch_resolver: BranchResolver,
        development_file_scanner: DevelopmentFileScanner,
    ) -> None:
        self.root = root
        self.settings = settings
        self.document_root_resolver = document_root_resolver
        self.preflight_validator = preflight_validator
        self.branch_resolver = branch_resolver
        self.development_file_scanner = development_file_scanner

    def _extra_paths(self, extra_paths: str | Sequence[str] | None) -> str | Sequence[str]:
        # CLI value replaces the configured list when given
        if extra_paths:
            return extra_paths
        return self.settings.extra_paths

    def preview_manifest(
        self, extra_paths: str | Sequence[str] | None = None
    ) -> ArtifactManifest:
        """Resolve the document root and compose the manifest, without git checks."""
        document_root = self.document_root_resolver.resolve()
        return compute_manifest(document_root, self._extra_paths(extra_paths))

    def prepare(
        self,
        extra_paths: str | Sequence[str] | None = None,
        *,
        scan_development_files: bool = True,
    ) -> ArtifactBuildContext:
        """Run every preflight step and return the validated build context.

        Order: root location, document root, manifest, cleanliness, branch.
        The root location check runs first because a tree that is not a
        project root makes the other answers meaningless.
        """
        self.logger.info("artifact_preparation_started")

        self.preflight_validator.assert_root_location()

        document_root = self.document_root_resolver.resolve()
        manifest = compute_manifest(document_root, self._extra_paths(extra_paths))
        self.logger.info(
            "artifact_manifest_computed",
            document_root=document_root,
            paths=list(manifest.paths),
        )

        self.preflight_validator.assert_artifact_content_is_clean(manifest)

        branch = self.branch_resolver.resolve()

        development_files: list[str] = []
        if scan_development_files:
            development_files = self.development_file_scanner.find_development_files(
                manifest
            )

        self.logger.info(
            "artifact_preparation_completed",
            branch=branch,
            development_files=len(development_files),
        )
        return ArtifactBuildContext(
            root=self.root,
            document_root=document_root,
            manifest=manifest,
            branch=branch,
            development_files=development_files,
        )


def create_artifact_build_service(
    root: Path,
    settings: ArtifactBuilderSettings | None = None,
    shell_runner: ShellRunnerProtocol | None = None,
    file_adapter: FileAdapterProtocol | None = None,
) -> ArtifactBuildService:
    """Create an artifact build service with default adapters.

    Args:
        root: Project root directory
        settings: Settings for the run, environment defaults when omitted
        shell_runner: Optional shell runner, a ShellAdapter using the
            configured timeout by default
        file_adapter: Optional file adapter

    Returns:
        Configured ArtifactBuildService instance
    """
    settings = settings or ArtifactBuilderSettings()
    shell_runner = shell_runner or create_shell_adapter(settings.command_timeout)
    file_adapter = file_adapter or create_file_adapter()

    return ArtifactBuildService(
        root=root,
        settings=settings,
        document_root_resolver=DocumentRootResolver(root, file_adapter),
        preflight_validator=PreflightValidator(root, shell_runner, file_adapter),
        branch_resolver=BranchResolver(root, shell_runner, settings.git_branch),
        development_file_scanner=DevelopmentFileScanner(root, file_adapter),
    )


__all__ = ["ArtifactBuildService", "create_artifact_build_service"]
