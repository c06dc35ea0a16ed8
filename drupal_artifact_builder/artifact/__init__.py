"""Artifact composition and preflight verification."""

from .branch import CURRENT_BRANCH_COMMAND, BranchResolver
from .development_files import DEVELOPMENT_FILES, DevelopmentFileScanner
from .docroot import DOCUMENT_ROOT_CANDIDATES, DocumentRootResolver
from .git_status import GIT_STATUS_COMMAND, GitStatusParseError, parse_status
from .manifest import REQUIRED_PATHS, SYMLINK_PATHS, compute_manifest, parse_extra_paths
from .preflight import ROOT_MARKERS, PreflightValidator
from .service import ArtifactBuildService, create_artifact_build_service


__all__ = [
    "CURRENT_BRANCH_COMMAND",
    "DEVELOPMENT_FILES",
    "DOCUMENT_ROOT_CANDIDATES",
    "GIT_STATUS_COMMAND",
    "REQUIRED_PATHS",
    "ROOT_MARKERS",
    "SYMLINK_PATHS",
    "ArtifactBuildService",
    "BranchResolver",
    "DevelopmentFileScanner",
    "DocumentRootResolver",
    "GitStatusParseError",
    "PreflightValidator",
    "compute_manifest",
    "create_artifact_build_service",
    "parse_extra_paths",
    "parse_status",
]
