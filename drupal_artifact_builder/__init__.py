"""Drupal Artifact Builder - verify a Drupal codebase and compute its deploy artifact."""

from importlib.metadata import PackageNotFoundError, distribution

from .artifact import (
    ArtifactBuildService,
    BranchResolver,
    DocumentRootResolver,
    PreflightValidator,
    compute_manifest,
    create_artifact_build_service,
)
from .models import ArtifactBuildContext, ArtifactManifest, CleanlinessReport


try:
    __version__ = distribution("drupal-artifact-builder").version
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"

__all__ = [
    "ArtifactBuildContext",
    "ArtifactBuildService",
    "ArtifactManifest",
    "BranchResolver",
    "CleanlinessReport",
    "DocumentRootResolver",
    "PreflightValidator",
    "__version__",
    "compute_manifest",
    "create_artifact_build_service",
]
