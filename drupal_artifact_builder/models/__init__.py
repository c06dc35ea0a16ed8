"""Data models for the artifact builder."""

from .base import ArtifactBaseModel
from .manifest import ArtifactBuildContext, ArtifactManifest
from .results import CleanlinessReport, CommandResult, StatusEntry


__all__ = [
    "ArtifactBaseModel",
    "ArtifactBuildContext",
    "ArtifactManifest",
    "CleanlinessReport",
    "CommandResult",
    "StatusEntry",
]
