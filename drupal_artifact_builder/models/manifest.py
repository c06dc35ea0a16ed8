"""Artifact manifest and build context models."""

from pathlib import Path

from pydantic import ConfigDict, Field, field_validator

from drupal_artifact_builder.models.base import ArtifactBaseModel


class ArtifactManifest(ArtifactBaseModel):
    """Ordered, deduplicated set of root-relative paths forming the artifact.

    The manifest describes intended membership only. Entries are not required
    to exist on disk.
    """

    model_config = ConfigDict(frozen=True)

    document_root: str = Field(min_length=1)
    paths: tuple[str, ...]
    extra_paths: tuple[str, ...] = ()

    @field_validator("paths")
    @classmethod
    def validate_unique_paths(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject duplicate or empty entries."""
        if any(not path for path in v):
            raise ValueError("Manifest paths must not be empty")
        if len(set(v)) != len(v):
            raise ValueError("Manifest paths must be unique")
        return v

    def __len__(self) -> int:
        return len(self.paths)

    def __contains__(self, path: object) -> bool:
        return path in self.paths

    def covers(self, path: str) -> bool:
        """Check whether a root-relative path is, or lies below, a manifest entry.

        The comparison works on whole path segments: ``web`` covers ``web`` and
        ``web/index.php`` but not ``website.txt``. A directory, written with a
        trailing slash the way git reports an untracked folder, also covers the
        entries below it: ``private/`` covers ``private/keys``. ``./`` is the
        project root and covers everything.
        """
        is_directory = path.endswith("/")
        candidate = path.strip("/")
        if candidate in ("", "."):
            return is_directory
        for entry in self.paths:
            prefix = entry.strip("/")
            if candidate == prefix or candidate.startswith(prefix + "/"):
                return True
            if is_directory and prefix.startswith(candidate + "/"):
                return True
        return False


class ArtifactBuildContext(ArtifactBaseModel):
    """Validated inputs handed to the artifact assembly step."""

    root: Path
    document_root: str
    manifest: ArtifactManifest
    branch: str = Field(min_length=1)
    development_files: list[str] = Field(default_factory=list)


__all__ = ["ArtifactBuildContext", "ArtifactManifest"]
