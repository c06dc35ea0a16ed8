"""Artifact manifest composition.

The manifest lists the root-relative paths copied into the artifact. It is a
statement of intent: entries that do not exist on disk (a project without a
``drush`` folder, say) are not an error here.
"""

from collections.abc import Iterable, Sequence

from drupal_artifact_builder.models.manifest import ArtifactManifest


REQUIRED_PATHS: tuple[str, ...] = (
    "config",
    "drush",
    "vendor",
    "scripts",
    "composer.json",
)

SYMLINK_PATHS: tuple[str, ...] = ("docroot", "web", "public_html")


def parse_extra_paths(raw: str | Sequence[str] | None) -> list[str]:
    """Split user supplied extra paths.

    Accepts the comma separated CLI value or an already split sequence. Each
    entry is stripped and empty entries are dropped.
    """
    if not raw:
        return []
    items: Iterable[str] = raw.split(",") if isinstance(raw, str) else raw
    return [item.strip() for item in items if item and item.strip()]


def _unique(paths: Iterable[str]) -> tuple[str, ...]:
    # dict keeps first-seen order
    return tuple(dict.fromkeys(paths))


def compute_manifest(
    document_root: str, extra_paths: str | Sequence[str] | None = None
) -> ArtifactManifest:
    """Compose the artifact manifest.

    Order is the document root, the required paths, the accepted symlinks,
    then user extras. Duplicates keep their first position.

    Args:
        document_root: Resolved document root folder name
        extra_paths: Comma separated string or sequence of extra paths

    Returns:
        The immutable manifest
    """
    extras = _unique(parse_extra_paths(extra_paths))
    paths = _unique([document_root, *REQUIRED_PATHS, *SYMLINK_PATHS, *extras])
    return ArtifactManifest(document_root=document_root, paths=paths, extra_paths=extras)


__all__ = ["REQUIRED_PATHS", "SYMLINK_PATHS", "compute_manifest", "parse_extra_paths"]
