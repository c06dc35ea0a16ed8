"""Development-only documentation files stripped from the artifact."""

from pathlib import Path

from drupal_artifact_builder.adapters.file_adapter import create_file_adapter
from drupal_artifact_builder.core.structlog_logger import StructlogMixin
from drupal_artifact_builder.models.manifest import ArtifactManifest
from drupal_artifact_builder.protocols.file_adapter_protocol import FileAdapterProtocol


DEVELOPMENT_FILES: frozenset[str] = frozenset(
    {
        "CHANGELOG.txt",
        "COPYRIGHT.txt",
        "INSTALL.txt",
        "INSTALL.mysql.txt",
        "INSTALL.pgsql.txt",
        "INSTALL.sqlite.txt",
        "LICENSE.txt",
        "README.txt",
        "UPDATE.txt",
        "USAGE.txt",
        "PATCHES.txt",
    }
)


class DevelopmentFileScanner(StructlogMixin):
    """List the development files the assembly step removes from the artifact."""

    def __init__(
        self,
        root: Path,
        file_adapter: FileAdapterProtocol | None = None,
        filenames: frozenset[str] = DEVELOPMENT_FILES,
    ) -> None:
        self.root = root
        self.file_adapter = file_adapter or create_file_adapter()
        self.filenames = filenames

    def find_development_files(self, manifest: ArtifactManifest) -> list[str]:
        """Return root-relative POSIX paths of development files in the artifact.

        Symlinked manifest entries are skipped, their content lives elsewhere
        in the tree.
        """
        found: set[str] = set()

        for entry in manifest.paths:
            path = self.root / entry
            if not self.file_adapter.exists(path) or self.file_adapter.is_symlink(path):
                continue

            if self.file_adapter.is_dir(path):
                for file_path in self.file_adapter.walk_files(path):
                    if file_path.name in self.filenames:
                        found.add(file_path.relative_to(self.root).as_posix())
            elif path.name in self.filenames:
                found.add(entry)

        self.logger.debug("development_files_found", count=len(found))
        return sorted(found)


__all__ = ["DEVELOPMENT_FILES", "DevelopmentFileScanner"]
