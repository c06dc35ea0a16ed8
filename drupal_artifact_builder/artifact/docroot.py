"""Document root resolution."""

from pathlib import Path

from drupal_artifact_builder.adapters.file_adapter import create_file_adapter
from drupal_artifact_builder.core.errors import DocumentRootNotFoundError
from drupal_artifact_builder.core.structlog_logger import StructlogMixin
from drupal_artifact_builder.protocols.file_adapter_protocol import FileAdapterProtocol


DOCUMENT_ROOT_CANDIDATES: tuple[str, ...] = ("docroot", "web")


class DocumentRootResolver(StructlogMixin):
    """Find which document root folder a project actually uses.

    Candidates are tried in priority order. A symlinked candidate is skipped:
    it only points at the real document root for serving purposes.
    """

    def __init__(
        self,
        root: Path,
        file_adapter: FileAdapterProtocol | None = None,
        candidates: tuple[str, ...] = DOCUMENT_ROOT_CANDIDATES,
    ) -> None:
        self.root = root
        self.file_adapter = file_adapter or create_file_adapter()
        self.candidates = candidates

    def resolve(self) -> str:
        """Return the name of the document root folder.

        Raises:
            DocumentRootNotFoundError: If no candidate exists as a non-symlink
        """
        for candidate in self.candidates:
            path = self.root / candidate
            if not self.file_adapter.exists(path):
                continue
            if self.file_adapter.is_symlink(path):
                self.logger.debug("document_root_symlink_skipped", candidate=candidate)
                continue
            self.logger.debug("document_root_resolved", document_root=candidate)
            return candidate

        raise DocumentRootNotFoundError(str(self.root), self.candidates)


__all__ = ["DOCUMENT_ROOT_CANDIDATES", "DocumentRootResolver"]
