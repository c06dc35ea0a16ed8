from .errors import (
    ArtifactBuilderError,
    BranchUnresolvedError,
    CommandFailedError,
    ConfigError,
    DirtyWorkingTreeError,
    DocumentRootNotFoundError,
    NotProjectRootError,
)
from .logging import setup_logging


__all__ = [
    "setup_logging",
    "ArtifactBuilderError",
    "BranchUnresolvedError",
    "CommandFailedError",
    "ConfigError",
    "DirtyWorkingTreeError",
    "DocumentRootNotFoundError",
    "NotProjectRootError",
]
