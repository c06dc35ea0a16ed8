"""Exception hierarchy for the artifact builder.

Every error is fatal for the current run. Each one carries a ``context``
dictionary with the evidence an operator needs to fix the problem (changed
files, command output, candidates tried) so the CLI can display it without
re-running any diagnostics.
"""

from collections.abc import Sequence
from typing import Any


class ArtifactBuilderError(Exception):
    """Base exception for all artifact builder errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ConfigError(ArtifactBuilderError):
    """Raised when the builder configuration cannot be loaded."""


class DocumentRootNotFoundError(ArtifactBuilderError):
    """Raised when no non-symlink document root candidate exists."""

    def __init__(self, root: str, candidates: Sequence[str]):
        super().__init__(
            "Docroot folder not found (looked for a real, non-symlink "
            f"directory named one of: {', '.join(candidates)})",
            {"root": root, "candidates": list(candidates)},
        )
        self.candidates = list(candidates)


class NotProjectRootError(ArtifactBuilderError):
    """Raised when the builder is not launched from the project root."""

    def __init__(self, root: str, missing: Sequence[str]):
        super().__init__(
            "It seems this command has not been launched from the repository "
            f"root folder ({root}). Missing: {', '.join(missing)}. "
            "Please run it from the root folder.",
            {"root": root, "missing": list(missing)},
        )
        self.missing = list(missing)


class DirtyWorkingTreeError(ArtifactBuilderError):
    """Raised when artifact paths have uncommitted or untracked changes."""

    def __init__(self, changed_paths: Sequence[str]):
        files = "\n".join(f"  {path}" for path in changed_paths)
        super().__init__(
            "There are changes in the repository (changed and/or untracked "
            "files), please run the artifact generation with the folder tree "
            f"clean. Files changed:\n{files}",
            {"changed_paths": list(changed_paths)},
        )
        self.changed_paths = list(changed_paths)


class BranchUnresolvedError(ArtifactBuilderError):
    """Raised when neither an override nor a checked-out branch is available."""

    def __init__(self) -> None:
        super().__init__(
            "Could not detect the selected branch. Either you didn't set the "
            "GIT_BRANCH environment variable or you are in detached mode."
        )


class CommandFailedError(ArtifactBuilderError):
    """Raised when a shell command exits non-zero or exceeds its timeout."""

    def __init__(
        self,
        command: str,
        output: str = "",
        return_code: int | None = None,
        timed_out: bool = False,
        timeout: float | None = None,
    ):
        if timed_out and timeout is not None:
            reason = f"timed out after {timeout:g} seconds"
        elif timed_out:
            reason = "timed out"
        elif return_code is None:
            reason = "could not be started"
        else:
            reason = f"exited with code {return_code}"
        message = f"The command '{command}' failed: {reason}"
        if output:
            message += f"\n\nOutput:\n{output}"
        super().__init__(
            message,
            {
                "command": command,
                "output": output,
                "return_code": return_code,
                "timed_out": timed_out,
            },
        )
        self.command = command
        self.output = output
        self.return_code = return_code
        self.timed_out = timed_out


__all__ = [
    "ArtifactBuilderError",
    "BranchUnresolvedError",
    "CommandFailedError",
    "ConfigError",
    "DirtyWorkingTreeError",
    "DocumentRootNotFoundError",
    "NotProjectRootError",
]
