"""Protocol definition for shell command execution."""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, TypeAlias, runtime_checkable

from drupal_artifact_builder.models.results import CommandResult


# A command is either shell text or an argument vector
Command: TypeAlias = str | Sequence[str]


@runtime_checkable
class ShellRunnerProtocol(Protocol):
    """Protocol for running commands against the project tree."""

    def run(self, command: Command, cwd: Path) -> CommandResult:
        """Run a command to completion.

        Args:
            command: Shell text or argument vector to execute
            cwd: Directory the command runs in

        Returns:
            The successful command result

        Raises:
            CommandFailedError: If the command exits non-zero, exceeds the
                timeout, or cannot be started
        """
        ...
