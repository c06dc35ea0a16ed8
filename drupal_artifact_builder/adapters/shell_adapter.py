"""Shell adapter for running commands against the project tree."""

import shlex
import subprocess
from pathlib import Path

from drupal_artifact_builder.core.errors import CommandFailedError
from drupal_artifact_builder.core.structlog_logger import debug_enabled, get_struct_logger
from drupal_artifact_builder.models.results import CommandResult
from drupal_artifact_builder.protocols.shell_runner_protocol import (
    Command,
    ShellRunnerProtocol,
)


logger = get_struct_logger(__name__)

DEFAULT_TIMEOUT = 300.0


def format_command(command: Command) -> str:
    """Render a command as the text an operator would type."""
    if isinstance(command, str):
        return command
    return " ".join(shlex.quote(arg) for arg in command)


def _decode(output: str | bytes | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


class ShellAdapter:
    """Run commands with a bounded timeout, one attempt each.

    String commands go through the shell, argument vectors are executed
    directly.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        if timeout <= 0:
            raise ValueError("Command timeout must be positive")
        self.timeout = timeout

    def run(self, command: Command, cwd: Path) -> CommandResult:
        """Run a command and return its result, raising on failure."""
        cmd_str = format_command(command)
        use_shell = isinstance(command, str)
        args: str | list[str] = command if isinstance(command, str) else list(command)

        logger.debug("running_command", command=cmd_str, cwd=str(cwd))

        try:
            completed = subprocess.run(
                args,
                cwd=cwd,
                shell=use_shell,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            output = "\n".join(
                part for part in (_decode(e.stdout), _decode(e.stderr)) if part
            )
            logger.error("command_timed_out", command=cmd_str, timeout=self.timeout)
            raise CommandFailedError(
                cmd_str, output=output, timed_out=True, timeout=self.timeout
            ) from e
        except OSError as e:
            exc_info = debug_enabled()
            logger.error(
                "command_not_started", command=cmd_str, error=str(e), exc_info=exc_info
            )
            raise CommandFailedError(cmd_str, output=str(e)) from e

        result = CommandResult(
            command=cmd_str,
            return_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

        if not result.succeeded:
            logger.error(
                "command_failed", command=cmd_str, return_code=result.return_code
            )
            raise CommandFailedError(
                cmd_str, output=result.output, return_code=result.return_code
            )

        logger.debug("command_succeeded", command=cmd_str)
        return result


def create_shell_adapter(timeout: float = DEFAULT_TIMEOUT) -> ShellRunnerProtocol:
    """Create a shell adapter with default implementation."""
    return ShellAdapter(timeout=timeout)


__all__ = ["DEFAULT_TIMEOUT", "ShellAdapter", "create_shell_adapter", "format_command"]
