"""Error handling decorators for CLI commands."""

import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import click
import typer

from drupal_artifact_builder.cli.helpers.theme import get_themed_console
from drupal_artifact_builder.core.errors import (
    ArtifactBuilderError,
    BranchUnresolvedError,
    CommandFailedError,
    ConfigError,
    DirtyWorkingTreeError,
    DocumentRootNotFoundError,
    NotProjectRootError,
)
from drupal_artifact_builder.core.structlog_logger import debug_enabled, get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)

# Event name logged for each error type, most specific first
_ERROR_EVENTS: tuple[tuple[type[ArtifactBuilderError], str], ...] = (
    (NotProjectRootError, "not_project_root"),
    (DocumentRootNotFoundError, "document_root_not_found"),
    (DirtyWorkingTreeError, "dirty_working_tree"),
    (BranchUnresolvedError, "branch_unresolved"),
    (CommandFailedError, "command_failed"),
    (ConfigError, "configuration_error"),
)


def _current_app_context() -> Any:
    ctx = click.get_current_context(silent=True)
    return ctx.find_root().obj if ctx is not None else None


def _icon_mode() -> str:
    app_context = _current_app_context()
    return getattr(app_context, "icon_mode", "emoji")


def _error_event(error: ArtifactBuilderError) -> str:
    for error_type, event in _ERROR_EVENTS:
        if isinstance(error, error_type):
            return event
    return "artifact_builder_error"


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle artifact builder exceptions in CLI commands.

    Every failure is fatal: the message, which already carries the evidence
    (changed files, command output), is printed and the command exits with
    status 1.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.exceptions.Exit, click.exceptions.Abort, click.ClickException):
            raise
        except ArtifactBuilderError as e:
            logger.error(_error_event(e), error=e.message, **_loggable(e.context))
            get_themed_console(_icon_mode(), stderr=True).print_error(e.message)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except Exception as e:
            exc_info = debug_enabled()
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            get_themed_console(_icon_mode(), stderr=True).print_error(
                f"Unexpected error: {e}"
            )
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def _loggable(context: dict[str, Any]) -> dict[str, Any]:
    # "event" is reserved by structlog
    return {key: value for key, value in context.items() if key != "event"}


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    app_context = _current_app_context()
    verbose = getattr(app_context, "verbose", 0) or getattr(app_context, "debug", False)
    if verbose or any(arg in sys.argv for arg in ["-vv", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
