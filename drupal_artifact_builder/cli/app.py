"""Main CLI application for the artifact builder."""

import logging
import sys
from importlib.metadata import PackageNotFoundError, distribution
from pathlib import Path
from typing import Annotated

import typer

from drupal_artifact_builder.cli.decorators.error_handling import (
    handle_errors,
    print_stack_trace_if_verbose,
)
from drupal_artifact_builder.config.models import ArtifactBuilderSettings
from drupal_artifact_builder.config.project_config import load_settings
from drupal_artifact_builder.core.logging import setup_logging
from drupal_artifact_builder.core.structlog_logger import get_struct_logger


__all__ = ["AppContext", "app", "main", "__version__"]

try:
    __version__ = distribution("drupal-artifact-builder").version
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"

logger = get_struct_logger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        root: Path,
        verbose: int = 0,
        debug: bool = False,
        log_file: str | None = None,
        config_file: str | None = None,
        no_emoji: bool = False,
    ):
        """Initialize AppContext.

        Args:
            root: Project root the commands operate on
            verbose: Verbosity level
            debug: Whether debug logging was requested
            log_file: Path to log file
            config_file: Path to configuration file
            no_emoji: Whether to disable emoji icons
        """
        self.root = root
        self.verbose = verbose
        self.debug = debug
        self.log_file = log_file
        self.config_file = config_file
        self.no_emoji = no_emoji
        self._settings: ArtifactBuilderSettings | None = None

    @property
    def settings(self) -> ArtifactBuilderSettings:
        """Settings for the project root, loaded on first access."""
        if self._settings is None:
            self._settings = load_settings(self.root, self.config_file)
        return self._settings

    @property
    def icon_mode(self) -> str:
        return "text" if self.no_emoji else "emoji"


app = typer.Typer(
    name="drupal-artifact-builder",
    help=f"""Drupal Artifact Builder v{__version__}

Verifies a Drupal codebase and computes the deployable artifact:
which paths it contains, which document root is in use and which branch
it is built for.

Common workflows:
  • Verify before building:  drupal-artifact-builder check
  • Add extra paths:         drupal-artifact-builder check -e private,patches
  • List artifact paths:     drupal-artifact-builder manifest --format json""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
@handle_errors
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file (JSON lines)")
    ] = None,
    log_json: Annotated[
        bool,
        typer.Option("--log-json", help="Render console logs as JSON lines"),
    ] = False,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            help="Project root folder (defaults to the current directory)",
            file_okay=False,
        ),
    ] = None,
    no_emoji: Annotated[
        bool,
        typer.Option("--no-emoji", help="Disable emoji icons in output"),
    ] = False,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """Drupal Artifact Builder."""
    if version:
        print(f"Drupal Artifact Builder v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    app_context = AppContext(
        root=(root or Path.cwd()).resolve(),
        verbose=verbose,
        debug=debug,
        log_file=log_file,
        config_file=config_file,
        no_emoji=no_emoji,
    )
    ctx.obj = app_context

    if debug or verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    else:
        # No explicit CLI flags, use the configured level
        log_level = app_context.settings.get_log_level_int()

    setup_logging(log_level=log_level, log_file=log_file, json_logs=log_json)
    logger.debug("cli_started", root=str(app_context.root), command=ctx.invoked_subcommand)


def main() -> int:
    """Main CLI entry point."""
    exit_code = 0

    try:
        app()
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("unexpected_error", error=str(e))
        print_stack_trace_if_verbose()
        exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
