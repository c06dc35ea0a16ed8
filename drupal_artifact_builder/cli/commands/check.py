"""Check command: verify the project tree before assembling an artifact."""

from typing import Annotated

import typer

from drupal_artifact_builder.artifact.service import create_artifact_build_service
from drupal_artifact_builder.cli.app import AppContext
from drupal_artifact_builder.cli.decorators import handle_errors
from drupal_artifact_builder.cli.helpers.output import OutputFormat, print_build_context
from drupal_artifact_builder.cli.helpers.parameters import (
    ExtraPathsOption,
    OutputFormatOption,
)


@handle_errors
def check_command(
    ctx: typer.Context,
    extra_paths: ExtraPathsOption = None,
    output_format: OutputFormatOption = OutputFormat.TEXT,
    skip_dev_files: Annotated[
        bool,
        typer.Option(
            "--skip-dev-files",
            help="Do not scan the artifact paths for development-only files.",
        ),
    ] = False,
) -> None:
    """Verify the project root and the artifact content.

    Checks that the command runs from a project root, resolves the document
    root, makes sure no artifact path has uncommitted or untracked changes and
    resolves the branch (GIT_BRANCH wins over the checked-out branch).
    """
    app_ctx: AppContext = ctx.obj

    service = create_artifact_build_service(app_ctx.root, app_ctx.settings)
    build_context = service.prepare(
        extra_paths, scan_development_files=not skip_dev_files
    )

    print_build_context(build_context, output_format, app_ctx.icon_mode)


def register_commands(app: typer.Typer) -> None:
    """Register check command with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="check")(check_command)
