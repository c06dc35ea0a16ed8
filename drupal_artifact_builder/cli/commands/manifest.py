"""Manifest command: list the paths that make up the artifact."""

import typer

from drupal_artifact_builder.artifact.service import create_artifact_build_service
from drupal_artifact_builder.cli.app import AppContext
from drupal_artifact_builder.cli.decorators import handle_errors
from drupal_artifact_builder.cli.helpers.output import OutputFormat, print_manifest
from drupal_artifact_builder.cli.helpers.parameters import (
    ExtraPathsOption,
    OutputFormatOption,
)


@handle_errors
def manifest_command(
    ctx: typer.Context,
    extra_paths: ExtraPathsOption = None,
    output_format: OutputFormatOption = OutputFormat.TEXT,
) -> None:
    """List the artifact paths without running the git checks."""
    app_ctx: AppContext = ctx.obj

    service = create_artifact_build_service(app_ctx.root, app_ctx.settings)
    manifest = service.preview_manifest(extra_paths)

    print_manifest(manifest, output_format, app_ctx.icon_mode)


def register_commands(app: typer.Typer) -> None:
    """Register manifest command with the main app."""
    app.command(name="manifest")(manifest_command)
