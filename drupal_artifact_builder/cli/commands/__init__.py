"""CLI command modules."""

import typer

from drupal_artifact_builder.cli.commands.check import (
    register_commands as register_check_commands,
)
from drupal_artifact_builder.cli.commands.manifest import (
    register_commands as register_manifest_commands,
)


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_check_commands(app)
    register_manifest_commands(app)
