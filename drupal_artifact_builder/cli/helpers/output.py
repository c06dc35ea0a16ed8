"""Helper functions for CLI output formatting with Rich integration."""

import json
from enum import Enum
from typing import Any

import typer
from rich.text import Text

from drupal_artifact_builder.cli.helpers.theme import (
    create_key_value_table,
    get_themed_console,
)
from drupal_artifact_builder.models.manifest import ArtifactBuildContext, ArtifactManifest


class OutputFormat(str, Enum):
    """Output formats supported by the commands."""

    TEXT = "text"
    JSON = "json"


def print_json(data: dict[str, Any]) -> None:
    """Print data as indented JSON on stdout."""
    typer.echo(json.dumps(data, indent=2))


def print_manifest(
    manifest: ArtifactManifest,
    output_format: OutputFormat = OutputFormat.TEXT,
    icon_mode: str = "emoji",
) -> None:
    """Print the artifact paths, one per line in text mode."""
    if output_format == OutputFormat.JSON:
        print_json(manifest.to_dict())
        return

    console = get_themed_console(icon_mode)
    console.print_info(f"Document root: {manifest.document_root}")
    console.print_info(f"Artifact paths ({len(manifest)}):")
    for path in manifest.paths:
        console.print_list_item(path)


def print_build_context(
    context: ArtifactBuildContext,
    output_format: OutputFormat = OutputFormat.TEXT,
    icon_mode: str = "emoji",
) -> None:
    """Print the validated build context."""
    if output_format == OutputFormat.JSON:
        print_json(context.to_dict())
        return

    console = get_themed_console(icon_mode)
    table = create_key_value_table("Artifact build context")
    table.add_row("Project root", Text(str(context.root)))
    table.add_row("Document root", Text(context.document_root))
    table.add_row("Branch", Text(context.branch))
    table.add_row("Artifact paths", Text("\n".join(context.manifest.paths)))
    table.add_row(
        "Development files",
        Text("\n".join(context.development_files) or "(none)"),
    )
    console.console.print(table)
    console.print_success("Artifact content is clean and ready to be assembled")


__all__ = ["OutputFormat", "print_build_context", "print_json", "print_manifest"]
