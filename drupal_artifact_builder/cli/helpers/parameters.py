"""Shared CLI parameter definitions."""

from typing import Annotated

import typer

from drupal_artifact_builder.cli.helpers.output import OutputFormat


ExtraPathsOption = Annotated[
    str | None,
    typer.Option(
        "--extra-paths",
        "-e",
        help="Comma separated list of extra paths that must be copied into the artifact.",
    ),
]

OutputFormatOption = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format: text or json",
    ),
]
