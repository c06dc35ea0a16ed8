"""Helpers for CLI output."""

from drupal_artifact_builder.cli.helpers.output import (
    OutputFormat,
    print_build_context,
    print_json,
    print_manifest,
)
from drupal_artifact_builder.cli.helpers.theme import Icons, get_themed_console


__all__ = [
    "Icons",
    "OutputFormat",
    "get_themed_console",
    "print_build_context",
    "print_json",
    "print_manifest",
]
