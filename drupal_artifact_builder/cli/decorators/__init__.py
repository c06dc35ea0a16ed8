"""Decorators for CLI commands."""

from drupal_artifact_builder.cli.decorators.error_handling import handle_errors


__all__ = ["handle_errors"]
