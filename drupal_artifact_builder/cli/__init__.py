"""Command line interface for the artifact builder."""

from drupal_artifact_builder.cli.app import AppContext, __version__, app, main
from drupal_artifact_builder.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["AppContext", "__version__", "app", "main"]
