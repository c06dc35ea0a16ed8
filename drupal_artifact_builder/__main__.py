"""Allow running the artifact builder with ``python -m drupal_artifact_builder``."""

import sys

from drupal_artifact_builder.cli import main


sys.exit(main())
