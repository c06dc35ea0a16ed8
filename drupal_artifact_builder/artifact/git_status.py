"""Parsing of ``git status --short -z`` output."""

from drupal_artifact_builder.core.errors import ArtifactBuilderError
from drupal_artifact_builder.models.results import StatusEntry


# Limited to the working directory, paths are still printed relative to the
# top of the work tree
GIT_STATUS_COMMAND: tuple[str, ...] = ("git", "status", "--short", "-z", "--", ".")
SHOW_PREFIX_COMMAND: tuple[str, ...] = ("git", "rev-parse", "--show-prefix")

# Status codes followed by an extra NUL separated field with the source path
_TWO_PATH_CODES = frozenset("RC")


class GitStatusParseError(ArtifactBuilderError):
    """Raised when git status output does not follow the short -z format."""


def parse_status(output: str) -> list[StatusEntry]:
    """Parse NUL separated short status output into entries.

    Each record is ``XY<space>PATH``. Renames and copies carry the source path
    as the following record. Paths are never quoted in this format.
    """
    records = output.split("\0")
    entries: list[StatusEntry] = []
    index = 0

    while index < len(records):
        record = records[index]
        index += 1
        if not record:
            continue

        if len(record) < 4 or record[2] != " ":
            raise GitStatusParseError(f"Unexpected git status record: {record!r}")

        status_code, path = record[:2], record[3:]
        original_path = None
        if _TWO_PATH_CODES.intersection(status_code):
            if index >= len(records) or not records[index]:
                raise GitStatusParseError(
                    f"Missing source path for git status record: {record!r}"
                )
            original_path = records[index]
            index += 1

        entries.append(
            StatusEntry(status_code=status_code, path=path, original_path=original_path)
        )

    return entries


def _strip_prefix(path: str | None, prefix: str) -> str | None:
    if path is None or not path.startswith(prefix):
        return None
    # The project root itself, reported as one untracked directory
    return path[len(prefix) :] or "./"


def relative_to_prefix(entries: list[StatusEntry], prefix: str) -> list[StatusEntry]:
    """Rewrite work tree relative entries against ``prefix``.

    ``prefix`` is the project root as printed by ``git rev-parse
    --show-prefix``: empty at the top of the work tree, ``site/`` for a
    project kept in a ``site`` subfolder. Paths outside the prefix are
    dropped. A rename whose destination lies outside keeps its source as
    ``path`` so the move still shows up.
    """
    if not prefix:
        return list(entries)

    relative: list[StatusEntry] = []
    for entry in entries:
        path = _strip_prefix(entry.path, prefix)
        original_path = _strip_prefix(entry.original_path, prefix)
        if path is None:
            if original_path is None:
                continue
            path, original_path = original_path, None
        relative.append(
            StatusEntry(
                status_code=entry.status_code, path=path, original_path=original_path
            )
        )
    return relative


__all__ = [
    "GIT_STATUS_COMMAND",
    "SHOW_PREFIX_COMMAND",
    "GitStatusParseError",
    "parse_status",
    "relative_to_prefix",
]
