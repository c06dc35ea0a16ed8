"""Result models produced by shell commands and working tree checks."""

from pydantic import ConfigDict, Field, computed_field

from drupal_artifact_builder.models.base import ArtifactBaseModel


class CommandResult(ArtifactBaseModel):
    """Outcome of a single shell command invocation."""

    command: str
    return_code: int
    stdout: str = ""
    stderr: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def succeeded(self) -> bool:
        """Whether the command exited with status 0."""
        return self.return_code == 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr, for diagnostics."""
        return "\n".join(part for part in (self.stdout, self.stderr) if part).strip()


class StatusEntry(ArtifactBaseModel):
    """One entry reported by ``git status --short``.

    ``status_code`` is the two character XY code (``" M"``, ``"??"``, ``"R "``,
    ...). ``original_path`` is only set for renames and copies.
    """

    model_config = ConfigDict(frozen=True)

    status_code: str = Field(min_length=2, max_length=2)
    path: str = Field(min_length=1)
    original_path: str | None = None

    @property
    def is_untracked(self) -> bool:
        return self.status_code == "??"

    @property
    def paths(self) -> tuple[str, ...]:
        """All paths touched by this entry."""
        if self.original_path:
            return (self.path, self.original_path)
        return (self.path,)


class CleanlinessReport(ArtifactBaseModel):
    """Working tree status restricted to the artifact paths."""

    changed_paths: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def change_count(self) -> int:
        return len(self.changed_paths)

    @property
    def is_clean(self) -> bool:
        return not self.changed_paths


__all__ = ["CleanlinessReport", "CommandResult", "StatusEntry"]
