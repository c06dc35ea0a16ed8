"""Branch name resolution."""

from pathlib import Path

from drupal_artifact_builder.adapters.shell_adapter import create_shell_adapter
from drupal_artifact_builder.core.errors import BranchUnresolvedError
from drupal_artifact_builder.core.structlog_logger import StructlogMixin
from drupal_artifact_builder.protocols.shell_runner_protocol import ShellRunnerProtocol


CURRENT_BRANCH_COMMAND: tuple[str, ...] = ("git", "branch", "--show-current")


class BranchResolver(StructlogMixin):
    """Determine the branch the artifact is built for.

    An explicit override (``GIT_BRANCH`` in CI) wins over the checked-out
    branch, even when they disagree.
    """

    def __init__(
        self,
        root: Path,
        shell_runner: ShellRunnerProtocol | None = None,
        override: str | None = None,
    ) -> None:
        self.root = root
        self.shell_runner = shell_runner or create_shell_adapter()
        self.override = override

    def resolve(self) -> str:
        """Return the branch name.

        Raises:
            BranchUnresolvedError: If there is no override and HEAD is detached
        """
        override = (self.override or "").strip()
        if override:
            self.logger.debug("branch_from_override", branch=override)
            return override

        result = self.shell_runner.run(list(CURRENT_BRANCH_COMMAND), cwd=self.root)
        branch = result.stdout.strip()
        if not branch:
            self.logger.error("branch_unresolved")
            raise BranchUnresolvedError()

        self.logger.debug("branch_from_git", branch=branch)
        return branch


__all__ = ["CURRENT_BRANCH_COMMAND", "BranchResolver"]
