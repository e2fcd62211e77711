"""Ephemeral local clones used by the prepare-next workflow.

Every run allocates its own workspace with a random 128-bit id, so
concurrent runs never share a directory. The remote branch is still shared;
no locking happens here.
"""

import logging
import shutil
import uuid
from pathlib import Path
from typing import Optional, Sequence

from todd.core.errors import CleanupError, CloneError, CommandError, ProcessTimeoutError
from todd.core.paths import ToddPaths
from todd.core.process import ProcessRunner

logger = logging.getLogger(__name__)


def ssh_remote_url(owner: str, repo: str, host: str = "github.com") -> str:
    """Build the SSH clone URL for a repository."""
    return f"git@{host}:{owner}/{repo}"


class Workspace:
    """A uniquely named local clone owned by a single pipeline run.

    Attributes:
        id: Random hex token the directory name is derived from
        path: Local directory of the clone
        cloned: Whether clone() completed successfully
    """

    def __init__(self, workspace_id: str, path: Path, runner: ProcessRunner) -> None:
        self.id = workspace_id
        self.path = path
        self.cloned = False
        self._runner = runner

    @classmethod
    def create(
        cls,
        root: Optional[Path] = None,
        runner: Optional[ProcessRunner] = None,
    ) -> "Workspace":
        """Allocate a new workspace without cloning.

        Args:
            root: Parent directory for clones (defaults to the Todd workspaces dir)
            runner: Process runner used for git commands

        Returns:
            Workspace whose path does not exist yet
        """
        root = Path(root) if root is not None else ToddPaths.get_workspaces_dir()
        root.mkdir(parents=True, exist_ok=True)
        workspace_id = uuid.uuid4().hex
        workspace = cls(workspace_id, root / workspace_id, runner or ProcessRunner())
        logger.debug("Allocated workspace %s at %s", workspace.id, workspace.path)
        return workspace

    def clone(self, remote_url: str) -> None:
        """Clone the remote repository into the workspace directory.

        Raises:
            CloneError: If git clone fails
            ProcessTimeoutError: If git clone times out
        """
        logger.info("Cloning %s into %s", remote_url, self.path)
        try:
            self._runner.run(
                ["git", "clone", remote_url, str(self.path)],
                cwd=self.path.parent,
            )
        except ProcessTimeoutError:
            raise
        except CommandError as e:
            raise CloneError(e.command, e.returncode, e.stderr) from e
        self.cloned = True

    def run(self, args: Sequence[str]) -> str:
        """Run a command inside the clone and return its stdout.

        Raises:
            CommandError: If the command fails
        """
        result = self._runner.run(args, cwd=self.path)
        return result.stdout

    def destroy(self) -> None:
        """Remove the workspace directory. Safe to call more than once."""
        try:
            self._remove()
        except CleanupError as e:
            logger.error("Failed to clean up workspace %s: %s", self.id, e)

    def _remove(self) -> None:
        if not self.path.exists():
            return
        try:
            shutil.rmtree(self.path)
        except OSError as e:
            raise CleanupError(f"could not remove {self.path}: {e}") from e
        logger.debug("Removed workspace %s", self.path)
