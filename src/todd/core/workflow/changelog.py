"""Changelog regeneration for the next branch.

The generator is run twice. The first result is committed and pushed so
that any change it triggers is visible to the second pass; the branch is
then reset to before that commit and the second result is committed in its
place. The remote branch ends up with exactly one new changelog commit.

Sub-commands are not rolled back: if a later command fails, earlier pushes
stay on the remote.
"""

import logging
import shlex
from typing import List

from todd.core.errors import CommandError
from todd.core.workflow.shared import CHANGELOG_COMMIT_MESSAGE, NEXT_BRANCH
from todd.core.workspace import Workspace

logger = logging.getLogger(__name__)


def _commit_changelog(workspace: Workspace, changelog_file: str) -> None:
    workspace.run(["git", "add", changelog_file])
    workspace.run(["git", "commit", "-m", CHANGELOG_COMMIT_MESSAGE])


def regenerate_changelog(
    workspace: Workspace,
    command: str = "make changelog",
    changelog_file: str = "CHANGES.md",
    branch: str = NEXT_BRANCH,
) -> str:
    """Regenerate the changelog and fold both passes into a single commit.

    Args:
        workspace: Cloned workspace with the branch checked out
        command: Changelog generator command line
        changelog_file: File produced by the generator
        branch: Branch to push

    Returns:
        SHA the branch was reset to before the final commit

    Raises:
        CommandError: If any sub-command fails
    """
    generate: List[str] = shlex.split(command)

    logger.debug("Changelog pass 1")
    workspace.run(generate)
    _commit_changelog(workspace, changelog_file)
    workspace.run(["git", "push", "origin", branch])

    logger.debug("Changelog pass 2")
    workspace.run(generate)

    shas = workspace.run(["git", "log", "--format=%H", "-n", "2"]).split()
    if len(shas) < 2:
        raise CommandError(
            ["git", "log", "--format=%H", "-n", "2"],
            1,
            f"expected 2 commits on {branch}, found {len(shas)}",
        )
    parent = shas[-1]
    workspace.run(["git", "reset", parent])
    _commit_changelog(workspace, changelog_file)
    workspace.run(["git", "push", "origin", branch, "--force"])

    logger.info("Changelog regenerated on %s (reset to %s)", branch, parent[:8])
    return parent
