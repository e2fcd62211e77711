"""Tests for two-pass changelog regeneration."""

import pytest
from conftest import FakeWorkspace

from todd.core.errors import CommandError
from todd.core.workflow.changelog import regenerate_changelog


def test_single_final_commit_sequence():
    workspace = FakeWorkspace()
    workspace.outputs["git log"] = "c2c2c2\nc1c1c1\n"

    parent = regenerate_changelog(workspace)

    assert parent == "c1c1c1"
    commits = [cmd for cmd in workspace.commands if cmd[:2] == ["git", "commit"]]
    assert len(commits) == 2
    assert workspace.commands[-4:] == [
        ["git", "reset", "c1c1c1"],
        ["git", "add", "CHANGES.md"],
        ["git", "commit", "-m", "chore: make changelog"],
        ["git", "push", "origin", "next", "--force"],
    ]


def test_generator_runs_twice():
    workspace = FakeWorkspace()

    regenerate_changelog(workspace, command="make changelog")

    assert workspace.commands.count(["make", "changelog"]) == 2


def test_failure_mid_chain_stops_remaining_commands():
    workspace = FakeWorkspace()
    workspace.fail_on = "git push origin next"

    with pytest.raises(CommandError):
        regenerate_changelog(workspace)

    assert workspace.commands[-1] == ["git", "push", "origin", "next"]
    assert ["git", "reset", "aaaa"] not in workspace.commands


def test_short_history_raises():
    workspace = FakeWorkspace()
    workspace.outputs["git log"] = "onlyone\n"

    with pytest.raises(CommandError, match="expected 2 commits"):
        regenerate_changelog(workspace)

    assert not any(cmd[:2] == ["git", "reset"] for cmd in workspace.commands)
