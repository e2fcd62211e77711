"""Shared fixtures and fakes for Todd tests."""

from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

from todd.core.config import ToddConfig
from todd.core.errors import CommandError, NotFoundError
from todd.core.models import PullRequestRef
from todd.core.notifications import MemorySink


def make_pull(number: int, base: str = "next", head: str = "feature", state: str = "open"):
    return PullRequestRef(number=number, base_branch=base, head_branch=head, state=state)


class FakeGitHubClient:
    """In-memory stand-in for GitHubClient that records every call."""

    def __init__(
        self,
        open_pulls: Optional[List[PullRequestRef]] = None,
        pulls: Optional[Dict[int, PullRequestRef]] = None,
        created_number: int = 77,
    ) -> None:
        self.open_pulls = open_pulls or []
        self.pulls = pulls or {}
        self.created_number = created_number
        self.calls: List[tuple] = []
        self.errors: Dict[str, Exception] = {}

    def _record(self, name: str, *args) -> None:
        self.calls.append((name,) + args)
        if name in self.errors:
            raise self.errors[name]

    def calls_to(self, name: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == name]

    def list_open_pull_requests(self, owner, repo, head):
        self._record("list_open_pull_requests", owner, repo, head)
        return list(self.open_pulls)

    def create_pull_request(self, owner, repo, title, head, base, maintainer_can_modify=True):
        self._record("create_pull_request", owner, repo, title, head, base, maintainer_can_modify)
        return PullRequestRef(number=self.created_number, base_branch=base, head_branch=head)

    def get_pull_request(self, owner, repo, number):
        self._record("get_pull_request", owner, repo, number)
        if number not in self.pulls:
            raise NotFoundError("Not Found", 404)
        return self.pulls[number]

    def merge_pull_request(self, owner, repo, number, method="squash"):
        self._record("merge_pull_request", owner, repo, number, method)

    def add_labels(self, owner, repo, number, labels):
        self._record("add_labels", owner, repo, number, set(labels))

    def add_comment(self, owner, repo, number, body):
        self._record("add_comment", owner, repo, number, body)


class FakeWorkspace:
    """Workspace double that records commands instead of running them."""

    def __init__(self, path: Path = Path("/tmp/todd-fake")) -> None:
        self.id = "fake"
        self.path = path
        self.cloned = False
        self.clone_urls: List[str] = []
        self.commands: List[List[str]] = []
        self.outputs: Dict[str, str] = {"git log": "bbbb\naaaa\n"}
        self.fail_on: Optional[str] = None
        self.destroy_count = 0

    def clone(self, remote_url: str) -> None:
        self.clone_urls.append(remote_url)
        if self.fail_on == "git clone":
            raise CommandError(["git", "clone", remote_url], 128, "Permission denied (publickey)")
        self.cloned = True

    def run(self, args: Sequence[str]) -> str:
        cmd = list(args)
        self.commands.append(cmd)
        line = " ".join(cmd)
        if self.fail_on and line.startswith(self.fail_on):
            raise CommandError(cmd, 1, f"{self.fail_on} exploded")
        for prefix, output in self.outputs.items():
            if line.startswith(prefix):
                return output
        return ""

    def destroy(self) -> None:
        self.destroy_count += 1


@pytest.fixture
def config() -> ToddConfig:
    return ToddConfig(repo_owner="acme", repo_name="widgets", token="test-token")


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def workspace() -> FakeWorkspace:
    return FakeWorkspace()


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Keep logs and workspaces out of the real home directory."""
    monkeypatch.setenv("TODD_DATA_DIR", str(tmp_path / "todd-data"))
