"""GitHub REST client for pull request and issue operations."""

import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

from todd.core.config import DEFAULT_API_URL, DEFAULT_HTTP_TIMEOUT, ToddConfig
from todd.core.errors import (
    ConflictError,
    MergeConflictError,
    NotFoundError,
    TransportError,
)
from todd.core.models import PullRequestRef

logger = logging.getLogger(__name__)

# GitHub caps per_page at 100
PAGE_SIZE = 100


def extract_api_message(response: httpx.Response) -> str:
    """Return the short message from a GitHub error payload, or the raw text."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        message = payload["message"]
        errors = payload.get("errors")
        if isinstance(errors, list):
            details = [e["message"] for e in errors if isinstance(e, dict) and e.get("message")]
            if details:
                message += f" ({'; '.join(details)})"
        return message
    return response.text or f"HTTP {response.status_code}"


class GitHubClient:
    """Authenticated wrapper over the GitHub pull request and issue API.

    Constructed once at process start and passed into every pipeline.
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if http_client is None:
            http_client = httpx.Client(base_url=api_url, timeout=timeout)
        http_client.headers.update(headers)
        self._http = http_client

    @classmethod
    def from_config(cls, config: ToddConfig) -> "GitHubClient":
        return cls(config.token, api_url=config.api_url, timeout=config.http_timeout)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------------

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send a request, raising TransportError for non-2xx responses."""
        logger.debug("GitHub %s %s", method, url)
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        if response.is_success:
            return response

        message = extract_api_message(response)
        logger.debug("GitHub %s %s returned %d: %s", method, url, response.status_code, message)
        if response.status_code == 404:
            raise NotFoundError(message, response.status_code)
        raise TransportError(message, response.status_code)

    # ------------------------------------------------------------------------
    # Pull requests
    # ------------------------------------------------------------------------

    def list_open_pull_requests(self, owner: str, repo: str, head: str) -> List[PullRequestRef]:
        """List every open pull request whose head is the given branch.

        Pages are followed until GitHub stops returning a ``next`` link.
        """
        qualified_head = head if ":" in head else f"{owner}:{head}"
        branch = qualified_head.split(":", 1)[1]
        url: Optional[str] = f"/repos/{owner}/{repo}/pulls"
        params: Optional[Dict[str, Any]] = {
            "state": "open",
            "head": qualified_head,
            "per_page": PAGE_SIZE,
        }
        pulls: List[PullRequestRef] = []
        while url:
            response = self._request("GET", url, params=params)
            pulls.extend(PullRequestRef.from_github(item) for item in response.json())
            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string
            params = None
        return [pr for pr in pulls if pr.head_branch == branch and pr.state == "open"]

    def create_pull_request(
        self,
        owner: str,
        repo: str,
        title: str,
        head: str,
        base: str,
        maintainer_can_modify: bool = True,
    ) -> PullRequestRef:
        """Open a pull request.

        Raises:
            ConflictError: If a pull request already exists for head/base
            TransportError: On any other failure
        """
        try:
            response = self._request(
                "POST",
                f"/repos/{owner}/{repo}/pulls",
                json={
                    "title": title,
                    "head": head,
                    "base": base,
                    "maintainer_can_modify": maintainer_can_modify,
                },
            )
        except TransportError as e:
            if e.status_code == 422 and "already exists" in e.message.lower():
                raise ConflictError(e.message, e.status_code) from e
            raise
        pull = PullRequestRef.from_github(response.json())
        logger.info("Opened pull request #%d (%s -> %s)", pull.number, head, base)
        return pull

    def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequestRef:
        """Fetch a pull request.

        Raises:
            NotFoundError: If the pull request does not exist
        """
        response = self._request("GET", f"/repos/{owner}/{repo}/pulls/{number}")
        return PullRequestRef.from_github(response.json())

    def merge_pull_request(self, owner: str, repo: str, number: int, method: str = "squash") -> None:
        """Merge a pull request.

        Raises:
            MergeConflictError: If GitHub reports the pull request is not mergeable
            NotFoundError: If the pull request does not exist
        """
        try:
            self._request(
                "PUT",
                f"/repos/{owner}/{repo}/pulls/{number}/merge",
                json={"merge_method": method},
            )
        except NotFoundError:
            raise
        except TransportError as e:
            if e.status_code in (405, 409):
                raise MergeConflictError(e.message, e.status_code) from e
            raise
        logger.info("Merged pull request #%d (%s)", number, method)

    # ------------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------------

    def add_labels(self, owner: str, repo: str, number: int, labels: Iterable[str]) -> None:
        """Add labels to a pull request. Existing labels are kept."""
        self._request(
            "POST",
            f"/repos/{owner}/{repo}/issues/{number}/labels",
            json={"labels": sorted(set(labels))},
        )

    def add_comment(self, owner: str, repo: str, number: int, body: str) -> None:
        """Comment on a pull request."""
        self._request(
            "POST",
            f"/repos/{owner}/{repo}/issues/{number}/comments",
            json={"body": body},
        )
