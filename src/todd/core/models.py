"""Data types for Todd workflows."""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

PullRequestState = Literal["open", "closed", "merged"]


class PullRequestRef(BaseModel):
    """Pull request as seen by the workflows.

    Fetched read-only from GitHub and never cached beyond a single run.
    """

    number: int = Field(..., gt=0)
    base_branch: str
    head_branch: str
    state: PullRequestState = "open"
    title: Optional[str] = None
    html_url: Optional[str] = None

    @classmethod
    def from_github(cls, payload: Dict[str, Any]) -> "PullRequestRef":
        """Create PullRequestRef from a GitHub pull request payload."""
        state = payload.get("state") or "open"
        if payload.get("merged") or payload.get("merged_at"):
            state = "merged"
        return cls(
            number=payload["number"],
            base_branch=(payload.get("base") or {}).get("ref", ""),
            head_branch=(payload.get("head") or {}).get("ref", ""),
            state=state,
            title=payload.get("title"),
            html_url=payload.get("html_url"),
        )


class Command(BaseModel):
    """Operator command recognized by the command surface."""

    kind: Literal["merge", "prepare_next"]
    number: Optional[int] = None
