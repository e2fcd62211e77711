"""Operator-facing message text."""

PREPARE_NEXT_ANNOUNCEMENT = "I'm going to prepare next for a release! YAY I'm helping!"
MERGE_SUCCESS = "Todd did good! Your PR was merged into next!"


def merge_announcement(number: int) -> str:
    return f"I'm going to merge branch #{number}! YAY I'm helping!"


def prepare_next_success(number: int) -> str:
    return f"Todd did good! Next branch (PR #{number}) is ready to be released."


def format_failure(news: str, cause: str) -> str:
    """Format the failure message sent when a workflow halts.

    Args:
        news: What Todd was unable to do
        cause: Short error summary, e.g. GitHub's error message
    """
    return (
        "I've got good news and bad news. The bad news is that there is no good "
        f"news. The other bad news is {news}. GitHub said: {cause}"
    )
