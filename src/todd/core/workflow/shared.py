"""Shared constants for workflow modules."""

# Release-integration branch rewritten by prepare-next and merged into by merge
NEXT_BRANCH = "next"
BASE_BRANCH = "master"

NEXT_PR_TITLE = "next"
RELEASE_LABELS = frozenset({"Frozen", "Needs Canary"})
MERGE_METHOD = "squash"
MERGE_COMMENT = "Todd is helping!"
CHANGELOG_COMMIT_MESSAGE = "chore: make changelog"
