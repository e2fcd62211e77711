"""Map operator chat text to workflow commands.

Recognized patterns (case-insensitive, bot-name prefix already stripped):
    merge #<number>
    prepare next
"""

import re
from typing import Optional

from todd.core.models import Command

MERGE_PATTERN = re.compile(r"^\s*merge\s+#?(\d+)\s*$", re.IGNORECASE)
PREPARE_NEXT_PATTERN = re.compile(r"^\s*prepare\s+next\s*$", re.IGNORECASE)

HELP_TEXT = """\
merge <pull_request> - Merge a pull request into the next branch (must use the PR number).
prepare next - Prepare the next branch for being released"""


def parse_command(text: str) -> Optional[Command]:
    """Parse operator text into a Command, or None if it is not recognized."""
    match = MERGE_PATTERN.match(text)
    if match:
        return Command(kind="merge", number=int(match.group(1)))
    if PREPARE_NEXT_PATTERN.match(text):
        return Command(kind="prepare_next")
    return None
