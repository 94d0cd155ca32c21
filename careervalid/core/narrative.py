"""
Helpers for the few facts read back out of AI narrative text.

Dependencies: re (stdlib)
System role: Resume score extraction
"""

import re

DEFAULT_RESUME_SCORE = 75

# First "<n>/100" or "<n> out of 100" occurrence wins.
RESUME_SCORE_PATTERN = re.compile(r"(\d+)(?:/100|\s*out\s*of\s*100)", re.IGNORECASE)


def extract_resume_score(text: str) -> int | None:
    """
    Find the resume score stated in narrative text.

    Args:
        text: Narrative produced by the AI service

    Returns:
        int | None: First matched score, or None when nothing matches
    """
    match = RESUME_SCORE_PATTERN.search(text or "")
    if match is None:
        return None
    return int(match.group(1))
