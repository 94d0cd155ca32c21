"""
Language distribution aggregation.

Turns a repository list into a ranked, byte-weighted percentage breakdown
of the languages used.

Dependencies: careervalid.models.github
System role: Repository language statistics business logic
"""

import math
from collections.abc import Iterable

from careervalid.models.github import GitHubRepository, LanguageStat

MAX_LANGUAGES = 10


def _round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (round() uses banker's rounding)."""
    return int(math.floor(value + 0.5))


def aggregate_language_stats(
    repositories: Iterable[GitHubRepository],
    limit: int = MAX_LANGUAGES,
) -> list[LanguageStat]:
    """
    Aggregate repository sizes per language.

    Repositories without a language tag are ignored entirely. Languages are
    ranked by percentage, descending; ties keep first-seen order. When no
    tagged bytes exist the result is empty rather than all zeros.

    Args:
        repositories: Repositories with optional language and size
        limit: Maximum number of languages returned

    Returns:
        list[LanguageStat]: At most `limit` entries, highest share first
    """
    language_bytes: dict[str, int] = {}
    total_bytes = 0

    for repo in repositories:
        if not repo.language:
            continue
        size = repo.size or 0
        language_bytes[repo.language] = language_bytes.get(repo.language, 0) + size
        total_bytes += size

    if total_bytes == 0:
        return []

    stats = [
        LanguageStat(
            language=language,
            percentage=_round_half_up(byte_count / total_bytes * 100),
            bytes=byte_count,
        )
        for language, byte_count in language_bytes.items()
    ]

    # sorted() is stable with reverse=True, so ties keep insertion order
    stats = sorted(stats, key=lambda stat: stat.percentage, reverse=True)
    return stats[:limit]
