"""
Multi-repository commit aggregation.

Fans commit listing out across repositories, waits for every fetch, and folds
the results into one Outcome for the whole batch.
"""

import asyncio
import logging
from collections.abc import Sequence

from commitline.services.github.read_operations import GitHubReadOperations
from commitline.services.github.types import (
    Commit,
    DateRange,
    Outcome,
    RateLimited,
    Success,
)

logger = logging.getLogger(__name__)


def sort_commits_newest_first(commits: list[Commit]) -> list[Commit]:
    """
    Sort commits by date, most recent first.

    ``sorted`` is stable, so commits sharing a timestamp keep their relative
    input order (repository order, then page order).
    """
    return sorted(commits, key=lambda c: c.date, reverse=True)


async def fetch_commits(
    github: GitHubReadOperations,
    repo_full_names: Sequence[str],
    date_range: DateRange | None = None,
) -> Outcome[list[Commit]]:
    """
    Fetch and merge commits from several repositories.

    All repositories are fetched concurrently. Results are inspected in input
    order: the first RateLimited result becomes the batch result and every
    other repository's data is discarded. Duplicated names are not collapsed.

    Args:
        github: Read operations bound to the user's token
        repo_full_names: Repositories in "owner/repo" form
        date_range: Optional window applied to every repository

    Returns:
        Success with all commits newest first, or the first RateLimited result

    Raises:
        ValueError: If a repository name is malformed
    """
    if not repo_full_names:
        return Success([])

    # No return_exceptions: local errors must reach the caller
    results: list[Outcome[list[Commit]]] = await asyncio.gather(
        *(github.list_commits(name, date_range) for name in repo_full_names)
    )

    merged: list[Commit] = []
    for name, result in zip(repo_full_names, results, strict=True):
        if isinstance(result, RateLimited):
            logger.info(f"Commit batch rate limited at {name}, resets in {result.retry_after_minutes} min")
            return result
        merged.extend(result.value)

    logger.debug(f"Merged {len(merged)} commits from {len(repo_full_names)} repositories")
    return Success(sort_commits_newest_first(merged))
