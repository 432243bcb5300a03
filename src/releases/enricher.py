"""Activity metrics for each release relative to its chronological predecessor."""

from __future__ import annotations

from typing import List, Optional, Tuple

from src.retrieval.collectors import (
    ITEM_TYPE_ISSUE,
    ITEM_TYPE_PULL_REQUEST,
    get_closed_count,
    get_commit_count,
)

from .models import NormalizedRelease, RepositoryIdentifier
from .rate_limit import Limiter, NoLimit

PROGRESS_EVERY = 25


def commit_range(current: NormalizedRelease, previous: NormalizedRelease) -> Tuple[str, str]:
    """`(base, head)` refs for the compare lookup."""
    return previous.target_commitish, current.target_commitish


def date_window(current: NormalizedRelease, previous: NormalizedRelease) -> Tuple[str, str]:
    """`(start, end)` publish days, clamped so start never exceeds end."""
    end = current.published_date or ""
    start = previous.published_date or end
    if start > end:
        start = end
    return start, end


def enrich_release(current: NormalizedRelease,
                   previous: NormalizedRelease,
                   repository: RepositoryIdentifier) -> NormalizedRelease:
    """Fill the three activity counts of `current`; lookup failures become 0."""
    owner, repo = repository.owner, repository.name
    base, head = commit_range(current, previous)
    start, end = date_window(current, previous)

    current.num_commits_since_last_release = get_commit_count(owner, repo, base, head)
    current.num_issues_closed = get_closed_count(owner, repo, start, end, ITEM_TYPE_ISSUE)
    current.num_pull_requests = get_closed_count(owner, repo, start, end, ITEM_TYPE_PULL_REQUEST)
    return current


def enrich(records: List[NormalizedRelease],
           repository: RepositoryIdentifier,
           limiter: Optional[Limiter] = None) -> List[NormalizedRelease]:
    """Enrich chronologically ordered records in place, one release at a time.

    The first record is compared against itself. `limiter.acquire()` is
    called before every release so consecutive enrichments are spaced out.
    """
    limiter = limiter or NoLimit()
    previous: Optional[NormalizedRelease] = None
    total = len(records)
    for position, current in enumerate(records, start=1):
        limiter.acquire()
        enrich_release(current, previous or current, repository)
        previous = current
        if position % PROGRESS_EVERY == 0:
            print(f"    enriched {position}/{total} releases for {repository.full_name}...")
    return records


__all__ = ["commit_range", "date_window", "enrich_release", "enrich"]
