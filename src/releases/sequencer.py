"""Chronological ordering of releases by publish time."""

from __future__ import annotations

import datetime as dt
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, TypeVar

from .models import NormalizedRelease, parse_github_timestamp

T = TypeVar("T")


def _chronological_key(published: Optional[dt.datetime]) -> Tuple[bool, dt.datetime]:
    # undated (draft) releases go last
    return published is None, published or dt.datetime.min


def sort_chronologically(items: Iterable[T], published_at: Callable[[T], Optional[str]]) -> List[T]:
    """Stable ascending sort on the parsed `published_at` of each item."""
    return sorted(
        items,
        key=lambda item: _chronological_key(parse_github_timestamp(published_at(item))),
    )


def sort_releases(records: Iterable[NormalizedRelease]) -> List[NormalizedRelease]:
    """Order normalized releases oldest first; equal timestamps keep their input order."""
    return sort_chronologically(records, lambda record: record.published_at)


def sort_raw_releases(raws: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Apply the same ordering to raw API payloads before normalization."""
    return sort_chronologically(raws, lambda raw: (raw or {}).get("published_at"))


__all__ = ["sort_chronologically", "sort_releases", "sort_raw_releases"]
