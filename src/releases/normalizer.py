"""Mapping of loosely-typed release payloads into NormalizedRelease records."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from .models import NormalizedRelease, parse_github_timestamp
from .sequencer import sort_raw_releases
from .versioning import classify

SECONDS_PER_DAY = 86400


def _as_int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool):
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def summarize_assets(assets: Any) -> Tuple[int, int, int]:
    """Return `(count, total size, total downloads)`; absent numbers count as 0."""
    if not isinstance(assets, list):
        return 0, 0, 0
    total_size = 0
    total_downloads = 0
    for asset in assets:
        asset = asset if isinstance(asset, dict) else {}
        total_size += _as_int(asset.get("size"))
        total_downloads += _as_int(asset.get("download_count"))
    return len(assets), total_size, total_downloads


def days_between(created_at: Optional[str], published_at: Optional[str]) -> Optional[int]:
    """Whole days from creation to publication, truncated toward zero; may be negative."""
    created = parse_github_timestamp(created_at)
    published = parse_github_timestamp(published_at)
    if created is None or published is None:
        return None
    return int((published - created).total_seconds() / SECONDS_PER_DAY)


def normalize(raw: Dict[str, Any], index: int, previous_raw: Optional[Dict[str, Any]]) -> NormalizedRelease:
    """Build a NormalizedRelease from one payload and its predecessor; never raises."""
    raw = raw if isinstance(raw, dict) else {}
    tag_name = _optional_str(raw.get("tag_name"))
    if previous_raw is None:
        change = classify(tag_name, None)
    else:
        # a predecessor without a tag is unparsable, not absent
        previous_tag = previous_raw.get("tag_name") if isinstance(previous_raw, dict) else None
        change = classify(tag_name, _as_str(previous_tag))

    created_at = _optional_str(raw.get("created_at"))
    published_at = _optional_str(raw.get("published_at"))
    published = parse_github_timestamp(published_at)
    num_assets, total_size, total_downloads = summarize_assets(raw.get("assets"))
    body = raw.get("body")
    author = raw.get("author")

    return NormalizedRelease(
        id=_as_int(raw.get("id")),
        tag_name=tag_name,
        name=_as_str(raw.get("name")),
        draft=bool(raw.get("draft") or False),
        prerelease=bool(raw.get("prerelease") or False),
        author_login=_as_str(author.get("login")) if isinstance(author, dict) else "",
        created_at=created_at,
        published_at=published_at,
        body_length=len(body) if isinstance(body, str) else 0,
        num_assets=num_assets,
        total_asset_size=total_size,
        total_asset_downloads=total_downloads,
        target_commitish=_as_str(raw.get("target_commitish")),
        days_to_publish=days_between(created_at, published_at),
        # 0 = Sunday ... 6 = Saturday
        release_day_of_week=(published.weekday() + 1) % 7 if published else None,
        release_hour=published.hour if published else None,
        first_release_flag=index == 0,
        is_major_release=change.is_major,
        is_minor_release=change.is_minor,
        is_patch_release=change.is_patch,
    )


def normalize_all(raws: Iterable[Dict[str, Any]]) -> List[NormalizedRelease]:
    """Normalize a repository's payloads in chronological order.

    Classification and the first-release flag use the same publish-time
    adjacency as enrichment.
    """
    ordered = sort_raw_releases(raws)
    records: List[NormalizedRelease] = []
    previous: Optional[Dict[str, Any]] = None
    for index, raw in enumerate(ordered):
        records.append(normalize(raw, index, previous))
        previous = raw
    return records


__all__ = ["summarize_assets", "days_between", "normalize", "normalize_all"]
