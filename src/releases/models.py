"""Record types shared by the release enrichment pipeline."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Optional

GITHUB_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class RepositoryIdentifier:
    """An `(owner, name)` pair scoping every API call for one repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def parse(cls, full_name: str) -> "RepositoryIdentifier":
        owner, sep, name = full_name.strip().partition("/")
        if not sep or not owner or not name or "/" in name:
            raise ValueError(f"expected 'owner/name', got {full_name!r}")
        return cls(owner=owner, name=name)

    def __str__(self) -> str:
        return self.full_name


@dataclass
class NormalizedRelease:
    """Fully-typed release; only the three activity fields change after construction."""

    id: int
    tag_name: Optional[str]
    name: str
    draft: bool
    prerelease: bool
    author_login: str
    created_at: Optional[str]
    published_at: Optional[str]
    body_length: int
    num_assets: int
    total_asset_size: int
    total_asset_downloads: int
    target_commitish: str
    days_to_publish: Optional[int]
    release_day_of_week: Optional[int]
    release_hour: Optional[int]
    first_release_flag: bool
    is_major_release: bool
    is_minor_release: bool
    is_patch_release: bool
    num_commits_since_last_release: Optional[int] = None
    num_issues_closed: Optional[int] = None
    num_pull_requests: Optional[int] = None

    @property
    def published(self) -> Optional[dt.datetime]:
        return parse_github_timestamp(self.published_at)

    @property
    def published_date(self) -> Optional[str]:
        """Calendar day of `published_at` as `YYYY-MM-DD`."""
        published = self.published
        return published.date().isoformat() if published else None


def parse_github_timestamp(raw: Optional[str]) -> Optional[dt.datetime]:
    """Parse an API timestamp into a naive UTC datetime; None when absent or malformed."""
    if not raw or not isinstance(raw, str):
        return None
    try:
        return dt.datetime.strptime(raw, GITHUB_TIMESTAMP_FORMAT)
    except ValueError:
        pass
    try:
        parsed = dt.datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(dt.timezone.utc).replace(tzinfo=None)
    return parsed


__all__ = [
    "GITHUB_TIMESTAMP_FORMAT",
    "RepositoryIdentifier",
    "NormalizedRelease",
    "parse_github_timestamp",
]
