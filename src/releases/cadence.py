"""Weekday release cadence: counts per day, ISO week and year."""

from __future__ import annotations

import datetime as dt
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .models import parse_github_timestamp

SATURDAY = 5
SUNDAY = 6


@dataclass
class CadenceStats:
    daily: Counter = field(default_factory=Counter)
    weekly: Counter = field(default_factory=Counter)
    yearly: Counter = field(default_factory=Counter)


def is_weekend(value: dt.datetime) -> bool:
    return value.weekday() in (SATURDAY, SUNDAY)


def aggregate_cadence(published_dates: Iterable[Optional[str]]) -> CadenceStats:
    """Count weekday releases; weeks are keyed by their Monday."""
    stats = CadenceStats()
    for raw in published_dates:
        published = parse_github_timestamp(raw)
        if published is None or is_weekend(published):
            continue
        day = published.date()
        week_start = day - dt.timedelta(days=day.weekday())
        stats.daily[day.isoformat()] += 1
        stats.weekly[week_start.isoformat()] += 1
        stats.yearly[str(day.year)] += 1
    return stats


def cadence_to_csv(counts: Dict[str, int], label: str) -> str:
    lines = [f"{label},count"]
    for key in sorted(counts):
        lines.append(f"{key},{counts[key]}")
    return "\n".join(lines)


def render_cadence_report(per_repo: List[Tuple[str, CadenceStats]]) -> str:
    """One `# Repo:` block per repository with yearly, weekly and daily sections."""
    lines: List[str] = []
    for repo_name, stats in per_repo:
        lines.append(f"# Repo: {repo_name}")
        lines.append("## Yearly")
        lines.append(cadence_to_csv(stats.yearly, "year"))
        lines.append("## Weekly")
        lines.append(cadence_to_csv(stats.weekly, "week_start"))
        lines.append("## Daily")
        lines.append(cadence_to_csv(stats.daily, "day"))
        lines.append("")
    return "\n".join(lines)


__all__ = [
    "CadenceStats",
    "is_weekend",
    "aggregate_cadence",
    "cadence_to_csv",
    "render_cadence_report",
]
