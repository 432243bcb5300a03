"""Flatten enriched releases into a CSV table and write it to disk."""

from __future__ import annotations

import csv
import io
import os
from dataclasses import asdict
from typing import Any, Iterable, List

from .models import NormalizedRelease

COLUMNS: List[str] = [
    "id",
    "tag_name",
    "name",
    "draft",
    "prerelease",
    "author_login",
    "created_at",
    "published_at",
    "body_length",
    "num_assets",
    "total_asset_size",
    "total_asset_downloads",
    "target_commitish",
    "days_to_publish",
    "release_day_of_week",
    "release_hour",
    "first_release_flag",
    "is_major_release",
    "is_minor_release",
    "is_patch_release",
    "num_commits_since_last_release",
    "num_issues_closed",
    "num_pull_requests",
]


def format_cell(value: Any) -> str:
    """Render one value; None is empty and booleans are lowercase."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_rows(records: Iterable[NormalizedRelease]) -> List[List[str]]:
    rows = []
    for record in records:
        values = asdict(record)
        rows.append([format_cell(values[column]) for column in COLUMNS])
    return rows


def to_table(records: Iterable[NormalizedRelease]) -> str:
    """Header plus one row per record, in input order, with minimal CSV quoting."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(COLUMNS)
    writer.writerows(to_rows(records))
    return buffer.getvalue()


def write_text(path: str, text: str) -> None:
    """Write UTF-8 text, creating parent directories as needed."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def write_table(records: Iterable[NormalizedRelease], path: str) -> str:
    """Serialize `records` to `path`; returns the table text."""
    table = to_table(records)
    write_text(path, table)
    return table


__all__ = ["COLUMNS", "format_cell", "to_rows", "to_table", "write_text", "write_table"]
