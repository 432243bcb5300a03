"""Semantic version parsing and major/minor/patch classification of release tags."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

VERSION_RE = re.compile(r"v?(\d+)\.(\d+)\.(\d+)")

Version = Tuple[int, int, int]


@dataclass(frozen=True)
class VersionChange:
    is_major: bool = False
    is_minor: bool = False
    is_patch: bool = False


UNCLASSIFIED = VersionChange()
MAJOR = VersionChange(is_major=True)
MINOR = VersionChange(is_minor=True)
PATCH = VersionChange(is_patch=True)


def parse_version(tag: Optional[str]) -> Optional[Version]:
    """Return the first `major.minor.patch` triple found in `tag`, if any."""
    if not tag:
        return None
    match = VERSION_RE.search(tag)
    if not match:
        return None
    major, minor, patch = (int(part) for part in match.groups())
    return major, minor, patch


def classify(current_tag: Optional[str], previous_tag: Optional[str]) -> VersionChange:
    """Classify `current_tag` against its predecessor; at most one flag is set.

    A release with no predecessor is the major baseline. Unparsable tags and
    unchanged versions are left unclassified.
    """
    current = parse_version(current_tag)
    if current is None:
        return UNCLASSIFIED
    if previous_tag is None:
        return MAJOR
    previous = parse_version(previous_tag)
    if previous is None:
        return UNCLASSIFIED

    for change, cur, prev in zip((MAJOR, MINOR, PATCH), current, previous):
        if cur != prev:
            return change
    return UNCLASSIFIED


__all__ = [
    "VERSION_RE",
    "Version",
    "VersionChange",
    "UNCLASSIFIED",
    "MAJOR",
    "MINOR",
    "PATCH",
    "parse_version",
    "classify",
]
