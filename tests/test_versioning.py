"""Tests for src.releases.versioning covering tag parsing and classification.

Run with:
    pytest tests/test_versioning.py --maxfail=1 -v --cov=src.releases.versioning --cov-report=term-missing
"""

import pytest

from src.releases import versioning
from src.releases.versioning import MAJOR, MINOR, PATCH, UNCLASSIFIED


def test_parse_version_finds_first_triple():
    assert versioning.parse_version("v1.2.3") == (1, 2, 3)
    assert versioning.parse_version("release-10.0.7-beta") == (10, 0, 7)
    assert versioning.parse_version("latest") is None
    assert versioning.parse_version(None) is None


@pytest.mark.parametrize(
    "current,previous,expected",
    [
        ("v1.2.3", "v1.2.2", PATCH),
        ("2.0.0", "1.9.9", MAJOR),
        ("1.3.0", "1.2.9", MINOR),
        ("1.2.3", "1.2.3", UNCLASSIFIED),
        ("v1.0.0", None, MAJOR),
        ("latest", "v1.0.0", UNCLASSIFIED),
        ("latest", None, UNCLASSIFIED),
        ("v1.0.1", "nightly", UNCLASSIFIED),
        ("v1.0.1", "", UNCLASSIFIED),
    ],
)
def test_classify(current, previous, expected):
    assert versioning.classify(current, previous) == expected


def test_classify_sets_at_most_one_flag():
    change = versioning.classify("3.4.5", "1.2.3")
    assert [change.is_major, change.is_minor, change.is_patch] == [True, False, False]


def test_downgrade_is_still_classified_by_first_difference():
    assert versioning.classify("1.1.0", "1.2.0") == MINOR
