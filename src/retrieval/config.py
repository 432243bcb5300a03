"""Central configuration constants for the release history retrieval workflow."""

from __future__ import annotations

import os
from typing import List, Optional

from src.secrets import resolve_github_token

GITHUB_TOKEN: Optional[str] = resolve_github_token()
USER_AGENT = "release-history-pipeline/1.0"
BASE_URL = "https://api.github.com"
PER_PAGE = 100
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
ENRICH_DELAY_SEC = float(os.getenv("ENRICH_DELAY_SEC", "0.6"))
OUTPUT_PATH = os.getenv("RELEASES_OUTPUT_PATH", "./output/releases.csv")
CADENCE_OUTPUT_PATH = os.getenv("CADENCE_OUTPUT_PATH", "./output/release-stats.csv")

REPOS: List[str] = [
    "daangn/stackflow",
    "daangn/seed-design",
]

__all__ = [
    "GITHUB_TOKEN",
    "USER_AGENT",
    "BASE_URL",
    "PER_PAGE",
    "REQUEST_TIMEOUT",
    "ENRICH_DELAY_SEC",
    "OUTPUT_PATH",
    "CADENCE_OUTPUT_PATH",
    "REPOS",
]
