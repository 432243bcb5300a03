"""REST fetchers for release listings and the per-release activity lookups."""

from __future__ import annotations

from typing import Any, Dict, List
from urllib.parse import quote

import requests

from .config import BASE_URL
from .http_client import error_message, paged_get, request

ITEM_TYPE_ISSUE = "issue"
ITEM_TYPE_PULL_REQUEST = "pull-request"

SEARCH_QUALIFIERS = {
    ITEM_TYPE_ISSUE: "is:issue",
    ITEM_TYPE_PULL_REQUEST: "is:pr",
}


def fetch_all_pages(owner: str, repo: str) -> List[Dict[str, Any]]:
    """Return every release of `owner/repo`; raises FetchError on any failed page."""
    url = f"{BASE_URL}/repos/{owner}/{repo}/releases"
    return paged_get(url)


def _warn_lookup(what: str, owner: str, repo: str, detail: str) -> None:
    print(f"[warn] {what} for {owner}/{repo} -> {detail}; recording 0")


def _read_count(resp: requests.Response, field: str, what: str, owner: str, repo: str) -> int:
    """Integer `field` of a JSON object body; malformed bodies degrade to 0 with a warning."""
    try:
        payload = resp.json()
    except ValueError:
        _warn_lookup(what, owner, repo, f"HTTP {resp.status_code} :: invalid JSON")
        return 0
    if not isinstance(payload, dict):
        _warn_lookup(what, owner, repo, f"HTTP {resp.status_code} :: expected a JSON object")
        return 0
    try:
        return int(payload.get(field) or 0)
    except (TypeError, ValueError):
        _warn_lookup(what, owner, repo, f"non-numeric {field}")
        return 0


def get_commit_count(owner: str, repo: str, base: str, head: str) -> int:
    """Number of commits in `base...head`, or 0 when the comparison is unavailable."""
    if not base or not head:
        _warn_lookup(f"compare {base or '?'}...{head or '?'}", owner, repo, "missing ref")
        return 0

    url = (
        f"{BASE_URL}/repos/{owner}/{repo}/compare/"
        f"{quote(base, safe='/')}...{quote(head, safe='/')}"
    )
    try:
        resp = request("GET", url)
    except requests.RequestException as exc:
        _warn_lookup(f"compare {base}...{head}", owner, repo, str(exc))
        return 0
    if not 200 <= resp.status_code < 300:
        _warn_lookup(
            f"compare {base}...{head}",
            owner,
            repo,
            f"HTTP {resp.status_code} :: {error_message(resp)}",
        )
        return 0

    return _read_count(resp, "total_commits", f"compare {base}...{head}", owner, repo)


def build_search_query(owner: str, repo: str, start: str, end: str, item_type: str) -> str:
    """Search expression for items of `item_type` closed within [start, end]."""
    qualifier = SEARCH_QUALIFIERS[item_type]
    return f"repo:{owner}/{repo} {qualifier} is:closed closed:{start}..{end}"


def get_closed_count(owner: str, repo: str, start: str, end: str, item_type: str) -> int:
    """Total closed issues or pull requests in the date window, or 0 when the search fails."""
    query = build_search_query(owner, repo, start, end, item_type)
    url = f"{BASE_URL}/search/issues"
    what = f"closed {item_type} search {start}..{end}"
    try:
        resp = request("GET", url, params={"q": query, "per_page": 1})
    except requests.RequestException as exc:
        _warn_lookup(what, owner, repo, str(exc))
        return 0
    if not 200 <= resp.status_code < 300:
        _warn_lookup(what, owner, repo, f"HTTP {resp.status_code} :: {error_message(resp)}")
        return 0

    return _read_count(resp, "total_count", what, owner, repo)


__all__ = [
    "ITEM_TYPE_ISSUE",
    "ITEM_TYPE_PULL_REQUEST",
    "SEARCH_QUALIFIERS",
    "fetch_all_pages",
    "get_commit_count",
    "build_search_query",
    "get_closed_count",
]
