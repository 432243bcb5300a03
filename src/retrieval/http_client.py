"""HTTP helpers and page walking for the release retrieval workflow."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from .config import GITHUB_TOKEN, PER_PAGE, REQUEST_TIMEOUT, USER_AGENT
from .errors import FetchError

SESSION = requests.Session()
SESSION.headers.update(
    {
        "Accept": "application/vnd.github+json",
        "User-Agent": USER_AGENT,
    }
)

TIMEOUT_SEC = REQUEST_TIMEOUT


def set_auth_header(token: Optional[str]) -> None:
    """Set or clear the SESSION bearer header; no token means unauthenticated access."""
    if token:
        SESSION.headers["Authorization"] = f"Bearer {token}"
    else:
        SESSION.headers.pop("Authorization", None)


def set_request_timeout(seconds: float) -> None:
    """Override the per-request timeout used by `request`."""
    global TIMEOUT_SEC
    TIMEOUT_SEC = seconds


def error_message(resp: requests.Response) -> str:
    """Extract GitHub's error message from a response body, falling back to raw text."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        body = {"text": (resp.text or "")[:300]}
    return str(body.get("message") or body.get("error") or body.get("text") or "")


def log_http_error(resp: requests.Response, url: str) -> None:
    """Print a short, human-readable message when GitHub returns an error."""
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {error_message(resp)}")


def request(method: str, url: str, **kwargs) -> requests.Response:
    """Perform a single REST call; transport exceptions propagate to the caller."""
    timeout = kwargs.pop("timeout", TIMEOUT_SEC)
    return SESSION.request(method, url, timeout=timeout, **kwargs)


def paged_get(url: str, *, per_page: int = PER_PAGE) -> List[Dict[str, Any]]:
    """Walk `page=1, 2, ...` until the API returns an empty page.

    Any non-success page raises FetchError; there is no partial-result fallback.
    """
    results: List[Dict[str, Any]] = []
    page = 1
    while True:
        sep = "&" if "?" in url else "?"
        page_url = f"{url}{sep}per_page={per_page}&page={page}"
        try:
            resp = request("GET", page_url)
        except requests.RequestException as exc:
            raise FetchError(page_url, None, str(exc)) from exc
        if not 200 <= resp.status_code < 300:
            log_http_error(resp, page_url)
            raise FetchError(page_url, resp.status_code, error_message(resp))

        try:
            batch = resp.json()
        except ValueError as exc:
            raise FetchError(page_url, resp.status_code, "invalid JSON") from exc
        if not isinstance(batch, list):
            raise FetchError(page_url, resp.status_code, "expected a JSON array")
        if not batch:
            break

        results.extend(batch)
        page += 1
    return results


set_auth_header(GITHUB_TOKEN)


__all__ = [
    "SESSION",
    "set_auth_header",
    "set_request_timeout",
    "error_message",
    "log_http_error",
    "request",
    "paged_get",
]
