"""Exceptions raised by the retrieval layer."""

from __future__ import annotations

from typing import Optional


class FetchError(RuntimeError):
    """A page of the primary release listing could not be retrieved; aborts the run."""

    def __init__(self, url: str, status: Optional[int], message: str = "") -> None:
        self.url = url
        self.status = status
        self.message = message
        detail = f"HTTP {status}" if status is not None else "no response"
        text = f"failed to fetch {url} ({detail})"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)


__all__ = ["FetchError"]
