"""Utilities for loading local (gitignored) credentials."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_SECRETS_FILENAME = "local_secrets.json"


def _default_secrets_path() -> Path:
    root = Path(__file__).resolve().parents[1]
    return root / DEFAULT_SECRETS_FILENAME


def load_local_secrets(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """Load secrets from a JSON file; return {} when unavailable or malformed."""

    candidate = path or os.getenv("LOCAL_SECRETS_FILE") or _default_secrets_path()
    secrets_path = Path(candidate).expanduser()
    if not secrets_path.exists():
        return {}
    try:
        with secrets_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def resolve_github_token(secrets: Optional[Dict[str, Any]] = None) -> Optional[str]:
    """Pick the bearer token: GITHUB_TOKEN env var, then `github_token`, then the first `github_tokens` entry."""

    env_token = os.getenv("GITHUB_TOKEN")
    if env_token:
        return env_token
    secrets = load_local_secrets() if secrets is None else secrets
    token = secrets.get("github_token")
    if token:
        return str(token)
    tokens = secrets.get("github_tokens") or []
    if isinstance(tokens, list):
        for candidate in tokens:
            if candidate:
                return str(candidate)
    return None


__all__ = ["load_local_secrets", "resolve_github_token", "DEFAULT_SECRETS_FILENAME"]
