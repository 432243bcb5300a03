"""Convenience shim around the release enrichment pipeline package."""

from __future__ import annotations

import sys
from typing import List, Optional

from src.releases.runner import main as run_pipeline


def main(argv: Optional[List[str]] = None) -> None:
    """Delegate to the release pipeline runner."""
    run_pipeline(argv)


if __name__ == "__main__":
    main(sys.argv[1:])
