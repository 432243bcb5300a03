"""Runtime settings for the release enrichment pipeline."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Tuple

from src.retrieval.config import (
    CADENCE_OUTPUT_PATH,
    ENRICH_DELAY_SEC,
    GITHUB_TOKEN,
    OUTPUT_PATH,
    REPOS,
    REQUEST_TIMEOUT,
)

from .models import RepositoryIdentifier


@dataclass(frozen=True)
class PipelineSettings:
    """Everything one run needs; passed explicitly into `run_pipeline`."""

    repositories: Tuple[RepositoryIdentifier, ...]
    output_path: str
    cadence_output_path: Optional[str]
    token: Optional[str]
    delay_sec: float
    timeout_sec: float


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the pipeline entry point."""

    parser = argparse.ArgumentParser(
        description="Export enriched GitHub release history to a CSV table.",
    )
    parser.add_argument("repos", nargs="*", metavar="OWNER/REPO")
    parser.add_argument("--output", default=OUTPUT_PATH)
    parser.add_argument(
        "--cadence-output",
        default=CADENCE_OUTPUT_PATH,
        help="weekday release cadence report; pass an empty string to skip it",
    )
    parser.add_argument("--delay", type=float, default=ENRICH_DELAY_SEC)
    parser.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT)
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    return parser.parse_args(argv)


def parse_repositories(names: List[str]) -> Tuple[RepositoryIdentifier, ...]:
    return tuple(RepositoryIdentifier.parse(name) for name in names if name.strip())


def resolve_settings(args: Optional[argparse.Namespace] = None) -> PipelineSettings:
    """Return immutable settings; positional repos replace the configured REPOS list."""

    args = args or parse_args([])
    return PipelineSettings(
        repositories=parse_repositories(list(args.repos) or list(REPOS)),
        output_path=args.output,
        cadence_output_path=args.cadence_output or None,
        token=GITHUB_TOKEN,
        delay_sec=float(args.delay),
        timeout_sec=float(args.timeout),
    )


__all__ = [
    "PipelineSettings",
    "build_arg_parser",
    "parse_args",
    "parse_repositories",
    "resolve_settings",
]
