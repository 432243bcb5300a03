"""Entry points for running the release enrichment pipeline."""

from __future__ import annotations

import sys
from typing import List, Optional

from src.retrieval.collectors import fetch_all_pages
from src.retrieval.errors import FetchError
from src.retrieval.http_client import set_auth_header, set_request_timeout

from .cadence import aggregate_cadence, render_cadence_report
from .config import PipelineSettings, parse_args, resolve_settings
from .enricher import enrich
from .exporter import write_table, write_text
from .models import NormalizedRelease, RepositoryIdentifier
from .normalizer import normalize_all
from .rate_limit import Limiter, limiter_for_delay
from .sequencer import sort_releases


def process_repo(repository: RepositoryIdentifier, limiter: Optional[Limiter] = None) -> List[NormalizedRelease]:
    """Fetch, normalize, order and enrich every release of one repository."""
    print(f"\n=== {repository.full_name} ===")

    print("  fetching releases...")
    raws = fetch_all_pages(repository.owner, repository.name)
    print(f"    {len(raws)} releases retrieved")

    print("  normalizing releases...")
    records = sort_releases(normalize_all(raws))

    print("  enriching releases...")
    enrich(records, repository, limiter)
    return records


def run_pipeline(settings: PipelineSettings, limiter: Optional[Limiter] = None) -> List[NormalizedRelease]:
    """Process every configured repository in turn, then write the combined table.

    A FetchError from any repository propagates before anything is written.
    """
    set_auth_header(settings.token)
    set_request_timeout(settings.timeout_sec)
    if limiter is None:
        limiter = limiter_for_delay(settings.delay_sec)

    all_records: List[NormalizedRelease] = []
    cadence = []
    for repository in settings.repositories:
        records = process_repo(repository, limiter)
        all_records.extend(records)
        cadence.append((repository.name, aggregate_cadence(r.published_at for r in records)))

    write_table(all_records, settings.output_path)
    print(f"\n  wrote {len(all_records)} releases -> {settings.output_path}")

    if settings.cadence_output_path:
        write_text(settings.cadence_output_path, render_cadence_report(cadence))
        print(f"  wrote release cadence -> {settings.cadence_output_path}")
    return all_records


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point; exits 1 when no repositories are set or a release listing fails."""
    try:
        settings = resolve_settings(parse_args(argv))
    except ValueError as exc:
        print(f"[error] {exc}")
        sys.exit(1)

    if not settings.repositories:
        print("No repositories specified. Provide owner/repo args or edit REPOS in src/retrieval/config.py.")
        sys.exit(1)

    print(f"Processing {len(settings.repositories)} repos...")
    try:
        run_pipeline(settings)
    except FetchError as exc:
        print(f"[error] {exc}")
        sys.exit(1)
    print("\nAll repositories processed.")


if __name__ == "__main__":
    main()
