"""GitHub release history enrichment pipeline."""

from .runner import main, process_repo, run_pipeline

__all__ = ["main", "process_repo", "run_pipeline"]
