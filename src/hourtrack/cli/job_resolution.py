"""CLI helper for resolving job names or IDs."""

from __future__ import annotations

import click
from hourtrack.domain.entities import Job
from hourtrack.domain.job import JobService
from hourtrack.cli.error_handling import handle_domain_error


def resolve_job_or_exit(ctx: click.Context, job_service: JobService, job: str | int) -> Job:
    """Resolve job name or ID, or exit with a CLI error."""
    try:
        return job_service.resolve_job(job)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
