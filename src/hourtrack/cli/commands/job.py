"""Job management commands."""

import click
from datetime import date as date_type
from hourtrack.cli.error_handling import handle_domain_error
from hourtrack.cli.job_resolution import resolve_job_or_exit
from hourtrack.domain.job import JobService
from hourtrack.utils.date_parser import parse_date
from hourtrack.utils.number_parser import parse_decimal


def _job_service(ctx) -> JobService:
    return JobService(ctx.obj["db"], ctx.obj["user"])


@click.group()
def job_group():
    """Manage jobs."""
    pass


@job_group.command("create")
@click.argument("name", metavar="JOB_NAME")
@click.option("--rate", required=True, help="Hourly rate in DKK (e.g., 200 or 187,50)")
@click.option("--start-date", help="Start date (YYYY-MM-DD or 'today'); defaults to today")
@click.option("--description", help="Job description")
@click.option("--inactive", is_flag=True, help="Create the job as inactive")
@click.pass_context
def create_job(
    ctx,
    name: str,
    rate: str,
    start_date: str | None,
    description: str | None,
    inactive: bool,
):
    """Create a new job.

    Examples:
        hourtrack job create "Cafe Norden" --rate 165
        hourtrack job create "Tutoring" --rate 250,50 --start-date 2024-01-15
    """
    service = _job_service(ctx)

    try:
        hourly_rate = parse_decimal(rate)
    except ValueError as e:
        click.echo(f"Error: Invalid hourly rate: {e}", err=True)
        ctx.exit(1)

    started = date_type.today()
    if start_date:
        try:
            started = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    try:
        job_id = service.create_job(
            name=name,
            hourly_rate=hourly_rate,
            start_date=started,
            description=description,
            is_active=not inactive,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created job '{name.strip()}' (ID: {job_id})")


@job_group.command("list")
@click.option("--active", "active_only", is_flag=True, help="Only show active jobs")
@click.pass_context
def list_jobs(ctx, active_only: bool):
    """List jobs."""
    service = _job_service(ctx)

    jobs = service.list_jobs(active_only=active_only)
    if not jobs:
        click.echo("No jobs found.")
        return

    click.echo("\nJobs:")
    click.echo("-" * 80)
    for job in jobs:
        status = "Active" if job.is_active else "Inactive"
        rate = f"{job.hourly_rate:,.2f} DKK/hour"
        click.echo(
            f"ID: {job.id:3d} | {job.name:25s} | {rate:>20s} | Started: {job.start_date} | {status}"
        )
        if job.description:
            click.echo(f"      {job.description}")


@job_group.command("edit")
@click.argument("job", metavar="JOB")
@click.option("--name", help="New job name")
@click.option("--rate", help="New hourly rate in DKK")
@click.option("--start-date", help="New start date")
@click.option("--description", help="New description (empty string to clear)")
@click.option("--active/--inactive", "is_active", default=None, help="Mark job active or inactive")
@click.pass_context
def edit_job(
    ctx,
    job: str,
    name: str | None,
    rate: str | None,
    start_date: str | None,
    description: str | None,
    is_active: bool | None,
):
    """Edit a job.

    JOB can be a job name or ID. Only the given fields are changed.

    Examples:
        hourtrack job edit "Cafe Norden" --rate 175
        hourtrack job edit 2 --inactive
    """
    service = _job_service(ctx)
    job_obj = resolve_job_or_exit(ctx, service, job)

    hourly_rate = None
    if rate is not None:
        try:
            hourly_rate = parse_decimal(rate)
        except ValueError as e:
            click.echo(f"Error: Invalid hourly rate: {e}", err=True)
            ctx.exit(1)

    started = None
    if start_date is not None:
        try:
            started = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_job(
            job_obj.id,
            name=name,
            hourly_rate=hourly_rate,
            start_date=started,
            description=description,
            is_active=is_active,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated job {job_obj.id}")


@job_group.command("delete")
@click.argument("job", metavar="JOB")
@click.option("--yes", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_job(ctx, job: str, yes: bool):
    """Delete a job.

    JOB can be a job name or ID. Hours already logged against the job are
    kept and show up as "Unknown Job" in income reports.
    """
    service = _job_service(ctx)
    job_obj = resolve_job_or_exit(ctx, service, job)

    if not yes and not click.confirm(
        f'Are you sure you want to delete "{job_obj.name}"?', default=False
    ):
        click.echo("Cancelled.")
        return

    try:
        service.delete_job(job_obj.id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted job '{job_obj.name}'")


def register_commands(cli):
    """Register job commands with main CLI."""
    cli.add_command(job_group, name="job")
