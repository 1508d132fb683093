"""Time tracking commands."""

import click
from hourtrack.cli.date_filters import period_options, pop_period_flags, resolve_cli_date_range
from hourtrack.cli.error_handling import handle_domain_error
from hourtrack.cli.job_resolution import resolve_job_or_exit
from hourtrack.domain.income import normalize_entries, total_hours, total_income
from hourtrack.domain.job import JobService
from hourtrack.domain.time_entry import TimeEntryService
from hourtrack.utils.date_parser import parse_date
from hourtrack.utils.number_parser import parse_decimal


@click.group()
def hours_group():
    """Log and manage hours worked."""
    pass


@hours_group.command("add")
@click.option("--job", required=True, help="Job name or ID")
@click.option("--hours", "hours_str", required=True, help="Hours worked (more than 0, at most 24)")
@click.option("--date", "date_str", default="today", show_default=True, help="Day worked (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--description", help="What was done")
@click.pass_context
def add_hours(ctx, job: str, hours_str: str, date_str: str, description: str | None):
    """Log hours worked on a job.

    Examples:
        hourtrack hours add --job "Cafe Norden" --hours 7.5
        hourtrack hours add --job 1 --hours 4 --date 2024-03-20
    """
    user = ctx.obj["user"]
    service = TimeEntryService(ctx.obj["db"], user)
    job_obj = resolve_job_or_exit(ctx, service.job_service, job)

    try:
        worked = parse_decimal(hours_str)
    except ValueError as e:
        click.echo(f"Error: Invalid hours: {e}", err=True)
        ctx.exit(1)

    try:
        day = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        entry_id = service.log_hours(
            job_id=job_obj.id, date=day, hours_worked=worked, description=description
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Logged {worked}h on '{job_obj.name}' for {day} (ID: {entry_id})")
    click.echo(f"  Earnings: {worked * job_obj.hourly_rate:,.2f} DKK")


@hours_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--job", help="Only show hours for this job (name or ID)")
@period_options
@click.pass_context
def list_hours(ctx, start_date: str | None, end_date: str | None, job: str | None, **kwargs):
    """List logged hours, most recent first."""
    db = ctx.obj["db"]
    user = ctx.obj["user"]
    service = TimeEntryService(db, user)
    job_service = JobService(db, user)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=pop_period_flags(kwargs),
    )

    job_id = None
    if job is not None:
        job_id = resolve_job_or_exit(ctx, job_service, job).id

    entries = service.list_entries(start_date=start, end_date=end, job_id=job_id)
    if not entries:
        click.echo("No hours found.")
        return

    records = normalize_entries(entries, job_service.list_jobs())

    click.echo(f"\nFound {len(entries)} time entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 80)
    click.echo(f"{'ID':>4}  {'Date':<10}  {'Job':<30} {'Hours':>8} {'Earnings':>20}")
    click.echo("-" * 80)
    for entry, record in zip(entries, records):
        earnings = f"{record.income:,.2f} DKK"
        click.echo(
            f"{entry.id:>4}  {entry.date.isoformat():<10}  {record.job_name:<30} "
            f"{entry.hours_worked:>8} {earnings:>20}"
        )
        if entry.description:
            click.echo(f"      {entry.description}")
    click.echo("-" * 80)
    total = f"{total_income(records):,.2f} DKK"
    click.echo(f"{'TOTAL':<48} {total_hours(records):>8} {total:>20}")


@hours_group.command("edit")
@click.argument("entry_id", type=int)
@click.option("--job", help="Job name or ID")
@click.option("--hours", "hours_str", help="Hours worked")
@click.option("--date", "date_str", help="Day worked")
@click.option("--description", help="Description (empty string to clear)")
@click.pass_context
def edit_hours(
    ctx,
    entry_id: int,
    job: str | None,
    hours_str: str | None,
    date_str: str | None,
    description: str | None,
):
    """Edit a time entry. Only the given fields are changed."""
    service = TimeEntryService(ctx.obj["db"], ctx.obj["user"])

    job_id = None
    if job is not None:
        job_id = resolve_job_or_exit(ctx, service.job_service, job).id

    worked = None
    if hours_str is not None:
        try:
            worked = parse_decimal(hours_str)
        except ValueError as e:
            click.echo(f"Error: Invalid hours: {e}", err=True)
            ctx.exit(1)

    day = None
    if date_str is not None:
        try:
            day = parse_date(date_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_entry(
            entry_id, job_id=job_id, date=day, hours_worked=worked, description=description
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated time entry {entry_id}")


@hours_group.command("delete")
@click.argument("entry_id", type=int)
@click.option("--yes", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_hours(ctx, entry_id: int, yes: bool):
    """Delete a time entry."""
    service = TimeEntryService(ctx.obj["db"], ctx.obj["user"])

    try:
        entry = service.require_entry(entry_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Delete {entry.hours_worked}h logged on {entry.date}?", default=False
    ):
        click.echo("Cancelled.")
        return

    service.delete_entry(entry_id)
    click.echo(f"Deleted time entry {entry_id}")


def register_commands(cli):
    """Register hours commands with main CLI."""
    cli.add_command(hours_group, name="hours")
