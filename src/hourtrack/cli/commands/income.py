"""Income summary and export commands."""

from pathlib import Path

import click
from hourtrack.domain.entities import PeriodGranularity
from hourtrack.domain.income import IncomeService
from hourtrack.domain.income_export import export_filename, format_period_label, write_income_csv


def _granularity(yearly: bool) -> PeriodGranularity:
    return PeriodGranularity.YEAR if yearly else PeriodGranularity.MONTH


@click.command("income")
@click.option("--yearly", is_flag=True, help="Group by year instead of month")
@click.pass_context
def income(ctx, yearly: bool):
    """Show income per month (or year) with a per-job breakdown."""
    service = IncomeService(ctx.obj["db"], ctx.obj["user"])
    summaries = service.build_aggregation().for_granularity(_granularity(yearly))

    if not summaries:
        click.echo("No hours found.")
        return

    title = "Yearly Income" if yearly else "Monthly Income"
    click.echo(f"\n{title}:")
    click.echo("=" * 80)
    for summary in summaries:
        total_str = f"{summary.total_income:,.2f} DKK"
        hours_str = f"{summary.total_hours}h"
        click.echo(f"{format_period_label(summary.period_key):<40} {hours_str:>15} {total_str:>23}")
        click.echo("-" * 80)
        breakdown = sorted(
            summary.job_breakdown.items(), key=lambda item: (-item[1].income, item[0])
        )
        for job_name, totals in breakdown:
            income_str = f"{totals.income:,.2f} DKK"
            job_hours = f"{totals.hours}h"
            click.echo(f"    {job_name:<36} {job_hours:>15} {income_str:>23}")
        click.echo("=" * 80)

    total_hours = sum(s.total_hours for s in summaries)
    total_income = sum(s.total_income for s in summaries)
    total_str = f"{total_income:,.2f} DKK"
    click.echo(f"{'TOTAL':<40} {str(total_hours) + 'h':>15} {total_str:>23}")


@click.command("export")
@click.option("--yearly", is_flag=True, help="Export yearly instead of monthly rows")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (defaults to income_report_<today>.csv in the current directory)",
)
@click.option(
    "--raw-periods",
    is_flag=True,
    help="Write period keys (2024-03) instead of month names (marts 2024)",
)
@click.pass_context
def export(ctx, yearly: bool, output: Path | None, raw_periods: bool):
    """Export income per period and job to CSV."""
    service = IncomeService(ctx.obj["db"], ctx.obj["user"])
    summaries = service.build_aggregation().for_granularity(_granularity(yearly))

    if not summaries:
        click.echo("No hours found.")
        return

    path = output if output is not None else Path(export_filename())
    period_label = None if raw_periods else format_period_label
    try:
        write_income_csv(path, summaries, period_label=period_label)
    except OSError as e:
        click.echo(f"Error: Could not export file: {e}", err=True)
        ctx.exit(1)

    rows = sum(len(s.job_breakdown) for s in summaries)
    click.echo(f"Exported {rows} row{'s' if rows != 1 else ''} to {path}")


def register_commands(cli):
    """Register income commands with main CLI."""
    cli.add_command(income)
    cli.add_command(export)
