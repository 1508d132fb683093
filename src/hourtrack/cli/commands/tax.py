"""Tax estimation command."""

import click
from hourtrack.cli.error_handling import handle_domain_error
from hourtrack.domain.entities import TaxProfile
from hourtrack.domain.tax import (
    DEFAULT_MUNICIPALITY,
    DEFAULT_TOP_TAX_THRESHOLD,
    MUNICIPALITIES,
    TaxService,
    estimate_tax,
)
from hourtrack.utils.number_parser import parse_decimal

PROFILE_NAMES = {
    TaxProfile.STANDARD: "Standard (Fuldtidsansat)",
    TaxProfile.PENSIONER: "Pensionist",
    TaxProfile.STUDENT: "Studerende",
}


def _line(label: str, amount, sign: str = "") -> str:
    amount_str = f"{sign}{amount:,.2f} DKK"
    return f"{label:<50} {amount_str:>29}"


@click.command("tax")
@click.option(
    "--profile",
    type=click.Choice([p.value for p in TaxProfile], case_sensitive=False),
    default=TaxProfile.STANDARD.value,
    show_default=True,
    help="Tax profile",
)
@click.option(
    "--municipality",
    type=click.Choice(MUNICIPALITIES, case_sensitive=False),
    default=DEFAULT_MUNICIPALITY,
    show_default=True,
    help="Municipality (all use the same flat rate)",
)
@click.option(
    "--threshold",
    envvar="HOURTRACK_TOP_TAX_THRESHOLD",
    default=str(DEFAULT_TOP_TAX_THRESHOLD),
    show_default=True,
    help="Top tax threshold in DKK (overrides HOURTRACK_TOP_TAX_THRESHOLD)",
)
@click.option("--income", "gross_str", help="Estimate for this gross income instead of tracked hours")
@click.pass_context
def tax(ctx, profile: str, municipality: str, threshold: str, gross_str: str | None):
    """Estimate Danish income tax on tracked income.

    Examples:
        hourtrack tax
        hourtrack tax --profile student --municipality Aarhus
        hourtrack tax --income 600000
    """
    try:
        top_tax_threshold = parse_decimal(threshold)
    except ValueError as e:
        click.echo(f"Error: Invalid threshold: {e}", err=True)
        ctx.exit(1)

    try:
        if gross_str is not None:
            report = estimate_tax(
                parse_decimal(gross_str),
                profile=profile,
                municipality=municipality,
                top_tax_threshold=top_tax_threshold,
            )
        else:
            service = TaxService(ctx.obj["db"], ctx.obj["user"], top_tax_threshold=top_tax_threshold)
            report = service.build_report(profile=profile, municipality=municipality)
    except ValueError as e:
        handle_domain_error(ctx, e)

    deductions = report.deductions
    click.echo("\nTax Report:")
    click.echo(f"Profile: {PROFILE_NAMES[report.profile]}  |  Municipality: {report.municipality}")
    click.echo("-" * 80)
    click.echo(_line("Gross income", report.gross_income))
    click.echo("-" * 80)
    click.echo(_line("AM-bidrag (8%)", deductions.am_bidrag, "-"))
    click.echo(_line("Bundskat", deductions.bundskat, "-"))
    click.echo(_line("Topskat", deductions.topskat, "-"))
    click.echo(_line("Kommuneskat", deductions.municipal_tax, "-"))
    click.echo("-" * 80)
    click.echo(_line("Total deductions", deductions.total, "-"))
    click.echo("=" * 80)
    click.echo(_line("Net income", report.net_income))


def register_commands(cli):
    """Register tax command with main CLI."""
    cli.add_command(tax)
