"""Income CSV export."""

import csv
import io
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path
from typing import Callable, Iterable, Optional

from hourtrack.domain.entities import IncomeCSVRow, PeriodSummary
from hourtrack.domain.errors import ValidationError

CSV_HEADER = ("Period", "Job", "Hours", "Income (DKK)")

DANISH_MONTHS = (
    "januar",
    "februar",
    "marts",
    "april",
    "maj",
    "juni",
    "juli",
    "august",
    "september",
    "oktober",
    "november",
    "december",
)

CENTS = Decimal("0.01")


def format_period_label(period_key: str) -> str:
    """Format a period key the way spreadsheets receive it.

    Year keys are returned unchanged, month keys become a Danish long month
    label such as "marts 2024".
    """
    if "-" not in period_key:
        return period_key
    year, month = period_key.split("-", 1)
    return f"{DANISH_MONTHS[int(month) - 1]} {int(year)}"


def format_hours(hours) -> str:
    """Format hours as a plain number without trailing zeros."""
    value = Decimal(str(hours)).normalize()
    return format(value, "f")


def format_income(income) -> str:
    """Format income with two decimals."""
    return str(Decimal(str(income)).quantize(CENTS, rounding=ROUND_HALF_UP))


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def encode_income_csv(
    summaries: Iterable[PeriodSummary],
    period_label: Optional[Callable[[str], str]] = None,
) -> str:
    """Encode summaries as CSV, one row per (period, job).

    Args:
        summaries: Period summaries in the order they should appear
        period_label: Optional formatter for the period column; the period
            key is written verbatim when omitted

    Returns:
        CSV text with a header line, every line terminated by a newline
    """
    lines = [",".join(CSV_HEADER)]
    for summary in summaries:
        label = period_label(summary.period_key) if period_label else summary.period_key
        for job_name, totals in summary.job_breakdown.items():
            lines.append(
                ",".join(
                    [
                        _quote(label),
                        _quote(job_name),
                        format_hours(totals.hours),
                        format_income(totals.income),
                    ]
                )
            )
    return "\n".join(lines) + "\n"


def parse_income_csv(text: str) -> list[IncomeCSVRow]:
    """Parse CSV produced by encode_income_csv.

    Raises:
        ValidationError: If the header or a row is malformed
    """
    reader = csv.reader(io.StringIO(text))
    try:
        header = next(reader)
    except StopIteration:
        raise ValidationError("Income CSV is empty")
    if tuple(header) != CSV_HEADER:
        raise ValidationError(f"Unexpected income CSV header: {','.join(header)}")

    rows = []
    for line_number, row in enumerate(reader, start=2):
        if not row:
            continue
        if len(row) != len(CSV_HEADER):
            raise ValidationError(
                f"Row {line_number}: expected {len(CSV_HEADER)} columns, got {len(row)}"
            )
        period, job_name, hours, income = row
        try:
            rows.append(
                IncomeCSVRow(
                    period=period,
                    job_name=job_name,
                    hours=Decimal(hours),
                    income=Decimal(income),
                )
            )
        except ArithmeticError as e:
            raise ValidationError(f"Row {line_number}: invalid number: {e}")
    return rows


def export_filename(today: Optional[date] = None) -> str:
    """Return the default export file name for a day."""
    today = today or date.today()
    return f"income_report_{today.isoformat()}.csv"


def write_income_csv(
    path: Path,
    summaries: Iterable[PeriodSummary],
    period_label: Optional[Callable[[str], str]] = None,
) -> Path:
    """Write encoded summaries to a UTF-8 file and return its path."""
    path = Path(path)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(encode_income_csv(summaries, period_label))
    return path
