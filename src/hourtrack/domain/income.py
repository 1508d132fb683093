"""Income normalization and period aggregation."""

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence, Union

from hourtrack.database.base import Database
from hourtrack.domain.entities import (
    UNKNOWN_JOB_NAME,
    CanonicalRecord,
    IncomeAggregation,
    Job,
    JobRate,
    JobTotals,
    PeriodGranularity,
    PeriodSummary,
    TimeEntry,
    UserContext,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _require_sequence(value, name: str) -> None:
    if value is None:
        raise TypeError(f"{name} must be a sequence, not None")


def normalize_entries(
    entries: Sequence[TimeEntry], jobs: Iterable[Union[Job, JobRate]]
) -> list[CanonicalRecord]:
    """Price time entries against their jobs.

    Entries whose job cannot be found are kept with the "Unknown Job" name
    and zero income, since historical entries may reference deleted jobs.

    Args:
        entries: Time entries to price
        jobs: Jobs or job rates the entries may reference

    Returns:
        One CanonicalRecord per entry, in input order

    Raises:
        TypeError: If entries or jobs is None
    """
    _require_sequence(entries, "entries")
    _require_sequence(jobs, "jobs")

    rates: dict[int, JobRate] = {}
    for job in jobs:
        rate = job.to_rate() if isinstance(job, Job) else job
        rates[rate.job_id] = rate

    records = []
    for entry in entries:
        rate = rates.get(entry.job_id)
        if rate is None:
            logger.warning(
                "Time entry %s references unknown job %s", entry.id, entry.job_id
            )
            job_name = UNKNOWN_JOB_NAME
            income = ZERO
        else:
            job_name = rate.name
            income = entry.hours_worked * rate.hourly_rate
        records.append(
            CanonicalRecord(
                date=entry.date,
                hours_worked=entry.hours_worked,
                job_name=job_name,
                income=income,
            )
        )
    return records


def period_key(day: date, granularity: PeriodGranularity) -> str:
    """Return the YYYY-MM or YYYY bucket key for a date."""
    if granularity == PeriodGranularity.MONTH:
        return f"{day.year:04d}-{day.month:02d}"
    return f"{day.year:04d}"


def group_records_by_period(
    records: Sequence[CanonicalRecord], granularity: PeriodGranularity
) -> list[PeriodSummary]:
    """Group records into one summary per period, most recent first."""
    _require_sequence(records, "records")

    breakdowns: dict[str, dict[str, list[Decimal]]] = defaultdict(
        lambda: defaultdict(lambda: [ZERO, ZERO])
    )
    for record in records:
        totals = breakdowns[period_key(record.date, granularity)][record.job_name]
        totals[0] += record.hours_worked
        totals[1] += record.income

    summaries = []
    for key, jobs in breakdowns.items():
        job_breakdown = {
            name: JobTotals(hours=hours, income=income)
            for name, (hours, income) in jobs.items()
        }
        summaries.append(
            PeriodSummary(
                period_key=key,
                total_hours=sum((t.hours for t in job_breakdown.values()), ZERO),
                total_income=sum((t.income for t in job_breakdown.values()), ZERO),
                job_breakdown=job_breakdown,
            )
        )

    summaries.sort(key=lambda summary: summary.period_key, reverse=True)
    return summaries


def aggregate_records(records: Sequence[CanonicalRecord]) -> IncomeAggregation:
    """Aggregate records into monthly and yearly summaries.

    Both groupings are derived independently from the same records and are
    sorted by period key descending.
    """
    _require_sequence(records, "records")
    monthly = group_records_by_period(records, PeriodGranularity.MONTH)
    yearly = group_records_by_period(records, PeriodGranularity.YEAR)
    logger.debug(
        "Aggregated %d records into %d months and %d years",
        len(records),
        len(monthly),
        len(yearly),
    )
    return IncomeAggregation(monthly=tuple(monthly), yearly=tuple(yearly))


def records_from_summaries(summaries: Iterable[PeriodSummary]) -> list[CanonicalRecord]:
    """Flatten job breakdowns back into records.

    Each record is dated on the first day of its period, so re-aggregating
    the result yields the same summaries.
    """
    records = []
    for summary in summaries:
        parts = summary.period_key.split("-")
        year = int(parts[0])
        month = int(parts[1]) if len(parts) > 1 else 1
        for job_name, totals in summary.job_breakdown.items():
            records.append(
                CanonicalRecord(
                    date=date(year, month, 1),
                    hours_worked=totals.hours,
                    job_name=job_name,
                    income=totals.income,
                )
            )
    return records


def total_hours(records: Iterable[CanonicalRecord]) -> Decimal:
    """Sum hours over records."""
    return sum((record.hours_worked for record in records), ZERO)


def total_income(records: Iterable[CanonicalRecord]) -> Decimal:
    """Sum income over records."""
    return sum((record.income for record in records), ZERO)


class IncomeService:
    """Service for building income summaries from stored hours."""

    def __init__(self, db: Database, user: UserContext):
        """Initialize income service.

        Args:
            db: Database instance
            user: User whose hours are summarized
        """
        self.db = db
        self.user = user

    def get_records(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[CanonicalRecord]:
        """Load the user's time entries and jobs and price them."""
        entries = self.db.list_time_entries(
            self.user.user_id, start_date=start_date, end_date=end_date
        )
        jobs = self.db.list_jobs(self.user.user_id)
        logger.debug(
            "Loaded %d time entries and %d jobs for user %s",
            len(entries),
            len(jobs),
            self.user.user_id,
        )
        return normalize_entries(entries, jobs)

    def build_aggregation(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> IncomeAggregation:
        """Build monthly and yearly summaries for the user."""
        return aggregate_records(self.get_records(start_date, end_date))

    def get_gross_income(self) -> Decimal:
        """Total income across all of the user's time entries."""
        return total_income(self.get_records())

    def get_totals(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> tuple[Decimal, Decimal]:
        """Return (total hours, total income) for the user."""
        records = self.get_records(start_date, end_date)
        return total_hours(records), total_income(records)
