"""Domain model entities for hourtrack.

These are pure data classes representing business concepts, independent of
database schema. Store rows (jobs, time entries, profiles) are mapped into
them by the database layer, and the income and tax computations only ever
see these values.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional

UNKNOWN_JOB_NAME = "Unknown Job"


@dataclass(frozen=True)
class UserContext:
    """Identity of the user a command or service call acts for."""

    user_id: str


@dataclass(frozen=True)
class JobRate:
    """Job reference data needed to price a time entry."""

    job_id: int
    name: str
    hourly_rate: Decimal


@dataclass(frozen=True)
class Job:
    """Job domain entity."""

    id: int
    user_id: str
    name: str
    hourly_rate: Decimal
    start_date: date
    description: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    def to_rate(self) -> JobRate:
        """Return the rate view of this job."""
        return JobRate(job_id=self.id, name=self.name, hourly_rate=self.hourly_rate)


@dataclass(frozen=True)
class TimeEntry:
    """Hours worked on a job on a given day.

    ``job_id`` is a soft reference: the job may have been deleted since the
    entry was logged.
    """

    id: int
    user_id: str
    job_id: int
    date: date
    hours_worked: Decimal
    description: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class UserProfile:
    """User profile domain entity."""

    id: str
    email: Optional[str]
    full_name: Optional[str]
    language: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class CanonicalRecord:
    """A time entry priced against its job."""

    date: date
    hours_worked: Decimal
    job_name: str
    income: Decimal


@dataclass(frozen=True)
class JobTotals:
    """Accumulated hours and income for one job within a period."""

    hours: Decimal = Decimal("0")
    income: Decimal = Decimal("0")


class PeriodGranularity(str, Enum):
    """Calendar granularity used to bucket records."""

    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class PeriodSummary:
    """Totals for one period, broken down per job name."""

    period_key: str
    total_hours: Decimal
    total_income: Decimal
    job_breakdown: dict[str, JobTotals] = field(default_factory=dict)


@dataclass(frozen=True)
class IncomeAggregation:
    """Monthly and yearly summaries derived from the same records."""

    monthly: tuple[PeriodSummary, ...]
    yearly: tuple[PeriodSummary, ...]

    def for_granularity(self, granularity: PeriodGranularity) -> tuple[PeriodSummary, ...]:
        """Return the summaries for the given granularity."""
        if granularity == PeriodGranularity.YEAR:
            return self.yearly
        return self.monthly


class TaxProfile(str, Enum):
    """Tax profile selecting the deduction formulas."""

    STANDARD = "standard"
    PENSIONER = "pension"
    STUDENT = "student"


@dataclass(frozen=True)
class TaxDeductions:
    """Individual deductions and their total."""

    am_bidrag: Decimal
    bundskat: Decimal
    topskat: Decimal
    municipal_tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class TaxReport:
    """Estimated tax for a gross income figure."""

    gross_income: Decimal
    deductions: TaxDeductions
    net_income: Decimal
    profile: TaxProfile
    municipality: str


@dataclass(frozen=True)
class IncomeCSVRow:
    """One (period, job) row of the income export."""

    period: str
    job_name: str
    hours: Decimal
    income: Decimal
