"""Time entry domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from hourtrack.database.base import Database
from hourtrack.domain.entities import TimeEntry as TimeEntryEntity, UserContext
from hourtrack.domain.errors import (
    NotFoundError,
    ValidationError,
    invalid_hours,
    time_entry_not_found,
    too_many_decimals,
)
from hourtrack.domain.job import JobService

logger = logging.getLogger(__name__)

MAX_HOURS_PER_ENTRY = Decimal("24")

# Stored as Numeric(5, 2)
HOURS_STEP = Decimal("0.01")


def validate_hours(hours: Optional[Decimal]) -> Decimal:
    """Validate hours worked for a single entry.

    Hours must be in the range (0, 24] with at most two decimals, so the
    value checked is exactly the value stored.

    Raises:
        ValidationError: If hours is missing, out of range or too precise
    """
    if hours is None:
        raise ValidationError("Please enter the number of hours worked")
    value = Decimal(str(hours))
    if not value.is_finite() or value <= 0 or value > MAX_HOURS_PER_ENTRY:
        raise ValidationError(invalid_hours(hours))
    if value != value.quantize(HOURS_STEP):
        raise ValidationError(too_many_decimals("Hours", hours))
    return value


class TimeEntryService:
    """Service for logging hours worked."""

    def __init__(self, db: Database, user: UserContext):
        """Initialize time entry service.

        Args:
            db: Database instance
            user: User logging the hours
        """
        self.db = db
        self.user = user
        self.job_service = JobService(db, user)

    def log_hours(
        self,
        job_id: int,
        date: date,
        hours_worked: Decimal,
        description: Optional[str] = None,
    ) -> int:
        """Log hours worked on a job.

        Args:
            job_id: Job the hours were worked on
            date: Day the hours were worked
            hours_worked: Hours, in (0, 24]
            description: Optional description

        Returns:
            Time entry ID

        Raises:
            NotFoundError: If the job doesn't exist
            ValidationError: If hours are out of range or date is missing
        """
        self.job_service.require_job(job_id)
        hours = validate_hours(hours_worked)
        if date is None:
            raise ValidationError("Date is required")

        entry_id = self.db.create_time_entry(
            user_id=self.user.user_id,
            job_id=job_id,
            date=date,
            hours_worked=hours,
            description=(description or "").strip() or None,
        )
        logger.debug("Logged %s hours on job %s as entry %s", hours, job_id, entry_id)
        return entry_id

    def get_entry(self, entry_id: int) -> Optional[TimeEntryEntity]:
        """Get one of the user's time entries by ID."""
        entry = self.db.get_time_entry(entry_id)
        if entry is None or entry.user_id != self.user.user_id:
            return None
        return entry

    def require_entry(self, entry_id: int) -> TimeEntryEntity:
        """Get a time entry by ID or raise NotFoundError."""
        entry = self.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(time_entry_not_found(entry_id))
        return entry

    def list_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        job_id: Optional[int] = None,
    ) -> list[TimeEntryEntity]:
        """List the user's time entries, most recent first."""
        return self.db.list_time_entries(
            self.user.user_id,
            start_date=start_date,
            end_date=end_date,
            job_id=job_id,
        )

    def update_entry(
        self,
        entry_id: int,
        job_id: Optional[int] = None,
        date: Optional[date] = None,
        hours_worked: Optional[Decimal] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update a time entry.

        Raises:
            NotFoundError: If the entry or the new job doesn't exist
            ValidationError: If the new hours are out of range
        """
        self.require_entry(entry_id)
        if job_id is not None:
            self.job_service.require_job(job_id)
        if hours_worked is not None:
            hours_worked = validate_hours(hours_worked)
        if description is not None:
            description = description.strip()

        self.db.update_time_entry(
            entry_id,
            job_id=job_id,
            date=date,
            hours_worked=hours_worked,
            description=description,
        )

    def delete_entry(self, entry_id: int) -> None:
        """Delete a time entry.

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        self.require_entry(entry_id)
        self.db.delete_time_entry(entry_id)
