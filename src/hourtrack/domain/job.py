"""Job domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from hourtrack.database.base import Database
from hourtrack.domain.entities import Job as JobEntity, UserContext
from hourtrack.domain.errors import (
    NotFoundError,
    ValidationError,
    invalid_hourly_rate,
    job_name_not_found,
    job_not_found,
    too_many_decimals,
)

logger = logging.getLogger(__name__)

# Stored as Numeric(10, 2)
RATE_STEP = Decimal("0.01")


class JobService:
    """Service for managing a user's jobs."""

    def __init__(self, db: Database, user: UserContext):
        """Initialize job service.

        Args:
            db: Database instance
            user: User owning the jobs
        """
        self.db = db
        self.user = user

    def _validate_name(self, name: Optional[str]) -> str:
        if name is None or not name.strip():
            raise ValidationError("Job name is required")
        return name.strip()

    def _validate_rate(self, hourly_rate: Optional[Decimal]) -> Decimal:
        if hourly_rate is None:
            raise ValidationError(invalid_hourly_rate(hourly_rate))
        rate = Decimal(str(hourly_rate))
        if not rate.is_finite() or rate <= 0:
            raise ValidationError(invalid_hourly_rate(hourly_rate))
        if rate != rate.quantize(RATE_STEP):
            raise ValidationError(too_many_decimals("Hourly rate", hourly_rate))
        return rate

    def create_job(
        self,
        name: str,
        hourly_rate: Decimal,
        start_date: date,
        description: Optional[str] = None,
        is_active: bool = True,
    ) -> int:
        """Create a new job.

        Args:
            name: Job name
            hourly_rate: Hourly rate in DKK, must be positive
            start_date: Date the job started
            description: Optional description
            is_active: Whether the job is currently active

        Returns:
            Job ID

        Raises:
            ValidationError: If a required field is missing or the rate is not positive
        """
        name = self._validate_name(name)
        rate = self._validate_rate(hourly_rate)
        if start_date is None:
            raise ValidationError("Start date is required")

        job_id = self.db.create_job(
            user_id=self.user.user_id,
            name=name,
            hourly_rate=rate,
            start_date=start_date,
            description=(description or "").strip() or None,
            is_active=is_active,
        )
        logger.debug("Created job %s '%s' for user %s", job_id, name, self.user.user_id)
        return job_id

    def get_job(self, job_id: int) -> Optional[JobEntity]:
        """Get one of the user's jobs by ID.

        Returns:
            Job entity or None if not found or owned by another user
        """
        job = self.db.get_job(job_id)
        if job is None or job.user_id != self.user.user_id:
            return None
        return job

    def require_job(self, job_id: int) -> JobEntity:
        """Get a job by ID or raise NotFoundError."""
        job = self.get_job(job_id)
        if job is None:
            raise NotFoundError(job_not_found(job_id))
        return job

    def get_job_by_name(self, name: str) -> Optional[JobEntity]:
        """Get one of the user's jobs by exact name."""
        for job in self.list_jobs():
            if job.name == name:
                return job
        return None

    def resolve_job(self, job: str | int) -> JobEntity:
        """Resolve a job name or ID to a job.

        Numeric strings are tried as IDs first, then as names.

        Raises:
            NotFoundError: If no matching job exists
        """
        if isinstance(job, int):
            return self.require_job(job)

        job_str = str(job).strip()
        if job_str.isdigit():
            found = self.get_job(int(job_str))
            if found is not None:
                return found

        found = self.get_job_by_name(job_str)
        if found is None:
            raise NotFoundError(job_name_not_found(job_str))
        return found

    def list_jobs(self, active_only: bool = False) -> list[JobEntity]:
        """List the user's jobs, most recently created first."""
        return self.db.list_jobs(self.user.user_id, active_only=active_only)

    def update_job(
        self,
        job_id: int,
        name: Optional[str] = None,
        hourly_rate: Optional[Decimal] = None,
        start_date: Optional[date] = None,
        description: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> None:
        """Update a job.

        Raises:
            NotFoundError: If the job doesn't exist
            ValidationError: If the new name is empty or the new rate is not positive
        """
        self.require_job(job_id)
        if name is not None:
            name = self._validate_name(name)
        if hourly_rate is not None:
            hourly_rate = self._validate_rate(hourly_rate)
        if description is not None:
            description = description.strip()

        self.db.update_job(
            job_id,
            name=name,
            hourly_rate=hourly_rate,
            start_date=start_date,
            description=description,
            is_active=is_active,
        )

    def delete_job(self, job_id: int) -> None:
        """Delete a job.

        Hours logged against the job are kept and are reported under
        "Unknown Job" afterwards.

        Raises:
            NotFoundError: If the job doesn't exist
        """
        self.require_job(job_id)
        self.db.delete_job(job_id)
        logger.debug("Deleted job %s for user %s", job_id, self.user.user_id)
