"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from hourtrack.domain.entities import Job, TimeEntry, UserProfile


class Database(ABC):
    """Abstract table store for hourtrack.

    Every user-owned row carries a ``user_id`` and list operations are
    scoped to a single user.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Job operations
    @abstractmethod
    def create_job(
        self,
        user_id: str,
        name: str,
        hourly_rate: Decimal,
        start_date: date,
        description: Optional[str] = None,
        is_active: bool = True,
    ) -> int:
        """Create a job. Returns job ID."""
        pass

    @abstractmethod
    def get_job(self, job_id: int) -> Optional[Job]:
        """Get job by ID."""
        pass

    @abstractmethod
    def list_jobs(self, user_id: str, active_only: bool = False) -> list[Job]:
        """List a user's jobs, most recently created first."""
        pass

    @abstractmethod
    def update_job(
        self,
        job_id: int,
        name: Optional[str] = None,
        hourly_rate: Optional[Decimal] = None,
        start_date: Optional[date] = None,
        description: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> None:
        """Update job fields. None leaves a field unchanged."""
        pass

    @abstractmethod
    def delete_job(self, job_id: int) -> None:
        """Delete a job. Time entries referencing it are kept."""
        pass

    # Time entry operations
    @abstractmethod
    def create_time_entry(
        self,
        user_id: str,
        job_id: int,
        date: date,
        hours_worked: Decimal,
        description: Optional[str] = None,
    ) -> int:
        """Create a time entry. Returns entry ID."""
        pass

    @abstractmethod
    def get_time_entry(self, entry_id: int) -> Optional[TimeEntry]:
        """Get time entry by ID."""
        pass

    @abstractmethod
    def list_time_entries(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        job_id: Optional[int] = None,
    ) -> list[TimeEntry]:
        """List a user's time entries, most recent date first.

        Args:
            user_id: Owner of the entries
            start_date: Optional start date filter
            end_date: Optional end date filter
            job_id: Optional job ID filter
        """
        pass

    @abstractmethod
    def update_time_entry(
        self,
        entry_id: int,
        job_id: Optional[int] = None,
        date: Optional[date] = None,
        hours_worked: Optional[Decimal] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update time entry fields. None leaves a field unchanged."""
        pass

    @abstractmethod
    def delete_time_entry(self, entry_id: int) -> None:
        """Delete a time entry."""
        pass

    # Profile operations
    @abstractmethod
    def get_user_profile(self, user_id: str) -> Optional[UserProfile]:
        """Get a user's profile."""
        pass

    @abstractmethod
    def save_user_profile(
        self,
        user_id: str,
        email: Optional[str] = None,
        full_name: Optional[str] = None,
        language: Optional[str] = None,
    ) -> None:
        """Create or update a user's profile.

        None leaves a field unchanged, an empty string clears it.
        """
        pass
