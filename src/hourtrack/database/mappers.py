"""Mapper functions to convert SQLAlchemy models into domain entities.

This layer isolates the conversion logic, so the income and tax code never
depends on the table layout.
"""

from decimal import Decimal

from hourtrack.domain import entities as domain
from hourtrack.database.models import (
    Job as ORMJob,
    WorkHour as ORMWorkHour,
    UserProfile as ORMUserProfile,
)


def job_to_domain(orm_job: ORMJob) -> domain.Job:
    """Convert SQLAlchemy Job model to domain Job entity."""
    return domain.Job(
        id=orm_job.id,
        user_id=orm_job.user_id,
        name=orm_job.name,
        hourly_rate=Decimal(orm_job.hourly_rate),
        start_date=orm_job.start_date,
        description=orm_job.description,
        is_active=orm_job.is_active,
        created_at=orm_job.created_at,
        updated_at=orm_job.updated_at,
    )


def time_entry_to_domain(orm_entry: ORMWorkHour) -> domain.TimeEntry:
    """Convert SQLAlchemy WorkHour model to domain TimeEntry entity."""
    return domain.TimeEntry(
        id=orm_entry.id,
        user_id=orm_entry.user_id,
        job_id=orm_entry.job_id,
        date=orm_entry.date,
        hours_worked=Decimal(orm_entry.hours_worked),
        description=orm_entry.description,
        created_at=orm_entry.created_at,
        updated_at=orm_entry.updated_at,
    )


def user_profile_to_domain(orm_profile: ORMUserProfile) -> domain.UserProfile:
    """Convert SQLAlchemy UserProfile model to domain UserProfile entity."""
    return domain.UserProfile(
        id=orm_profile.id,
        email=orm_profile.email,
        full_name=orm_profile.full_name,
        language=orm_profile.language,
        created_at=orm_profile.created_at,
        updated_at=orm_profile.updated_at,
    )
