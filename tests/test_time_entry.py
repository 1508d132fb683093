"""Tests for time entry logging."""

import pytest
from datetime import date
from decimal import Decimal

from hourtrack.domain.entities import UserContext
from hourtrack.domain.errors import NotFoundError, ValidationError
from hourtrack.domain.time_entry import TimeEntryService, validate_hours


@pytest.mark.parametrize("hours", [Decimal("0.25"), Decimal("8"), Decimal("24")])
def test_validate_hours_accepts_range(hours):
    assert validate_hours(hours) == hours


@pytest.mark.parametrize("hours", [Decimal("0"), Decimal("-1"), Decimal("24.01"), Decimal("NaN")])
def test_validate_hours_rejects_out_of_range(hours):
    with pytest.raises(ValidationError) as excinfo:
        validate_hours(hours)

    assert "between 0 and 24" in str(excinfo.value)


def test_validate_hours_requires_value():
    with pytest.raises(ValidationError):
        validate_hours(None)


def test_log_hours(time_entry_service, sample_job):
    entry_id = time_entry_service.log_hours(
        job_id=sample_job.id, date=date(2024, 3, 5), hours_worked=Decimal("7.5"), description=" Opening "
    )

    entry = time_entry_service.get_entry(entry_id)
    assert entry.job_id == sample_job.id
    assert entry.date == date(2024, 3, 5)
    assert entry.hours_worked == Decimal("7.5")
    assert entry.description == "Opening"


def test_log_hours_requires_existing_job(time_entry_service):
    with pytest.raises(NotFoundError):
        time_entry_service.log_hours(job_id=999, date=date(2024, 3, 5), hours_worked=Decimal("8"))


def test_log_hours_rejects_invalid_hours(time_entry_service, sample_job):
    with pytest.raises(ValidationError):
        time_entry_service.log_hours(job_id=sample_job.id, date=date(2024, 3, 5), hours_worked=Decimal("25"))

    assert time_entry_service.list_entries() == []


def test_list_entries_filters(time_entry_service, sample_job):
    time_entry_service.log_hours(sample_job.id, date(2024, 2, 28), Decimal("4"))
    time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("8"))

    march = time_entry_service.list_entries(start_date=date(2024, 3, 1), end_date=date(2024, 3, 31))

    assert [e.date for e in march] == [date(2024, 3, 5)]
    assert len(time_entry_service.list_entries(job_id=sample_job.id)) == 2


def test_update_entry(time_entry_service, job_service, sample_job):
    other_job = job_service.create_job(name="Tutoring", hourly_rate=Decimal("250"), start_date=date(2024, 1, 1))
    entry_id = time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("8"))

    time_entry_service.update_entry(entry_id, job_id=other_job, hours_worked=Decimal("6"))

    entry = time_entry_service.get_entry(entry_id)
    assert entry.job_id == other_job
    assert entry.hours_worked == Decimal("6")
    assert entry.date == date(2024, 3, 5)


def test_update_entry_validates(time_entry_service, sample_job):
    entry_id = time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("8"))

    with pytest.raises(ValidationError):
        time_entry_service.update_entry(entry_id, hours_worked=Decimal("0"))
    with pytest.raises(NotFoundError):
        time_entry_service.update_entry(entry_id, job_id=999)
    with pytest.raises(NotFoundError):
        time_entry_service.update_entry(12345, hours_worked=Decimal("1"))


def test_delete_entry(time_entry_service, sample_job):
    entry_id = time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("8"))

    time_entry_service.delete_entry(entry_id)

    assert time_entry_service.get_entry(entry_id) is None


def test_entries_of_other_user_are_hidden(temp_db, time_entry_service, sample_job):
    entry_id = time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("8"))
    other = TimeEntryService(temp_db, UserContext(user_id="someone-else"))

    assert other.get_entry(entry_id) is None
    assert other.list_entries() == []
    with pytest.raises(NotFoundError):
        other.delete_entry(entry_id)


@pytest.mark.parametrize("hours", [Decimal("0.004"), Decimal("7.333"), Decimal("0.001")])
def test_validate_hours_rejects_more_than_two_decimals(hours):
    with pytest.raises(ValidationError) as excinfo:
        validate_hours(hours)

    assert "at most 2 decimals" in str(excinfo.value)


def test_logged_hours_are_stored_exactly(time_entry_service, income_service, sample_job):
    entry_id = time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("7.25"))

    assert time_entry_service.get_entry(entry_id).hours_worked == Decimal("7.25")
    assert income_service.get_totals() == (Decimal("7.25"), Decimal("1450"))


def test_log_hours_rejects_value_that_would_be_rounded(time_entry_service, sample_job):
    with pytest.raises(ValidationError):
        time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("0.004"))
    with pytest.raises(ValidationError):
        time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("7.333"))

    assert time_entry_service.list_entries() == []


def test_update_entry_rejects_value_that_would_be_rounded(time_entry_service, sample_job):
    entry_id = time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("8"))

    with pytest.raises(ValidationError):
        time_entry_service.update_entry(entry_id, hours_worked=Decimal("7.333"))

    assert time_entry_service.get_entry(entry_id).hours_worked == Decimal("8")
