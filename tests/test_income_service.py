"""Tests for income summaries built from stored hours."""

from datetime import date
from decimal import Decimal

from hourtrack.domain.entities import UNKNOWN_JOB_NAME, UserContext
from hourtrack.domain.income import IncomeService


def test_build_aggregation(income_service, job_service, time_entry_service, sample_job):
    tutoring = job_service.create_job(name="Tutoring", hourly_rate=Decimal("250"), start_date=date(2024, 1, 1))
    time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("8"))
    time_entry_service.log_hours(sample_job.id, date(2024, 3, 20), Decimal("4"))
    time_entry_service.log_hours(tutoring, date(2024, 2, 1), Decimal("2"))
    time_entry_service.log_hours(tutoring, date(2023, 12, 15), Decimal("1.5"))

    aggregation = income_service.build_aggregation()

    assert [s.period_key for s in aggregation.monthly] == ["2024-03", "2024-02", "2023-12"]
    assert aggregation.monthly[0].total_income == Decimal("2400")
    assert aggregation.monthly[0].total_hours == Decimal("12")
    assert [s.period_key for s in aggregation.yearly] == ["2024", "2023"]
    assert aggregation.yearly[0].total_income == Decimal("2900")
    assert aggregation.yearly[0].job_breakdown["Tutoring"].income == Decimal("500")
    assert aggregation.yearly[1].total_income == Decimal("375")


def test_build_aggregation_date_filter(income_service, time_entry_service, sample_job):
    time_entry_service.log_hours(sample_job.id, date(2024, 2, 28), Decimal("1"))
    time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("2"))

    aggregation = income_service.build_aggregation(start_date=date(2024, 3, 1))

    assert [s.period_key for s in aggregation.monthly] == ["2024-03"]


def test_deleted_job_shows_as_unknown(income_service, job_service, time_entry_service, sample_job):
    time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("8"))
    job_service.delete_job(sample_job.id)

    aggregation = income_service.build_aggregation()

    breakdown = aggregation.monthly[0].job_breakdown
    assert list(breakdown) == [UNKNOWN_JOB_NAME]
    assert breakdown[UNKNOWN_JOB_NAME].hours == Decimal("8")
    assert breakdown[UNKNOWN_JOB_NAME].income == Decimal("0")


def test_rate_change_reprices_history(income_service, job_service, time_entry_service, sample_job):
    """Income is always computed from the job's current rate."""
    time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("8"))
    job_service.update_job(sample_job.id, hourly_rate=Decimal("250"))

    assert income_service.get_gross_income() == Decimal("2000")


def test_get_totals(income_service, time_entry_service, sample_job):
    time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("7.5"))
    time_entry_service.log_hours(sample_job.id, date(2024, 3, 6), Decimal("0.5"))

    assert income_service.get_totals() == (Decimal("8.0"), Decimal("1600"))


def test_no_entries(income_service):
    aggregation = income_service.build_aggregation()

    assert aggregation.monthly == ()
    assert aggregation.yearly == ()
    assert income_service.get_gross_income() == Decimal("0")


def test_other_users_hours_are_excluded(temp_db, income_service, time_entry_service, sample_job):
    time_entry_service.log_hours(sample_job.id, date(2024, 3, 5), Decimal("8"))

    other = IncomeService(temp_db, UserContext(user_id="someone-else"))

    assert other.build_aggregation().monthly == ()
