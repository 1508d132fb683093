"""Tests for income normalization and period aggregation."""

from datetime import date, datetime, UTC
from decimal import Decimal

import pytest

from hourtrack.domain.entities import (
    UNKNOWN_JOB_NAME,
    CanonicalRecord,
    Job,
    JobRate,
    PeriodGranularity,
    TimeEntry,
)
from hourtrack.domain.income import (
    aggregate_records,
    group_records_by_period,
    normalize_entries,
    period_key,
    records_from_summaries,
    total_hours,
    total_income,
)

NOW = datetime(2024, 1, 1, tzinfo=UTC)


def _entry(entry_id, day, hours, job_id=1):
    return TimeEntry(
        id=entry_id,
        user_id="u1",
        job_id=job_id,
        date=day,
        hours_worked=Decimal(hours),
        description=None,
        created_at=NOW,
        updated_at=NOW,
    )


def _record(day, hours, job_name, income):
    return CanonicalRecord(
        date=day, hours_worked=Decimal(hours), job_name=job_name, income=Decimal(income)
    )


CAFE = JobRate(job_id=1, name="Cafe Norden", hourly_rate=Decimal("200"))
TUTOR = JobRate(job_id=2, name="Tutoring", hourly_rate=Decimal("250.50"))

MIXED_RECORDS = [
    _record(date(2023, 12, 30), "5", "Cafe Norden", "1000"),
    _record(date(2024, 1, 2), "2.5", "Tutoring", "626.25"),
    _record(date(2024, 1, 15), "8", "Cafe Norden", "1600"),
    _record(date(2024, 3, 5), "0", "Cafe Norden", "0"),
    _record(date(2024, 3, 20), "4", UNKNOWN_JOB_NAME, "0"),
    _record(date(2024, 3, 21), "3.25", "Tutoring", "814.125"),
]


class TestNormalizeEntries:
    """Tests for normalize_entries."""

    def test_prices_entries_with_job_rate(self):
        records = normalize_entries([_entry(1, date(2024, 3, 5), "8")], [CAFE])

        assert records == [
            CanonicalRecord(
                date=date(2024, 3, 5),
                hours_worked=Decimal("8"),
                job_name="Cafe Norden",
                income=Decimal("1600"),
            )
        ]

    def test_accepts_job_entities(self):
        job = Job(
            id=2,
            user_id="u1",
            name="Tutoring",
            hourly_rate=Decimal("250.50"),
            start_date=date(2024, 1, 1),
            description=None,
            is_active=True,
            created_at=NOW,
            updated_at=NOW,
        )

        records = normalize_entries([_entry(1, date(2024, 3, 5), "2", job_id=2)], [job])

        assert records[0].job_name == "Tutoring"
        assert records[0].income == Decimal("501.00")

    def test_unknown_job_degrades_to_sentinel(self):
        records = normalize_entries([_entry(1, date(2024, 3, 5), "6", job_id=99)], [CAFE])

        assert records[0].job_name == UNKNOWN_JOB_NAME
        assert records[0].income == Decimal("0")
        assert records[0].hours_worked == Decimal("6")

    def test_zero_hours_are_kept(self):
        records = normalize_entries([_entry(1, date(2024, 3, 5), "0")], [CAFE])

        assert len(records) == 1
        assert records[0].income == Decimal("0")

    def test_preserves_input_order(self):
        entries = [
            _entry(1, date(2024, 3, 5), "1"),
            _entry(2, date(2023, 1, 5), "2", job_id=2),
            _entry(3, date(2024, 1, 5), "3", job_id=42),
        ]

        records = normalize_entries(entries, [CAFE, TUTOR])

        assert [r.hours_worked for r in records] == [Decimal("1"), Decimal("2"), Decimal("3")]

    def test_none_arguments_fail_fast(self):
        with pytest.raises(TypeError):
            normalize_entries(None, [CAFE])
        with pytest.raises(TypeError):
            normalize_entries([], None)


class TestPeriodKey:
    """Tests for period_key."""

    def test_month_key_is_zero_padded(self):
        assert period_key(date(2024, 3, 5), PeriodGranularity.MONTH) == "2024-03"
        assert period_key(date(2024, 11, 30), PeriodGranularity.MONTH) == "2024-11"

    def test_year_key(self):
        assert period_key(date(2024, 3, 5), PeriodGranularity.YEAR) == "2024"


class TestAggregateRecords:
    """Tests for aggregate_records."""

    def test_same_job_same_month(self):
        """Two entries on one job in March 2024 at 200 DKK/hour."""
        entries = [
            _entry(1, date(2024, 3, 5), "8"),
            _entry(2, date(2024, 3, 20), "4"),
        ]

        aggregation = aggregate_records(normalize_entries(entries, [CAFE]))

        assert len(aggregation.monthly) == 1
        month = aggregation.monthly[0]
        assert month.period_key == "2024-03"
        assert month.total_hours == Decimal("12")
        assert month.total_income == Decimal("2400")

        assert len(aggregation.yearly) == 1
        year = aggregation.yearly[0]
        assert year.period_key == "2024"
        assert year.total_hours == Decimal("12")
        assert year.total_income == Decimal("2400")
        assert year.job_breakdown["Cafe Norden"].hours == Decimal("12")

    def test_unknown_job_appears_in_breakdown(self):
        entries = [
            _entry(1, date(2024, 3, 5), "8"),
            _entry(2, date(2024, 3, 6), "5", job_id=404),
        ]

        aggregation = aggregate_records(normalize_entries(entries, [CAFE]))

        breakdown = aggregation.monthly[0].job_breakdown
        assert breakdown[UNKNOWN_JOB_NAME].hours == Decimal("5")
        assert breakdown[UNKNOWN_JOB_NAME].income == Decimal("0")
        assert aggregation.monthly[0].total_hours == Decimal("13")
        assert aggregation.monthly[0].total_income == Decimal("1600")

    def test_zero_hour_record_creates_period(self):
        aggregation = aggregate_records([_record(date(2022, 6, 1), "0", "Cafe Norden", "0")])

        assert [s.period_key for s in aggregation.monthly] == ["2022-06"]
        assert aggregation.monthly[0].total_hours == Decimal("0")
        assert aggregation.monthly[0].job_breakdown["Cafe Norden"].income == Decimal("0")

    def test_empty_input(self):
        aggregation = aggregate_records([])

        assert aggregation.monthly == ()
        assert aggregation.yearly == ()

    def test_none_input_fails_fast(self):
        with pytest.raises(TypeError):
            aggregate_records(None)

    def test_sorted_descending(self):
        aggregation = aggregate_records(MIXED_RECORDS)

        month_keys = [s.period_key for s in aggregation.monthly]
        year_keys = [s.period_key for s in aggregation.yearly]
        assert month_keys == ["2024-03", "2024-01", "2023-12"]
        assert year_keys == ["2024", "2023"]
        assert all(a > b for a, b in zip(month_keys, month_keys[1:]))

    def test_october_sorts_after_september(self):
        records = [
            _record(date(2024, 9, 1), "1", "A", "1"),
            _record(date(2024, 10, 1), "1", "A", "1"),
        ]

        keys = [s.period_key for s in aggregate_records(records).monthly]

        assert keys == ["2024-10", "2024-09"]

    def test_sum_invariant(self):
        aggregation = aggregate_records(MIXED_RECORDS)

        expected_income = total_income(MIXED_RECORDS)
        expected_hours = total_hours(MIXED_RECORDS)
        assert sum(s.total_income for s in aggregation.monthly) == expected_income
        assert sum(s.total_income for s in aggregation.yearly) == expected_income
        assert sum(s.total_hours for s in aggregation.monthly) == expected_hours
        assert sum(s.total_hours for s in aggregation.yearly) == expected_hours

    def test_totals_equal_breakdown(self):
        aggregation = aggregate_records(MIXED_RECORDS)

        for summary in aggregation.monthly + aggregation.yearly:
            assert summary.total_income == sum(t.income for t in summary.job_breakdown.values())
            assert summary.total_hours == sum(t.hours for t in summary.job_breakdown.values())

    def test_partition_invariant(self):
        aggregation = aggregate_records(MIXED_RECORDS)
        months = {s.period_key: s for s in aggregation.monthly}
        years = {s.period_key: s for s in aggregation.yearly}

        for record in MIXED_RECORDS:
            month_key = f"{record.date.year}-{record.date.month:02d}"
            year_key = str(record.date.year)
            assert record.job_name in months[month_key].job_breakdown
            assert record.job_name in years[year_key].job_breakdown

        # Each record counted once: per-month hours match records in that month
        for key, summary in months.items():
            in_month = [r for r in MIXED_RECORDS if r.date.strftime("%Y-%m") == key]
            assert summary.total_hours == total_hours(in_month)

    def test_idempotent_reaggregation(self):
        aggregation = aggregate_records(MIXED_RECORDS)

        again = aggregate_records(records_from_summaries(aggregation.monthly))

        assert again == aggregation

    def test_group_records_by_year_only(self):
        summaries = group_records_by_period(MIXED_RECORDS, PeriodGranularity.YEAR)

        assert [s.period_key for s in summaries] == ["2024", "2023"]
        assert summaries[0].job_breakdown["Tutoring"].hours == Decimal("5.75")


def test_records_from_yearly_summaries_date_on_january_first():
    aggregation = aggregate_records(MIXED_RECORDS)

    records = records_from_summaries(aggregation.yearly)

    assert {r.date for r in records} == {date(2024, 1, 1), date(2023, 1, 1)}
