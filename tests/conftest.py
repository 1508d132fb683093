"""Shared pytest fixtures for hourtrack tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from hourtrack.database.factories import create_sqlite_database
from hourtrack.domain.entities import UserContext
from hourtrack.domain.income import IncomeService
from hourtrack.domain.job import JobService
from hourtrack.domain.profile import ProfileService
from hourtrack.domain.time_entry import TimeEntryService

TEST_USER = "test-user"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user():
    """The user every service acts for."""
    return UserContext(user_id=TEST_USER)


@pytest.fixture
def job_service(temp_db, user):
    """Create a JobService with a temporary database."""
    return JobService(temp_db, user)


@pytest.fixture
def time_entry_service(temp_db, user):
    """Create a TimeEntryService with a temporary database."""
    return TimeEntryService(temp_db, user)


@pytest.fixture
def income_service(temp_db, user):
    """Create an IncomeService with a temporary database."""
    return IncomeService(temp_db, user)


@pytest.fixture
def profile_service(temp_db, user):
    """Create a ProfileService with a temporary database."""
    return ProfileService(temp_db, user)


@pytest.fixture
def sample_job(job_service):
    """Create a sample job paying 200 DKK/hour."""
    job_id = job_service.create_job(
        name="Cafe Norden", hourly_rate=Decimal("200"), start_date=date(2024, 1, 1)
    )
    return job_service.get_job(job_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(temp_db):
    """Global CLI arguments pointing at the temporary database and test user."""
    return ["--db-path", temp_db.database_path, "--user", TEST_USER]
