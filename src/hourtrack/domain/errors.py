"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def job_not_found(job_id: int) -> str:
    """Return message for missing job."""
    return f"Job {job_id} not found"


def job_name_not_found(name: str) -> str:
    """Return message for missing job by name."""
    return f"Job '{name}' not found"


def time_entry_not_found(entry_id: int) -> str:
    """Return message for missing time entry."""
    return f"Time entry {entry_id} not found"


def invalid_hours(hours) -> str:
    """Return message for hours outside the accepted range."""
    return f"Please enter a valid number of hours (between 0 and 24), got {hours}"


def invalid_hourly_rate(rate) -> str:
    """Return message for a non-positive hourly rate."""
    return f"Please enter a valid hourly rate, got {rate}"


def unsupported_language(language: str, supported) -> str:
    """Return message for an unknown profile language."""
    return f"Unsupported language '{language}'. Must be one of: {', '.join(sorted(supported))}"


def too_many_decimals(field: str, value) -> str:
    """Return message for a value with more than two decimals."""
    return f"{field} can have at most 2 decimals, got {value}"
