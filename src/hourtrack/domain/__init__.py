"""Domain layer for hourtrack application."""

# Services are imported lazily: the database layer imports domain entities,
# and the services import the database layer.
_SERVICES = {
    "JobService": "hourtrack.domain.job",
    "TimeEntryService": "hourtrack.domain.time_entry",
    "ProfileService": "hourtrack.domain.profile",
    "IncomeService": "hourtrack.domain.income",
    "TaxService": "hourtrack.domain.tax",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
