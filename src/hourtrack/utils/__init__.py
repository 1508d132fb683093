"""Utility functions for hourtrack."""

from hourtrack.utils.date_parser import parse_date, get_date_range
from hourtrack.utils.number_parser import parse_decimal

__all__ = ["parse_date", "get_date_range", "parse_decimal"]
