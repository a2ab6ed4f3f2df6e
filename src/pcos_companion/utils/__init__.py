"""Utility functions for pcos-companion."""

from .dates import calendar_day, date_sort_key, in_range

__all__ = ["calendar_day", "date_sort_key", "in_range"]
