"""Timekeeping: datetime and timedelta."""

from . import datetimes, timespans

__all__ = ["datetimes", "timespans"]
