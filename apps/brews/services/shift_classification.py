"""Shift classification service - map a moment to the shift it falls in."""

from datetime import datetime

from apps.brews.models import Shift
from .local_time import to_local

# Shift boundaries, local hour of day (start inclusive, end exclusive)
AM_START_HOUR = 7
PM_START_HOUR = 15
NIGHT_START_HOUR = 23


def classify_shift(instant: datetime) -> Shift:
    """
    Classify a moment into a working shift by its local hour.

    AM:    07:00 - 14:59
    PM:    15:00 - 22:59
    Night: 23:00 - 06:59

    Example:
        >>> classify_shift(datetime(2024, 1, 15, 9, 30))
        <Shift.AM: 'AM'>
        >>> classify_shift(datetime(2024, 1, 15, 23, 0))
        <Shift.NIGHT: 'Night'>
    """
    hour = to_local(instant).hour

    if AM_START_HOUR <= hour < PM_START_HOUR:
        return Shift.AM
    if PM_START_HOUR <= hour < NIGHT_START_HOUR:
        return Shift.PM
    return Shift.NIGHT
