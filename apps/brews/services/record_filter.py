"""Record filter service - select cached brews by time window."""

from datetime import datetime, timedelta
from typing import Iterable, List

from django.db import models

from .local_time import to_local

WEEK_WINDOW = timedelta(days=7)


class FilterWindow(models.TextChoices):
    TODAY = 'today', 'Today'
    WEEK = 'week', 'This week'
    ALL = 'all', 'All'

    @classmethod
    def parse(cls, value) -> 'FilterWindow':
        """Return the matching window; anything unrecognised means ALL."""
        try:
            return cls(value)
        except ValueError:
            return cls.ALL


def filter_by_window(records: Iterable, window, now: datetime) -> List:
    """
    Return the records that fall into ``window``, in their original order.

    Windows:
        today: same local calendar date as ``now``
        week:  timestamp >= now - 7 days (rolling, not calendar-truncated)
        all:   everything (also used for unknown window names)

    The input sequence is never modified.
    """
    records = list(records)
    window = FilterWindow.parse(window)

    if window == FilterWindow.TODAY:
        today = to_local(now).date()
        return [r for r in records if to_local(r.timestamp).date() == today]

    if window == FilterWindow.WEEK:
        week_ago = now - WEEK_WINDOW
        return [r for r in records if r.timestamp >= week_ago]

    return records
