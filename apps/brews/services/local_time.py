"""Local wall-clock helpers shared by the time-dependent services."""

from datetime import datetime

from django.utils import timezone


def to_local(instant: datetime) -> datetime:
    """
    Return ``instant`` as local wall-clock time (project ``TIME_ZONE``).

    Naive datetimes are assumed to already be local and are returned as-is.
    """
    if timezone.is_naive(instant):
        return instant
    return timezone.localtime(instant)
