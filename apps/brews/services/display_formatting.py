"""Display formatting service - human-friendly brew timestamps."""

from datetime import datetime, timedelta

from .local_time import to_local


def format_relative(instant: datetime, now: datetime) -> str:
    """
    Format a brew timestamp relative to ``now``.

    Days are compared as local calendar dates, so 00:01 is "Today" even if
    the previous brew was logged two minutes earlier "Yesterday".

    Returns:
        "Today HH:MM", "Yesterday HH:MM" or "DD/MM/YYYY HH:MM"

    Example:
        >>> now = datetime(2024, 1, 15, 12, 0)
        >>> format_relative(datetime(2024, 1, 14, 23, 59), now)
        'Yesterday 23:59'
        >>> format_relative(datetime(2024, 1, 3, 7, 5), now)
        '03/01/2024 07:05'
    """
    local_instant = to_local(instant)
    today = to_local(now).date()
    brew_date = local_instant.date()

    if brew_date == today:
        prefix = 'Today'
    elif brew_date == today - timedelta(days=1):
        prefix = 'Yesterday'
    else:
        prefix = brew_date.strftime('%d/%m/%Y')

    return f"{prefix} {local_instant:%H:%M}"
