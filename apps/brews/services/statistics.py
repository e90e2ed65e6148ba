"""Statistics service - aggregates over a list of brews."""

from typing import Iterable, Optional

from apps.brews.models import Shift


def _average(values) -> Optional[float]:
    if not values:
        return None
    return round(sum(values) / len(values), 2)


def get_brew_statistics(records: Iterable) -> dict:
    """
    Calculate summary statistics for a set of brews.

    Works on already-loaded records (usually the filtered cache), so it
    never touches the store.

    Returns:
        Dictionary with:
        - count: int - Number of brews
        - avg_extraction_weight: float | None - Mean grams extracted
        - avg_extraction_time: float | None - Mean extraction seconds
        - avg_grind_time: float | None - Mean grind seconds
        - by_shift: dict - Brew count for each shift (AM, PM, Night)

    Example:
        >>> stats = get_brew_statistics(brews)
        >>> stats['by_shift']
        {'AM': 4, 'PM': 2, 'Night': 0}
    """
    records = list(records)

    by_shift = {shift.value: 0 for shift in Shift}
    for record in records:
        by_shift[record.shift] = by_shift.get(record.shift, 0) + 1

    return {
        'count': len(records),
        'avg_extraction_weight': _average([r.extraction_weight for r in records]),
        'avg_extraction_time': _average([r.extraction_time for r in records]),
        'avg_grind_time': _average([r.grind_time for r in records]),
        'by_shift': by_shift,
    }
