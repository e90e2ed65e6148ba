"""
Brews services - Business logic layer.

This package contains the brew log operations:
- Shift classification
- Relative timestamp formatting
- Time-window filtering
- Statistics
- Record storage adapter
"""

from .shift_classification import classify_shift
from .display_formatting import format_relative
from .record_filter import FilterWindow, filter_by_window
from .statistics import get_brew_statistics
from .record_store import RecordStore, DatabaseRecordStore

# Domain Exceptions
from .exceptions import (
    BrewLogServiceError,
    StoreError,
    InvalidBrewInputError,
)

__all__ = [
    'classify_shift',
    'format_relative',
    'FilterWindow',
    'filter_by_window',
    'get_brew_statistics',
    'RecordStore',
    'DatabaseRecordStore',
    # Exceptions
    'BrewLogServiceError',
    'StoreError',
    'InvalidBrewInputError',
]
