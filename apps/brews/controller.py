"""
Brew log controller.

Owns the state behind the brew log page: the cached brew history and the
active filter. Everything it needs from the outside world (store, clock,
notification sink) is injected, so tests can drive it with fakes.

Classes:
    BrewLogController: Load / filter / submit orchestration.
    LoadErrorPolicy: What happens to the cache when a reload fails.

Example:
    Rendering the page::

        controller = build_controller()
        controller.initialize()
        controller.change_filter('week')
        table = controller.table
        print(f"Showing {table.showing_count} of {table.total_count}")
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional

from django.conf import settings
from django.db import models
from django.utils import timezone

from .models import BrewRecord
from .services import (
    DatabaseRecordStore,
    FilterWindow,
    InvalidBrewInputError,
    RecordStore,
    StoreError,
    classify_shift,
    filter_by_window,
    format_relative,
    get_brew_statistics,
)

logger = logging.getLogger(__name__)

EMPTY_STATE_MESSAGE = 'No brews logged yet. Start logging to see your history!'
SAVE_SUCCESS_MESSAGE = 'Brew logged!'
SAVE_FAILURE_MESSAGE = 'Failed to save brew. Check the logs for details.'


class LoadErrorPolicy(models.TextChoices):
    KEEP_STALE = 'keep_stale', 'Keep stale cache'
    CLEAR_TO_EMPTY = 'clear_to_empty', 'Clear cache'
    PROPAGATE = 'propagate', 'Raise StoreError'


class NotificationLevel(models.TextChoices):
    SUCCESS = 'success', 'Success'
    ERROR = 'error', 'Error'


@dataclass(frozen=True)
class Notification:
    """
    Message for the user.

    ``dismiss_after`` is in seconds; ``None`` means it stays until the user
    acknowledges it (blocking alert).
    """
    level: str
    message: str
    dismiss_after: Optional[float] = None


@dataclass(frozen=True)
class BrewRow:
    id: Optional[int]
    display_timestamp: str
    shift: str
    extraction_weight: float
    extraction_time: float
    grind_time: float


@dataclass
class BrewTable:
    active_filter: str
    rows: List[BrewRow]
    total_count: int
    showing_count: int
    stats: dict
    empty_message: Optional[str] = None


@dataclass
class SubmitOutcome:
    record: BrewRecord
    saved: bool
    clear_form: bool


def brew_log_setting(name, default):
    return getattr(settings, 'BREW_LOG', {}).get(name, default)


def parse_measurements(**values) -> dict:
    """
    Parse submitted measurements into floats.

    Raises:
        InvalidBrewInputError: If any value is missing, not numeric, NaN or
            infinite. ``fields`` lists every offending name.
    """
    parsed = {}
    invalid = []
    for name, raw in values.items():
        try:
            number = float(str(raw).strip())
        except (TypeError, ValueError):
            invalid.append(name)
            continue
        if not math.isfinite(number):
            invalid.append(name)
            continue
        parsed[name] = number

    if invalid:
        raise InvalidBrewInputError(invalid)
    return parsed


class BrewLogController:
    """
    Orchestrates the brew log page.

    State:
        cache: Full brew history as of the last load, newest first
        active_filter: Current FilterWindow
        table: Last rendered BrewTable (None before initialize())
        visible: Records shown in the last rendered table
        last_submit: Outcome of the most recent submit, set before the reload
        notifications: Messages sent through the default notify sink
    """

    def __init__(
        self,
        store: RecordStore,
        clock: Optional[Callable] = None,
        on_load_error: Optional[str] = None,
        notify: Optional[Callable[[Notification], None]] = None,
    ):
        self.store = store
        self.clock = clock or timezone.now
        self.on_load_error = LoadErrorPolicy(
            on_load_error or brew_log_setting('ON_LOAD_ERROR', LoadErrorPolicy.CLEAR_TO_EMPTY)
        )
        self.notifications: List[Notification] = []
        self.notify = notify or self.notifications.append

        self.cache: List[BrewRecord] = []
        self.active_filter = FilterWindow.parse(
            brew_log_setting('DEFAULT_FILTER', FilterWindow.TODAY)
        )
        self.table: Optional[BrewTable] = None
        self.visible: List[BrewRecord] = []
        self.last_submit: Optional[SubmitOutcome] = None

    def initialize(self) -> BrewTable:
        """Reload the whole history from the store and re-render."""
        try:
            self.cache = self.store.load_all()
        except StoreError:
            if self.on_load_error == LoadErrorPolicy.PROPAGATE:
                raise
            if self.on_load_error == LoadErrorPolicy.CLEAR_TO_EMPTY:
                self.cache = []
            logger.warning(
                "Brew reload failed, cache %s (%d brews)",
                'cleared' if not self.cache else 'kept',
                len(self.cache),
            )
        return self.render()

    def change_filter(self, window) -> BrewTable:
        """Switch the active window and re-render from the cache (no fetch)."""
        self.active_filter = FilterWindow.parse(window)
        return self.render()

    def render(self) -> BrewTable:
        now = self.clock()
        filtered = filter_by_window(self.cache, self.active_filter, now)
        self.visible = filtered

        self.table = BrewTable(
            active_filter=self.active_filter.value,
            rows=[
                BrewRow(
                    id=brew.pk,
                    display_timestamp=format_relative(brew.timestamp, now),
                    shift=brew.shift,
                    extraction_weight=brew.extraction_weight,
                    extraction_time=brew.extraction_time,
                    grind_time=brew.grind_time,
                )
                for brew in filtered
            ],
            total_count=len(self.cache),
            showing_count=len(filtered),
            stats=get_brew_statistics(filtered),
            empty_message=None if filtered else EMPTY_STATE_MESSAGE,
        )
        return self.table

    def submit(self, weight, time, grind) -> SubmitOutcome:
        """
        Log a new brew.

        This operation:
        1. Parses the three measurements (raises InvalidBrewInputError)
        2. Stamps the brew with the current time and its shift
        3. Appends it to the store
        4. Reloads the full history, whether or not the append worked
        5. Notifies the user: a 2s toast on success, one alert on failure

        The form should only be cleared when ``clear_form`` is True. If the
        reload raises (propagate policy) the notification is still sent and
        the outcome is available as ``last_submit``.
        """
        values = parse_measurements(
            extraction_weight=weight,
            extraction_time=time,
            grind_time=grind,
        )

        now = self.clock()
        record = BrewRecord(
            timestamp=now,
            shift=classify_shift(now),
            **values,
        )

        try:
            self.store.append(record)
            saved = True
        except StoreError as e:
            # The store already logged the traceback
            logger.warning("Brew could not be saved, input discarded: %s", e)
            saved = False

        self.last_submit = SubmitOutcome(record=record, saved=saved, clear_form=saved)

        # Notify even when the reload raises (propagate policy)
        try:
            self.initialize()
        finally:
            self._notify_submit(saved)

        return self.last_submit

    def _notify_submit(self, saved):
        if saved:
            self.notify(Notification(
                level=NotificationLevel.SUCCESS,
                message=SAVE_SUCCESS_MESSAGE,
                dismiss_after=brew_log_setting('TOAST_DISMISS_SECONDS', 2),
            ))
        else:
            self.notify(Notification(
                level=NotificationLevel.ERROR,
                message=SAVE_FAILURE_MESSAGE,
            ))


def build_controller(**kwargs) -> BrewLogController:
    """Create a controller wired to the database store."""
    kwargs.setdefault('store', DatabaseRecordStore())
    return BrewLogController(**kwargs)
