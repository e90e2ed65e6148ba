import pytest
from datetime import datetime, timedelta
from unittest.mock import patch
from django.utils import timezone
from rest_framework.test import APIClient
from apps.brews.models import BrewRecord
from apps.brews.services import RecordStore, StoreError, classify_shift


class FakeRecordStore(RecordStore):
    """In-memory store that counts calls and can be told to fail."""

    def __init__(self, records=None):
        self.records = list(records or [])
        self.append_calls = 0
        self.load_calls = 0
        self.fail_append = False
        self.fail_load = False
        self._next_id = len(self.records) + 1

    def append(self, record):
        self.append_calls += 1
        if self.fail_append:
            raise StoreError("append rejected")
        record.id = self._next_id
        self._next_id += 1
        self.records.append(record)
        return record.id

    def load_all(self):
        self.load_calls += 1
        if self.fail_load:
            raise StoreError("load failed")
        return sorted(self.records, key=lambda r: r.timestamp, reverse=True)


def make_brew(timestamp, weight=36.0, time=28.0, grind=12.0, pk=None):
    """Build an unsaved brew whose shift matches its timestamp."""
    return BrewRecord(
        id=pk,
        extraction_weight=weight,
        extraction_time=time,
        grind_time=grind,
        timestamp=timestamp,
        shift=classify_shift(timestamp),
    )


@pytest.fixture
def api_client():
    """Return an API client (the brew log has no accounts)."""
    return APIClient()


# =============================================================================
# Time
# =============================================================================

@pytest.fixture
def now():
    """Monday 2024-01-15 09:30 local time."""
    return timezone.make_aware(datetime(2024, 1, 15, 9, 30))


@pytest.fixture
def clock(now):
    """Zero-argument clock frozen at ``now``."""
    return lambda: now


@pytest.fixture
def frozen_now(now):
    """Freeze django.utils.timezone.now for code that builds its own clock."""
    with patch('django.utils.timezone.now', return_value=now):
        yield now


# =============================================================================
# Brews
# =============================================================================

@pytest.fixture
def sample_brews(now):
    """Five brews, newest first: today x2, yesterday, 6 days ago, 8 days ago."""
    return [
        make_brew(now - timedelta(minutes=20), weight=36.5, pk=5),
        make_brew(now.replace(hour=7, minute=5), weight=38.0, pk=4),
        make_brew(now - timedelta(days=1), weight=35.0, pk=3),
        make_brew(now - timedelta(days=6), weight=40.0, pk=2),
        make_brew(now - timedelta(days=8), weight=33.0, pk=1),
    ]


@pytest.fixture
def fake_store(sample_brews):
    """Fake store pre-filled with the sample brews."""
    return FakeRecordStore(sample_brews)


@pytest.fixture
def empty_store():
    return FakeRecordStore()


@pytest.fixture
def saved_brews(db, sample_brews):
    """Sample brews persisted in the database."""
    for brew in sample_brews:
        brew.id = None
        brew.save(force_insert=True)
    return sample_brews


@pytest.fixture
def brew_factory():
    """Return the make_brew helper."""
    return make_brew
