"""
Record store service - the only code that talks to the brew collection.

Writes are append-only and reads always return the full history, newest
first. Every storage failure is re-raised as ``StoreError`` so callers
deal with a single error type.
"""

import logging
from typing import List

from django.db import DatabaseError, transaction

from apps.brews.models import BrewRecord
from .exceptions import StoreError

logger = logging.getLogger(__name__)


class RecordStore:
    """Interface for brew storage backends."""

    def append(self, record: BrewRecord):
        """Persist a new record and return its store-assigned id."""
        raise NotImplementedError

    def load_all(self) -> List[BrewRecord]:
        """Return every record ordered by timestamp, newest first."""
        raise NotImplementedError


class DatabaseRecordStore(RecordStore):
    """RecordStore backed by the ``brews`` table of the default database."""

    def append(self, record: BrewRecord):
        try:
            with transaction.atomic():
                record.save(force_insert=True)
        except DatabaseError as e:
            logger.error("Error saving brew: %s", e, exc_info=True)
            raise StoreError("Failed to save brew") from e

        logger.info("Brew %s saved (%s shift)", record.pk, record.shift)
        return record.pk

    def load_all(self) -> List[BrewRecord]:
        try:
            brews = list(BrewRecord.objects.order_by('-timestamp'))
        except DatabaseError as e:
            logger.error("Error loading brews: %s", e, exc_info=True)
            raise StoreError("Failed to load brews") from e

        logger.debug("Loaded %d brews", len(brews))
        return brews
