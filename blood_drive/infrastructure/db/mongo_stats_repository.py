"""
MongoDB Stats Repository
========================

Concrete implementation of StatsRepository using MongoDB.

The aggregate is a single document keyed by ``identifier: "global"``.
A unique index on ``identifier`` makes a second singleton impossible, and
every write is one ``find_one_and_update`` with ``upsert=True`` so creation,
increment and overwrite never read-then-write.
"""
import logging
from typing import Optional, Tuple

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from blood_drive.domain.constants.stats_fields import GLOBAL_STATS_IDENTIFIER, StatsFields
from blood_drive.domain.models.stats import StatsAggregate
from blood_drive.domain.repositories.stats_repository import StatsRepository
from blood_drive.infrastructure.db.errors import store_operation
from blood_drive.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class MongoStatsRepository(StatsRepository):
    """MongoDB implementation of StatsRepository."""

    def __init__(self, collection: Collection):
        self._collection = collection
        self._filter = {StatsFields.IDENTIFIER: GLOBAL_STATS_IDENTIFIER}

    def _to_entity(self, doc: dict) -> StatsAggregate:
        """Convert MongoDB document to StatsAggregate entity."""
        return StatsAggregate(
            identifier=doc.get(StatsFields.IDENTIFIER, GLOBAL_STATS_IDENTIFIER),
            total_units=doc.get(StatsFields.TOTAL_UNITS, 0),
            last_updated=doc.get(StatsFields.LAST_UPDATED),
        )

    def _upsert(self, update: dict, return_document=ReturnDocument.AFTER) -> Optional[dict]:
        """
        Apply ``update`` to the singleton, creating it if missing.

        Two concurrent upserts against an empty collection can both try to
        insert; the loser hits the unique index and is retried once, at which
        point the document exists and the update applies to it.

        With ReturnDocument.BEFORE the result is None when the upsert created
        the document.
        """
        try:
            return self._collection.find_one_and_update(
                self._filter,
                update,
                upsert=True,
                return_document=return_document,
            )
        except DuplicateKeyError:
            logger.debug("Lost stats singleton creation race, retrying update")
            return self._collection.find_one_and_update(
                self._filter,
                update,
                upsert=True,
                return_document=return_document,
            )

    def ensure_indexes(self) -> None:
        """Create the unique index that enforces a single stats document."""
        with store_operation("stats index setup"):
            self._collection.create_index(
                [(StatsFields.IDENTIFIER, ASCENDING)],
                unique=True,
                name="identifier_unique",
            )

    def get(self) -> StatsAggregate:
        """Return the aggregate, lazily creating it with a zero total."""
        with store_operation("stats read"):
            # $setOnInsert only writes when the document is created, so reads
            # of an existing aggregate leave last_updated untouched
            doc = self._upsert({
                "$setOnInsert": {
                    StatsFields.TOTAL_UNITS: 0,
                    StatsFields.LAST_UPDATED: now(),
                }
            })
        return self._to_entity(doc)

    def increment(self, amount: int = 1) -> StatsAggregate:
        """Atomically add ``amount`` units."""
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 1:
            raise ValueError(f"Increment amount must be a positive integer, got {amount!r}")

        with store_operation("stats increment"):
            doc = self._upsert({
                "$inc": {StatsFields.TOTAL_UNITS: amount},
                "$set": {StatsFields.LAST_UPDATED: now()},
            })
        return self._to_entity(doc)

    def set_total(self, total_units: int) -> Tuple[StatsAggregate, int]:
        """Overwrite the total, returning the new aggregate and the total it replaced."""
        if not isinstance(total_units, int) or isinstance(total_units, bool) or total_units < 0:
            raise ValueError(f"Total units must be a non-negative integer, got {total_units!r}")

        updated_at = now()
        with store_operation("stats overwrite"):
            previous = self._upsert(
                {
                    "$set": {
                        StatsFields.TOTAL_UNITS: total_units,
                        StatsFields.LAST_UPDATED: updated_at,
                    }
                },
                return_document=ReturnDocument.BEFORE,
            )

        previous_total = previous.get(StatsFields.TOTAL_UNITS, 0) if previous else 0
        stats = StatsAggregate(total_units=total_units, last_updated=updated_at)
        return stats, previous_total
