"""
MongoDB Donor Repository
========================

Concrete implementation of DonorRepository using MongoDB.
"""
import logging
from typing import List

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection

from blood_drive.domain.constants.donor_fields import DonorFields
from blood_drive.domain.models.donor import Donor
from blood_drive.domain.repositories.donor_repository import DonorRepository
from blood_drive.infrastructure.db.errors import store_operation
from blood_drive.utils.datetime_utils import now

logger = logging.getLogger(__name__)

# Most recent first; _id (ObjectId) preserves insertion order for equal timestamps
RECENT_FIRST = [(DonorFields.DONATED_AT, DESCENDING), (DonorFields.MONGO_ID, DESCENDING)]


class MongoDonorRepository(DonorRepository):
    """
    MongoDB implementation of DonorRepository.

    Handles all donor persistence operations using MongoDB.
    """

    def __init__(self, collection: Collection):
        """
        Initialize repository with its MongoDB collection.

        Args:
            collection: The donors collection
        """
        self._collection = collection

    def _to_entity(self, doc: dict) -> Donor:
        """Convert MongoDB document to Donor entity."""
        return Donor(
            id=doc.get(DonorFields.ID) or str(doc.get(DonorFields.MONGO_ID)),
            full_name=doc.get(DonorFields.FULL_NAME, ""),
            blood_group=doc.get(DonorFields.BLOOD_GROUP, ""),
            age=doc.get(DonorFields.AGE),
            year=doc.get(DonorFields.YEAR, ""),
            donated_at=doc.get(DonorFields.DONATED_AT),
        )

    def _to_document(self, donor: Donor) -> dict:
        """Convert Donor entity to MongoDB document."""
        return {
            DonorFields.ID: donor.id,
            DonorFields.FULL_NAME: donor.full_name,
            DonorFields.BLOOD_GROUP: donor.blood_group,
            DonorFields.AGE: donor.age,
            DonorFields.YEAR: donor.year,
            DonorFields.DONATED_AT: donor.donated_at,
        }

    def ensure_indexes(self) -> None:
        """Create the indexes backing the recent-donors feed."""
        with store_operation("donor index setup"):
            self._collection.create_index(RECENT_FIRST, name="donated_at_recent_first")
            self._collection.create_index([(DonorFields.BLOOD_GROUP, ASCENDING)])
            self._collection.create_index([(DonorFields.ID, ASCENDING)], unique=True)

    def create(self, donor: Donor) -> Donor:
        """Validate and insert a new donor."""
        donor.validate()

        created = donor.with_donated_at(now())
        with store_operation("donor create"):
            self._collection.insert_one(self._to_document(created))

        logger.debug("Inserted donor %s", created.id)
        return created

    def list_recent(self, limit: int) -> List[Donor]:
        """Return up to ``limit`` donors, most recent first."""
        if limit <= 0:
            return []

        with store_operation("donor listing"):
            docs = list(self._collection.find({}).sort(RECENT_FIRST).limit(limit))
        return [self._to_entity(doc) for doc in docs]

    def count(self) -> int:
        """Count all donors."""
        with store_operation("donor count"):
            return self._collection.count_documents({})
