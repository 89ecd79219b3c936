"""Career catalog service.

Reads the catalog (cached in Redis as a whole), manages saved careers and the
administrative seed/edit actions. The catalog is always returned in ``_id``
order so ranking ties resolve the same way on every read.
"""

from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING

from careerpilot.cache.cache_manager import CacheManager
from careerpilot.core.security import ensure_admin, require_user_id
from careerpilot.database.mongodb import MongoDBOperations
from careerpilot.models.base import to_object_id
from careerpilot.models.career import CareerPath, SavedCareer
from careerpilot.utils.constants import DEFAULT_CAREER_PATHS, Collections, SaveToggleStatus
from careerpilot.utils.exceptions import ResourceNotFoundError, ValidationError
from careerpilot.utils.logger import get_logger

logger = get_logger(__name__)

CATALOG_SORT = [("_id", ASCENDING)]


class CareerService:
    """Service for the career path catalog and saved careers."""

    def __init__(self, db=None, cache=None):
        """Initialize career service.

        Args:
            db: Database operations (defaults to MongoDBOperations)
            cache: Cache manager (defaults to a CacheManager over Redis)
        """
        self.db = db or MongoDBOperations
        self.cache = cache or CacheManager()

    # Catalog reads

    async def list_careers(self) -> List[CareerPath]:
        """Full catalog in catalog order, served from cache when possible."""
        cached = await self.cache.get_catalog()
        if cached is not None:
            return [CareerPath.model_validate(entry) for entry in cached]

        documents = await self.db.find_many(Collections.CAREER_PATHS, {}, sort=CATALOG_SORT)
        careers = [CareerPath.from_mongo(doc) for doc in documents]
        await self.cache.cache_catalog([career.to_dict() for career in careers])

        logger.debug("Career catalog loaded from database", extra={"count": len(careers)})
        return careers

    async def list_categories(self) -> List[str]:
        """Distinct categories in the order they first appear."""
        categories: List[str] = []
        for career in await self.list_careers():
            if career.category not in categories:
                categories.append(career.category)
        return categories

    async def get_career(self, career_path_id: str) -> CareerPath:
        """Get one career path.

        Raises:
            ResourceNotFoundError: If the id is malformed or unknown
        """
        document = await self.db.find_one_by_id(Collections.CAREER_PATHS, career_path_id)
        if document is None:
            raise ResourceNotFoundError(
                "Career path not found",
                resource_type="career_path",
                resource_id=str(career_path_id),
            )
        return CareerPath.from_mongo(document)

    async def find_career(self, career_path_id: Optional[str]) -> Optional[CareerPath]:
        """Like ``get_career`` but returns None for a missing or blank id."""
        if not career_path_id:
            return None
        document = await self.db.find_one_by_id(Collections.CAREER_PATHS, career_path_id)
        return CareerPath.from_mongo(document) if document else None

    # Saved careers

    async def toggle_saved_career(
        self,
        user: Optional[Dict[str, Any]],
        career_path_id: str,
    ) -> SaveToggleStatus:
        """Save a career for the user, or remove it when already saved."""
        user_id = require_user_id(user)
        career_oid = to_object_id(career_path_id)
        if career_oid is None:
            raise ValidationError("Invalid career path id", field="career_path_id", value=career_path_id)

        await self.get_career(career_path_id)

        existing = await self.db.find_one(
            Collections.SAVED_CAREERS,
            {"user_id": user_id, "career_path_id": career_oid},
        )
        if existing:
            await self.db.delete_one(Collections.SAVED_CAREERS, {"_id": existing["_id"]})
            logger.info("Career removed from saved list", extra={"user_id": user_id})
            return SaveToggleStatus.REMOVED

        saved = SavedCareer(user_id=user_id, career_path_id=career_oid)
        await self.db.insert_one(Collections.SAVED_CAREERS, saved.to_mongo())
        logger.info("Career saved", extra={"user_id": user_id})
        return SaveToggleStatus.SAVED

    async def list_saved_careers(self, user: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Saved careers joined with their catalog entries.

        Rows whose career no longer exists are skipped.

        Returns:
            List of ``{"saved_career_id", "career"}`` entries, newest first
        """
        user_id = require_user_id(user)
        rows = await self.db.find_many(
            Collections.SAVED_CAREERS,
            {"user_id": user_id},
            sort=[("created_at", DESCENDING)],
        )

        detailed = []
        for row in rows:
            career = await self.db.find_one_by_id(Collections.CAREER_PATHS, row["career_path_id"])
            if career is None:
                continue
            detailed.append({
                "saved_career_id": str(row["_id"]),
                "career": CareerPath.from_mongo(career),
            })
        return detailed

    # Administration

    async def seed_catalog(self, user: Optional[Dict[str, Any]]) -> int:
        """Insert the default career paths when the catalog is empty.

        Returns:
            Number of inserted career paths (0 when already seeded)
        """
        ensure_admin(user)
        if await self.db.count_documents(Collections.CAREER_PATHS) > 0:
            return 0

        careers = [CareerPath(**entry) for entry in DEFAULT_CAREER_PATHS]
        inserted = await self.db.insert_many(
            Collections.CAREER_PATHS,
            [career.to_mongo() for career in careers],
        )
        await self.cache.invalidate_catalog()
        logger.info("Career catalog seeded", extra={"inserted": len(inserted)})
        return len(inserted)

    async def update_career(
        self,
        user: Optional[Dict[str, Any]],
        career_path_id: str,
        changes: Dict[str, Any],
    ) -> CareerPath:
        """Apply an administrative edit to a career path.

        Omitted (None) fields are left untouched. Past assessments keep the
        titles they were issued with.
        """
        admin_id = ensure_admin(user)
        career = await self.get_career(career_path_id)

        updates = {key: value for key, value in changes.items() if value is not None}
        if not updates:
            return career

        await self.db.update_one(
            Collections.CAREER_PATHS,
            {"_id": career.id},
            {"$set": updates},
        )
        await self.cache.invalidate_catalog()

        logger.info(
            "Career path updated",
            extra={"career_path_id": career.id_str, "fields": sorted(updates), "admin_id": admin_id}
        )
        return career.model_copy(update=updates)


__all__ = ["CareerService"]
