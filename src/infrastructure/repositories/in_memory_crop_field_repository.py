"""In-memory crop field repository implementation."""

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional
from ...domain.entities.crop_field import CropField
from ...domain.repositories.crop_field_repository import CropFieldRepository

logger = logging.getLogger(__name__)


class InMemoryCropFieldRepository(CropFieldRepository):
    """Repository keeping crop fields in a process-local dictionary."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """
        Initialize repository.

        Args:
            clock: Callable returning the current time
        """
        self.clock = clock
        self._crop_fields: Dict[str, CropField] = {}

    def get(self, crop_field_id: str) -> Optional[CropField]:
        return self._crop_fields.get(crop_field_id)

    def list_all(self) -> List[CropField]:
        return list(self._crop_fields.values())

    def create(self, crop_field: CropField) -> CropField:
        stored = replace(crop_field, id=str(uuid.uuid4()), created_at=self.clock())
        self._crop_fields[stored.id] = stored
        logger.info(f"Created crop field {stored.id} ({stored.crop_type})")
        return stored

    def update(self, crop_field_id: str, updates: Dict[str, Any]) -> Optional[CropField]:
        existing = self._crop_fields.get(crop_field_id)
        if existing is None:
            return None
        updated = replace(existing, **updates)
        self._crop_fields[crop_field_id] = updated
        logger.info(f"Updated crop field {crop_field_id}: {sorted(updates)}")
        return updated

    def delete(self, crop_field_id: str) -> bool:
        deleted = self._crop_fields.pop(crop_field_id, None) is not None
        if deleted:
            logger.info(f"Deleted crop field {crop_field_id}")
        return deleted
