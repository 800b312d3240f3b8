"""Crop field repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..entities.crop_field import CropField


class CropFieldRepository(ABC):
    """Abstract repository for crop field access."""

    @abstractmethod
    def get(self, crop_field_id: str) -> Optional[CropField]:
        """
        Retrieve a crop field by id.

        Args:
            crop_field_id: Crop field identifier

        Returns:
            The CropField, or None if it does not exist
        """
        pass

    @abstractmethod
    def list_all(self) -> List[CropField]:
        """Return every crop field in insertion order."""
        pass

    @abstractmethod
    def create(self, crop_field: CropField) -> CropField:
        """
        Store a new crop field.

        Args:
            crop_field: Crop field without id/created_at

        Returns:
            The stored CropField with id and created_at assigned
        """
        pass

    @abstractmethod
    def update(self, crop_field_id: str, updates: Dict[str, Any]) -> Optional[CropField]:
        """
        Apply a partial update.

        Args:
            crop_field_id: Crop field identifier
            updates: Attribute names mapped to their new values

        Returns:
            The updated CropField, or None if it does not exist
        """
        pass

    @abstractmethod
    def delete(self, crop_field_id: str) -> bool:
        """Delete a crop field. Returns True if something was deleted."""
        pass
