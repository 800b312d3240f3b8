"""Yield prediction repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..entities.yield_prediction import YieldPrediction


class PredictionRepository(ABC):
    """Abstract repository for stored yield predictions."""

    @abstractmethod
    def get(self, prediction_id: str) -> Optional[YieldPrediction]:
        """Retrieve a prediction by id, or None."""
        pass

    @abstractmethod
    def list_all(self) -> List[YieldPrediction]:
        """Return every prediction, newest first."""
        pass

    @abstractmethod
    def list_by_crop_field(self, crop_field_id: str) -> List[YieldPrediction]:
        """
        Retrieve predictions for a crop field.

        Args:
            crop_field_id: Crop field identifier

        Returns:
            Matching predictions, newest first
        """
        pass

    @abstractmethod
    def create(self, prediction: YieldPrediction) -> YieldPrediction:
        """Store a prediction and return it with id and created_at assigned."""
        pass

    @abstractmethod
    def update(self, prediction_id: str, updates: Dict[str, Any]) -> Optional[YieldPrediction]:
        """Apply a partial update. Returns None if the prediction does not exist."""
        pass
