"""In-memory yield prediction repository implementation."""

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional
from ...domain.entities.yield_prediction import YieldPrediction
from ...domain.repositories.prediction_repository import PredictionRepository

logger = logging.getLogger(__name__)


class InMemoryPredictionRepository(PredictionRepository):
    """Repository keeping predictions in a process-local dictionary."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """
        Initialize repository.

        Args:
            clock: Callable returning the current time
        """
        self.clock = clock
        self._predictions: Dict[str, YieldPrediction] = {}

    def get(self, prediction_id: str) -> Optional[YieldPrediction]:
        return self._predictions.get(prediction_id)

    def list_all(self) -> List[YieldPrediction]:
        return self._newest_first(self._predictions.values())

    def list_by_crop_field(self, crop_field_id: str) -> List[YieldPrediction]:
        return self._newest_first(
            p for p in self._predictions.values() if p.crop_field_id == crop_field_id
        )

    def create(self, prediction: YieldPrediction) -> YieldPrediction:
        stored = replace(prediction, id=str(uuid.uuid4()), created_at=self.clock())
        self._predictions[stored.id] = stored
        logger.info(f"Stored prediction {stored.id} for crop field {stored.crop_field_id}")
        return stored

    def update(self, prediction_id: str, updates: Dict[str, Any]) -> Optional[YieldPrediction]:
        existing = self._predictions.get(prediction_id)
        if existing is None:
            return None
        updated = replace(existing, **updates)
        self._predictions[prediction_id] = updated
        return updated

    @staticmethod
    def _newest_first(predictions) -> List[YieldPrediction]:
        return sorted(predictions, key=lambda p: p.created_at, reverse=True)
