"""In-memory ML model repository implementation."""

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional
from ...domain.entities.ml_model import MlModel
from ...domain.repositories.ml_model_repository import MlModelRepository

logger = logging.getLogger(__name__)


class InMemoryMlModelRepository(MlModelRepository):
    """Repository keeping model descriptors in a process-local dictionary."""

    def __init__(
        self,
        seed_models: Optional[Iterable[Dict[str, Any]]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize repository.

        Args:
            seed_models: Model definitions to load as-is (see DEFAULT_ML_MODELS)
            clock: Callable returning the current time
        """
        self.clock = clock
        self._models: Dict[str, MlModel] = {}

        for definition in seed_models or []:
            model = replace(
                MlModel.from_dict(definition), id=str(uuid.uuid4()), created_at=self.clock()
            )
            self._models[model.id] = model
        logger.info(f"Loaded {len(self._models)} ML model descriptors")

    def get(self, model_id: str) -> Optional[MlModel]:
        return self._models.get(model_id)

    def list_all(self) -> List[MlModel]:
        return list(self._models.values())

    def create(self, model: MlModel) -> MlModel:
        stored = replace(
            model,
            id=str(uuid.uuid4()),
            created_at=self.clock(),
            last_trained=None,
            prediction_count=0,
        )
        self._models[stored.id] = stored
        logger.info(f"Registered model {stored.name}")
        return stored

    def update(self, model_id: str, updates: Dict[str, Any]) -> Optional[MlModel]:
        existing = self._models.get(model_id)
        if existing is None:
            return None
        updated = replace(existing, **updates)
        self._models[model_id] = updated
        return updated

    def list_active(self) -> List[MlModel]:
        return [m for m in self._models.values() if m.is_active]
