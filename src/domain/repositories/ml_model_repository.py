"""ML model repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..entities.ml_model import MlModel


class MlModelRepository(ABC):
    """Abstract repository for ML model descriptors."""

    @abstractmethod
    def get(self, model_id: str) -> Optional[MlModel]:
        """Retrieve a model by id, or None."""
        pass

    @abstractmethod
    def list_all(self) -> List[MlModel]:
        """Return every model in insertion order."""
        pass

    @abstractmethod
    def create(self, model: MlModel) -> MlModel:
        """
        Register a new model.

        Args:
            model: The model descriptor

        Returns:
            The stored MlModel with id and created_at assigned, no
            last_trained date and a prediction count of zero
        """
        pass

    @abstractmethod
    def update(self, model_id: str, updates: Dict[str, Any]) -> Optional[MlModel]:
        """Apply a partial update. Returns None if the model does not exist."""
        pass

    @abstractmethod
    def list_active(self) -> List[MlModel]:
        """Return models whose status is active, in insertion order."""
        pass
