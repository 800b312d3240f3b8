"""ML model descriptor entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class ModelStatus(str, Enum):
    """Enumeration for model availability."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    TRAINING = "training"


@dataclass
class MlModel:
    """A prediction model that predictions are attributed to."""

    name: str  # e.g. 'Random Forest Regressor'
    type: str  # e.g. 'Ensemble', 'Deep Learning'
    accuracy: Optional[str] = None  # percent, as text
    status: ModelStatus = ModelStatus.INACTIVE
    last_trained: Optional[datetime] = None
    prediction_count: int = 0
    features: List[str] = field(default_factory=list)
    training_progress: str = "0"  # percent, as text
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, definition: Dict[str, Any]) -> "MlModel":
        """Create an MlModel from a settings definition."""
        last_trained = definition.get("last_trained")
        if isinstance(last_trained, str):
            last_trained = datetime.fromisoformat(last_trained)
        return cls(
            name=definition["name"],
            type=definition["type"],
            accuracy=definition.get("accuracy"),
            status=ModelStatus(definition.get("status", ModelStatus.INACTIVE.value)),
            last_trained=last_trained,
            prediction_count=definition.get("prediction_count", 0),
            features=list(definition.get("features", [])),
            training_progress=definition.get("training_progress", "0"),
        )

    @property
    def is_active(self) -> bool:
        return self.status == ModelStatus.ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "accuracy": self.accuracy,
            "status": self.status.value,
            "last_trained": self.last_trained.isoformat() if self.last_trained else None,
            "prediction_count": self.prediction_count,
            "features": list(self.features),
            "training_progress": self.training_progress,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __str__(self) -> str:
        return self.name
