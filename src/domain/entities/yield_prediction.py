"""Stored yield prediction entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class PredictionStatus(str, Enum):
    """Lifecycle state of a stored prediction."""

    COMPLETED = "completed"
    PROCESSING = "processing"
    FAILED = "failed"


@dataclass
class YieldPrediction:
    """A persisted prediction. Decimal values are kept as text."""

    crop_field_id: str
    predicted_yield: str
    confidence: str
    weather_data_id: Optional[str] = None
    yield_range_min: Optional[str] = None
    yield_range_max: Optional[str] = None
    model_used: Optional[str] = None
    factors: List[Dict[str, str]] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    market_price: Optional[str] = None
    estimated_revenue: Optional[str] = None
    status: PredictionStatus = PredictionStatus.COMPLETED
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "id": self.id,
            "crop_field_id": self.crop_field_id,
            "weather_data_id": self.weather_data_id,
            "predicted_yield": self.predicted_yield,
            "confidence": self.confidence,
            "yield_range_min": self.yield_range_min,
            "yield_range_max": self.yield_range_max,
            "model_used": self.model_used,
            "factors": list(self.factors),
            "recommendations": list(self.recommendations),
            "market_price": self.market_price,
            "estimated_revenue": self.estimated_revenue,
            "status": self.status.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
