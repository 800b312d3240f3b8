"""Prediction result entity."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .factor import Factor


@dataclass(frozen=True)
class YieldRange:
    """Plausible band around a predicted yield (tons/hectare)."""

    min: float
    max: float

    def __contains__(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class PredictionResult:
    """Output of a single yield estimate."""

    predicted_yield: float  # tons/hectare
    confidence: int  # percent
    yield_range: YieldRange
    factors: Tuple[Factor, ...]
    recommendations: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "predicted_yield": self.predicted_yield,
            "confidence": self.confidence,
            "yield_range": {"min": self.yield_range.min, "max": self.yield_range.max},
            "factors": [f.to_dict() for f in self.factors],
            "recommendations": list(self.recommendations),
        }
