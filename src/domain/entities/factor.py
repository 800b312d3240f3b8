"""Prediction factor entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Impact(str, Enum):
    """Qualitative effect of a factor on the predicted yield."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class Factor:
    """A single reported influence on a prediction."""

    name: str  # e.g. 'Soil pH Level'
    impact: Impact
    value: str  # e.g. '6.8 (Optimal)'

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "impact": self.impact.value, "value": self.value}
