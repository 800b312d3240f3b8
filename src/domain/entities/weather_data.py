"""Weather data entities."""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from ..numeric import Numeric


@dataclass(frozen=True)
class WeatherSnapshot:
    """Weather conditions fed into a yield estimate."""

    temperature: Optional[Numeric] = None  # Celsius
    rainfall: Optional[Numeric] = None  # mm

    @classmethod
    def from_dict(cls, payload: Optional[Mapping[str, Any]]) -> Optional["WeatherSnapshot"]:
        """Create a snapshot from a raw request payload, or None if there is none."""
        if not payload:
            return None
        return cls(
            temperature=payload.get("temperature"),
            rainfall=payload.get("rainfall"),
        )


@dataclass
class WeatherData:
    """Represents a stored weather reading, optionally tied to a crop field."""

    crop_field_id: Optional[str] = None
    temperature: Optional[float] = None  # Celsius
    rainfall: Optional[float] = None  # mm
    humidity: Optional[float] = None  # percentage
    sunlight: Optional[float] = None  # hours
    wind_speed: Optional[float] = None  # km/h
    soil_moisture: Optional[float] = None  # percentage
    uv_index: Optional[int] = None
    condition: Optional[str] = None  # 'sunny', 'partly-cloudy', 'rainy'
    id: Optional[str] = None
    recorded_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        data = asdict(self)
        data["recorded_at"] = self.recorded_at.isoformat() if self.recorded_at else None
        return data
