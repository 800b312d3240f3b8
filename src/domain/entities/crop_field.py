"""Crop field entity."""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

from ..numeric import Numeric


@dataclass
class CropField:
    """A field under cultivation and the agronomic attributes used for estimation."""

    crop_type: str  # e.g. 'wheat', 'corn'
    soil_type: str  # e.g. 'loamy', 'clay'
    planting_area: Numeric  # in hectares
    variety: str = ""
    soil_ph: Optional[Numeric] = None
    nitrogen: Optional[Numeric] = None  # kg/ha
    phosphorus: Optional[Numeric] = None  # kg/ha
    potassium: Optional[Numeric] = None  # kg/ha
    irrigation_type: Optional[str] = None  # e.g. 'drip', 'rainfed'
    fertilizer: Optional[str] = None
    pesticides: Optional[str] = None
    notes: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data

    def __str__(self) -> str:
        return f"{self.crop_type}_{self.soil_type}_{self.id}"
