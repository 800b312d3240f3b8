"""In-memory weather repository implementation."""

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional
from ...domain.entities.weather_data import WeatherData
from ...domain.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)


class InMemoryWeatherRepository(WeatherRepository):
    """Repository keeping weather readings in a process-local dictionary."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """
        Initialize repository.

        Args:
            clock: Callable returning the current time
        """
        self.clock = clock
        self._readings: Dict[str, WeatherData] = {}

    def get(self, weather_data_id: str) -> Optional[WeatherData]:
        return self._readings.get(weather_data_id)

    def list_by_crop_field(self, crop_field_id: str) -> List[WeatherData]:
        return [w for w in self._readings.values() if w.crop_field_id == crop_field_id]

    def create(self, weather_data: WeatherData) -> WeatherData:
        stored = replace(
            weather_data,
            id=str(uuid.uuid4()),
            recorded_at=weather_data.recorded_at or self.clock(),
        )
        self._readings[stored.id] = stored
        logger.debug(f"Stored weather reading {stored.id} at {stored.recorded_at}")
        return stored

    def get_current(self) -> Optional[WeatherData]:
        # Forecast days are stored ahead of time and are not current
        now = self.clock()
        recorded = [w for w in self._readings.values() if w.recorded_at <= now]
        if not recorded:
            return None
        return max(recorded, key=lambda w: w.recorded_at)

    def get_forecast(self, days: int) -> List[WeatherData]:
        today = self.clock().date()
        end = today + timedelta(days=days)
        forecast = [w for w in self._readings.values() if today <= w.recorded_at.date() < end]
        return sorted(forecast, key=lambda w: w.recorded_at)
