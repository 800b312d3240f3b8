"""Weather repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.weather_data import WeatherData


class WeatherRepository(ABC):
    """Abstract repository for weather data access."""

    @abstractmethod
    def get(self, weather_data_id: str) -> Optional[WeatherData]:
        """Retrieve a weather reading by id, or None."""
        pass

    @abstractmethod
    def list_by_crop_field(self, crop_field_id: str) -> List[WeatherData]:
        """
        Retrieve weather readings linked to a crop field.

        Args:
            crop_field_id: Crop field identifier

        Returns:
            List of WeatherData entities in insertion order
        """
        pass

    @abstractmethod
    def create(self, weather_data: WeatherData) -> WeatherData:
        """
        Store a weather reading.

        Args:
            weather_data: Reading to store. recorded_at is kept when set,
                otherwise the current time is used.

        Returns:
            The stored WeatherData with id and recorded_at assigned
        """
        pass

    @abstractmethod
    def get_current(self) -> Optional[WeatherData]:
        """Return the latest reading recorded at or before now, or None if there is none."""
        pass

    @abstractmethod
    def get_forecast(self, days: int) -> List[WeatherData]:
        """
        Retrieve forecast readings.

        Args:
            days: Number of days starting today

        Returns:
            Readings recorded between today (inclusive) and today + days
            (exclusive), oldest first
        """
        pass
