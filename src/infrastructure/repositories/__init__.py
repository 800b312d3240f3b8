"""Concrete repository implementations."""

from .in_memory_crop_field_repository import InMemoryCropFieldRepository
from .in_memory_weather_repository import InMemoryWeatherRepository
from .in_memory_prediction_repository import InMemoryPredictionRepository
from .in_memory_ml_model_repository import InMemoryMlModelRepository

__all__ = [
    "InMemoryCropFieldRepository",
    "InMemoryWeatherRepository",
    "InMemoryPredictionRepository",
    "InMemoryMlModelRepository",
]
