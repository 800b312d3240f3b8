"""Repository interfaces."""

from .crop_field_repository import CropFieldRepository
from .weather_repository import WeatherRepository
from .prediction_repository import PredictionRepository
from .ml_model_repository import MlModelRepository

__all__ = [
    "CropFieldRepository",
    "WeatherRepository",
    "PredictionRepository",
    "MlModelRepository",
]
