"""Domain entities."""

from .crop_field import CropField
from .weather_data import WeatherData, WeatherSnapshot
from .factor import Factor, Impact
from .prediction_result import PredictionResult, YieldRange
from .yield_prediction import YieldPrediction, PredictionStatus
from .ml_model import MlModel, ModelStatus

__all__ = [
    "CropField",
    "WeatherData",
    "WeatherSnapshot",
    "Factor",
    "Impact",
    "PredictionResult",
    "YieldRange",
    "YieldPrediction",
    "PredictionStatus",
    "MlModel",
    "ModelStatus",
]
