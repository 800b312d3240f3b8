"""Use cases - core business operations."""

from .estimate_yield import EstimateYieldUseCase
from .estimate_revenue import EstimateRevenueUseCase
from .assess_weather_impact import AssessWeatherImpactUseCase
from .summarize_predictions import SummarizePredictionsUseCase

__all__ = [
    "EstimateYieldUseCase",
    "EstimateRevenueUseCase",
    "AssessWeatherImpactUseCase",
    "SummarizePredictionsUseCase",
]
