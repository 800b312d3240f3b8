"""Shared fixtures."""

import random

import pytest

from config.settings import (
    DEFAULT_ML_MODELS,
    DEFAULT_MODEL_NAME,
    DEFAULT_WEATHER,
    FORECAST_TEMPLATE,
)
from src.application.services.crop_yield_service import CropYieldService
from src.infrastructure.repositories import (
    InMemoryCropFieldRepository,
    InMemoryMlModelRepository,
    InMemoryPredictionRepository,
    InMemoryWeatherRepository,
)
from tests.clock import make_clock


@pytest.fixture
def clock():
    return make_clock()


@pytest.fixture
def service(clock):
    return CropYieldService(
        crop_field_repo=InMemoryCropFieldRepository(clock=clock),
        weather_repo=InMemoryWeatherRepository(clock=clock),
        prediction_repo=InMemoryPredictionRepository(clock=clock),
        model_repo=InMemoryMlModelRepository(DEFAULT_ML_MODELS, clock=clock),
        default_model_name=DEFAULT_MODEL_NAME,
        default_weather=DEFAULT_WEATHER,
        forecast_template=FORECAST_TEMPLATE,
        rng=random.Random(42),
        clock=clock,
    )
