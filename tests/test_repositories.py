"""Tests for in-memory repositories."""

from datetime import datetime, timedelta

from config.settings import DEFAULT_ML_MODELS
from src.domain.entities.crop_field import CropField
from src.domain.entities.ml_model import MlModel, ModelStatus
from src.domain.entities.weather_data import WeatherData
from src.domain.entities.yield_prediction import YieldPrediction
from src.infrastructure.repositories import (
    InMemoryCropFieldRepository,
    InMemoryMlModelRepository,
    InMemoryPredictionRepository,
    InMemoryWeatherRepository,
)
from tests.clock import START, make_clock


def test_crop_field_crud():
    repo = InMemoryCropFieldRepository(clock=make_clock())
    created = repo.create(CropField(crop_type="wheat", soil_type="loamy", planting_area=2))

    assert created.id
    assert created.created_at == START
    assert repo.get(created.id) == created
    assert repo.list_all() == [created]

    updated = repo.update(created.id, {"nitrogen": 120})
    assert updated.nitrogen == 120
    assert updated.crop_type == "wheat"
    assert repo.get(created.id).nitrogen == 120

    assert repo.update("missing", {"nitrogen": 1}) is None
    assert repo.delete(created.id) is True
    assert repo.delete(created.id) is False
    assert repo.get(created.id) is None


def test_weather_filters_by_crop_field():
    repo = InMemoryWeatherRepository(clock=make_clock())
    first = repo.create(WeatherData(crop_field_id="a", temperature=20.0))
    repo.create(WeatherData(crop_field_id="b", temperature=21.0))
    third = repo.create(WeatherData(crop_field_id="a", temperature=22.0))

    assert repo.list_by_crop_field("a") == [first, third]
    assert repo.list_by_crop_field("c") == []


def test_current_weather_is_most_recent_reading():
    repo = InMemoryWeatherRepository(clock=make_clock(START + timedelta(days=1)))
    assert repo.get_current() is None

    repo.create(WeatherData(temperature=20.0, recorded_at=START + timedelta(hours=2)))
    latest = repo.create(WeatherData(temperature=30.0, recorded_at=START + timedelta(hours=5)))
    repo.create(WeatherData(temperature=25.0, recorded_at=START + timedelta(hours=1)))

    assert repo.get_current() == latest


def test_current_weather_ignores_future_readings():
    repo = InMemoryWeatherRepository(clock=make_clock())
    repo.create(WeatherData(temperature=35.0, recorded_at=START + timedelta(days=3)))
    assert repo.get_current() is None

    now = repo.create(WeatherData(temperature=22.0))
    assert repo.get_current() == now


def test_forecast_window():
    repo = InMemoryWeatherRepository(clock=make_clock())
    for offset in [3, -1, 0, 6, 7, 1]:
        repo.create(WeatherData(temperature=float(offset), recorded_at=START + timedelta(days=offset)))

    forecast = repo.get_forecast(7)
    assert [w.temperature for w in forecast] == [0.0, 1.0, 3.0, 6.0]


def test_predictions_are_newest_first():
    repo = InMemoryPredictionRepository(clock=make_clock())
    older = repo.create(YieldPrediction(crop_field_id="a", predicted_yield="4.4", confidence="75"))
    other = repo.create(YieldPrediction(crop_field_id="b", predicted_yield="6.6", confidence="80"))
    newer = repo.create(YieldPrediction(crop_field_id="a", predicted_yield="4.8", confidence="78"))

    assert repo.list_all() == [newer, other, older]
    assert repo.list_by_crop_field("a") == [newer, older]
    assert repo.list_by_crop_field("missing") == []


def test_prediction_update():
    repo = InMemoryPredictionRepository(clock=make_clock())
    created = repo.create(YieldPrediction(crop_field_id="a", predicted_yield="4.4", confidence="75"))

    updated = repo.update(created.id, {"model_used": "Linear Regression"})
    assert updated.model_used == "Linear Regression"
    assert updated.created_at == created.created_at
    assert repo.update("missing", {"model_used": "x"}) is None


def test_model_repository_is_seeded_from_configuration():
    repo = InMemoryMlModelRepository(DEFAULT_ML_MODELS, clock=make_clock())

    names = [m.name for m in repo.list_all()]
    assert names == [d["name"] for d in DEFAULT_ML_MODELS]
    assert [m.name for m in repo.list_active()] == [
        "Random Forest Regressor",
        "Support Vector Machine",
    ]
    assert repo.list_all()[0].prediction_count == 1247


def test_model_repositories_do_not_share_state():
    first = InMemoryMlModelRepository(DEFAULT_ML_MODELS)
    second = InMemoryMlModelRepository(DEFAULT_ML_MODELS)
    model = first.list_all()[0]

    first.update(model.id, {"prediction_count": 0})
    assert second.list_all()[0].prediction_count == 1247
    assert InMemoryMlModelRepository().list_all() == []


def test_model_create_resets_training_history():
    repo = InMemoryMlModelRepository(clock=make_clock())
    created = repo.create(
        MlModel(
            name="Gradient Boosting",
            type="Ensemble",
            prediction_count=50,
            last_trained=datetime(2024, 1, 1),
        )
    )

    assert created.prediction_count == 0
    assert created.last_trained is None
    assert created.status == ModelStatus.INACTIVE
    assert created.training_progress == "0"
    assert repo.list_active() == []
