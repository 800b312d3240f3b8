"""Main service orchestrating the crop yield prediction workflow."""

import logging
import random
from dataclasses import fields
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from ...domain.entities.crop_field import CropField
from ...domain.entities.weather_data import WeatherData, WeatherSnapshot
from ...domain.entities.yield_prediction import PredictionStatus, YieldPrediction
from ...domain.exceptions import EntityNotFoundError
from ...domain.numeric import format_decimal, parse_decimal
from ...domain.repositories.crop_field_repository import CropFieldRepository
from ...domain.repositories.weather_repository import WeatherRepository
from ...domain.repositories.prediction_repository import PredictionRepository
from ...domain.repositories.ml_model_repository import MlModelRepository

# Use cases
from ...domain.use_cases.estimate_yield import EstimateYieldUseCase
from ...domain.use_cases.estimate_revenue import EstimateRevenueUseCase
from ...domain.use_cases.assess_weather_impact import AssessWeatherImpactUseCase
from ...domain.use_cases.summarize_predictions import SummarizePredictionsUseCase

logger = logging.getLogger(__name__)

CROP_FIELD_ATTRIBUTES = {f.name for f in fields(CropField)} - {"id", "created_at"}
WEATHER_ATTRIBUTES = {f.name for f in fields(WeatherData)} - {"id", "crop_field_id", "recorded_at"}
REQUIRED_CROP_FIELD_ATTRIBUTES = ("crop_type", "soil_type", "planting_area")


def _condition(rainfall: float) -> str:
    if rainfall > 5:
        return "rainy"
    if rainfall > 0:
        return "partly-cloudy"
    return "sunny"


class CropYieldService:
    """Orchestrates crop fields, weather readings and yield predictions."""

    def __init__(
        self,
        crop_field_repo: CropFieldRepository,
        weather_repo: WeatherRepository,
        prediction_repo: PredictionRepository,
        model_repo: MlModelRepository,
        default_model_name: str,
        default_weather: Mapping[str, Any],
        forecast_template: Sequence[Mapping[str, Any]],
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.crop_field_repo = crop_field_repo
        self.weather_repo = weather_repo
        self.prediction_repo = prediction_repo
        self.model_repo = model_repo
        self.default_model_name = default_model_name
        self.default_weather = dict(default_weather)
        self.forecast_template = [dict(day) for day in forecast_template]
        self.rng = rng or random.Random()
        self.clock = clock

        # Use cases
        self.estimate_yield_uc = EstimateYieldUseCase()
        self.estimate_revenue_uc = EstimateRevenueUseCase()
        self.weather_impact_uc = AssessWeatherImpactUseCase()
        self.summarize_uc = SummarizePredictionsUseCase()

    # === Crop fields ===

    def create_crop_field(self, data: Mapping[str, Any]) -> CropField:
        """Create a crop field from a validated attribute mapping."""
        missing = [name for name in REQUIRED_CROP_FIELD_ATTRIBUTES if data.get(name) in (None, "")]
        if missing:
            raise ValueError(f"Missing crop field attributes: {', '.join(missing)}")
        attributes = {k: v for k, v in data.items() if k in CROP_FIELD_ATTRIBUTES}
        return self.crop_field_repo.create(CropField(**attributes))

    def list_crop_fields(self) -> List[CropField]:
        return self.crop_field_repo.list_all()

    def get_crop_field(self, crop_field_id: str) -> CropField:
        crop_field = self.crop_field_repo.get(crop_field_id)
        if crop_field is None:
            raise EntityNotFoundError("Crop field", crop_field_id)
        return crop_field

    def update_crop_field(self, crop_field_id: str, updates: Mapping[str, Any]) -> CropField:
        attributes = {k: v for k, v in updates.items() if k in CROP_FIELD_ATTRIBUTES}
        cleared = [
            name
            for name in REQUIRED_CROP_FIELD_ATTRIBUTES
            if name in attributes and attributes[name] in (None, "")
        ]
        if cleared:
            raise ValueError(f"Crop field attributes cannot be cleared: {', '.join(cleared)}")
        updated = self.crop_field_repo.update(crop_field_id, attributes)
        if updated is None:
            raise EntityNotFoundError("Crop field", crop_field_id)
        return updated

    def delete_crop_field(self, crop_field_id: str) -> None:
        if not self.crop_field_repo.delete(crop_field_id):
            raise EntityNotFoundError("Crop field", crop_field_id)

    # === Predictions ===

    def create_prediction(
        self,
        crop_field_data: Mapping[str, Any],
        weather_data: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Run the full prediction pipeline for one request.

        Args:
            crop_field_data: Either {'id': ...} of an existing crop field or
                the attributes of a new one
            weather_data: Optional raw weather payload

        Returns:
            Dictionary with the stored 'prediction' and its 'crop_field'
        """
        if crop_field_data.get("id"):
            crop_field = self.get_crop_field(crop_field_data["id"])
        else:
            crop_field = self.create_crop_field(crop_field_data)

        logger.info(f"Generating prediction for crop field {crop_field.id}")
        result = self.estimate_yield_uc.execute(
            crop_field, WeatherSnapshot.from_dict(weather_data)
        )

        weather_data_id = None
        if weather_data:
            stored_weather = self.weather_repo.create(
                WeatherData(
                    crop_field_id=crop_field.id,
                    **{
                        k: parse_decimal(v) if k != "condition" else v
                        for k, v in weather_data.items()
                        if k in WEATHER_ATTRIBUTES
                    },
                )
            )
            weather_data_id = stored_weather.id

        market_price, revenue = self.estimate_revenue_uc.execute(
            crop_field.crop_type, result.predicted_yield, crop_field.planting_area
        )

        active_models = self.model_repo.list_active()
        model_used = active_models[0].name if active_models else self.default_model_name

        prediction = self.prediction_repo.create(
            YieldPrediction(
                crop_field_id=crop_field.id,
                weather_data_id=weather_data_id,
                predicted_yield=format_decimal(result.predicted_yield),
                confidence=format_decimal(result.confidence),
                yield_range_min=format_decimal(result.yield_range.min),
                yield_range_max=format_decimal(result.yield_range.max),
                model_used=model_used,
                factors=[f.to_dict() for f in result.factors],
                recommendations=list(result.recommendations),
                market_price=format_decimal(market_price),
                estimated_revenue=format_decimal(revenue),
                status=PredictionStatus.COMPLETED,
            )
        )

        if active_models:
            model = active_models[0]
            self.model_repo.update(model.id, {"prediction_count": model.prediction_count + 1})

        logger.info(
            f"Prediction {prediction.id}: {prediction.predicted_yield} t/ha "
            f"using {model_used}"
        )
        return {"prediction": prediction, "crop_field": crop_field}

    def list_predictions(self) -> List[YieldPrediction]:
        return self.prediction_repo.list_all()

    def get_prediction(self, prediction_id: str) -> YieldPrediction:
        prediction = self.prediction_repo.get(prediction_id)
        if prediction is None:
            raise EntityNotFoundError("Prediction", prediction_id)
        return prediction

    def list_predictions_for_crop_field(self, crop_field_id: str) -> List[YieldPrediction]:
        return self.prediction_repo.list_by_crop_field(crop_field_id)

    def summarize_predictions(self) -> Dict[str, Any]:
        crop_fields = {f.id: f for f in self.crop_field_repo.list_all()}
        return self.summarize_uc.execute(self.prediction_repo.list_all(), crop_fields)

    # === Weather ===

    def get_current_weather(self) -> WeatherData:
        """Most recent weather reading, seeding the default one if none exists."""
        current = self.weather_repo.get_current()
        if current is None:
            logger.info("No weather recorded yet, storing default reading")
            current = self.weather_repo.create(WeatherData(**self.default_weather))
        return current

    def get_weather_forecast(self, days: int) -> List[Dict[str, Any]]:
        """Daily forecast for the next `days` days, seeded from the template if empty."""
        forecast = self.weather_repo.get_forecast(days)
        if not forecast:
            logger.info(f"No forecast stored, seeding {len(self.forecast_template)} days")
            forecast = self._seed_forecast()

        return [
            {
                "day": w.recorded_at.strftime("%a"),
                "temperature": w.temperature,
                "humidity": w.humidity,
                "rainfall": w.rainfall,
            }
            for w in forecast
        ]

    def get_weather_impact(self) -> Dict[str, Any]:
        current = self.weather_repo.get_current()
        if current is None:
            raise EntityNotFoundError("Weather data", "current")
        return self.weather_impact_uc.execute(current)

    def _seed_forecast(self) -> List[WeatherData]:
        now = self.clock()
        seeded = []
        for offset, day in enumerate(self.forecast_template):
            rainfall = float(day["rainfall"])
            seeded.append(
                self.weather_repo.create(
                    WeatherData(
                        temperature=float(day["temperature"]),
                        humidity=float(day["humidity"]),
                        rainfall=rainfall,
                        wind_speed=round(10 + self.rng.random() * 8, 1),  # 10-18 km/h
                        soil_moisture=round(35 + self.rng.random() * 20, 1),  # 35-55%
                        uv_index=self.rng.randint(1, 10),
                        condition=_condition(rainfall),
                        recorded_at=now + timedelta(days=offset),
                    )
                )
            )
        return seeded

    # === Models ===

    def list_models(self):
        return self.model_repo.list_all()
