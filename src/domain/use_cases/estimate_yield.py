"""Use case for estimating crop yield from field and weather attributes."""

import logging
from typing import Dict, List, Optional

from ..entities.crop_field import CropField
from ..entities.factor import Factor, Impact
from ..entities.prediction_result import PredictionResult, YieldRange
from ..entities.weather_data import WeatherSnapshot
from ..numeric import format_decimal, parse_decimal, round_half_up

logger = logging.getLogger(__name__)

# Base yields in tons/hectare
BASE_YIELDS: Dict[str, float] = {
    "wheat": 4.0,
    "rice": 6.0,
    "corn": 8.0,
    "soybean": 3.2,
    "cotton": 2.8,
    "tomato": 45.0,
    "potato": 25.0,
}
DEFAULT_BASE_YIELD = 4.0

SOIL_MULTIPLIERS: Dict[str, float] = {
    "loamy": 1.10,
    "clay": 0.95,
    "sandy": 0.90,
    "silt": 1.02,
}

IRRIGATION_BONUSES: Dict[str, float] = {
    "drip": 1.12,
    "sprinkler": 1.08,
    "flood": 1.02,
    "rainfed": 0.95,
}

BASE_CONFIDENCE = 75
CONFIDENCE_BOUNDS = (65, 95)
COMPLETENESS_BONUS = 3
RANGE_VARIANCE = 0.15
MIN_RANGE_YIELD = 0.5

DEFAULT_RECOMMENDATIONS = (
    "Continue current farming practices - conditions are favorable",
    "Monitor crop health regularly during critical growth stages",
)
CLOSING_RECOMMENDATION = "Consider soil testing before next planting season"


class _Estimate:
    """Running state of a single estimate."""

    def __init__(self, base_yield: float):
        self.yield_ = base_yield
        self.confidence = BASE_CONFIDENCE
        self.factors: List[Factor] = []
        self.recommendations: List[str] = []

    def apply(
        self,
        multiplier: float,
        name: str,
        impact: Impact,
        value: str,
        recommendation: Optional[str] = None,
        confidence: int = 0,
    ) -> None:
        self.yield_ *= multiplier
        self.factors.append(Factor(name=name, impact=impact, value=value))
        if recommendation and recommendation not in self.recommendations:
            self.recommendations.append(recommendation)
        self.confidence += confidence


class EstimateYieldUseCase:
    """
    Estimate yield for a crop field.

    The estimate starts from the crop's base yield and applies one
    multiplicative adjustment per known attribute (soil chemistry, soil type,
    irrigation and weather). Missing or unparseable attributes are skipped.
    """

    def execute(
        self,
        field: CropField,
        weather: Optional[WeatherSnapshot] = None,
    ) -> PredictionResult:
        """
        Execute the estimate.

        Args:
            field: Crop field attributes
            weather: Optional weather snapshot

        Returns:
            PredictionResult with yield, confidence, range, factors and
            recommendations
        """
        crop_type = field.crop_type.lower()
        logger.info(f"Estimating yield: crop={crop_type}, soil={field.soil_type}")

        estimate = _Estimate(BASE_YIELDS.get(crop_type, DEFAULT_BASE_YIELD))

        soil_ph = parse_decimal(field.soil_ph)
        nitrogen = parse_decimal(field.nitrogen)
        phosphorus = parse_decimal(field.phosphorus)
        potassium = parse_decimal(field.potassium)
        irrigation_type = field.irrigation_type
        if irrigation_type is not None and not irrigation_type.strip():
            irrigation_type = None

        if soil_ph is not None:
            self._score_soil_ph(estimate, soil_ph)
        if nitrogen is not None:
            self._score_nitrogen(estimate, nitrogen)
        if phosphorus is not None:
            self._score_phosphorus(estimate, phosphorus)
        if potassium is not None:
            self._score_potassium(estimate, potassium)

        self._score_soil_type(estimate, field.soil_type)

        if irrigation_type:
            self._score_irrigation(estimate, irrigation_type)

        if weather is not None:
            temperature = parse_decimal(weather.temperature)
            rainfall = parse_decimal(weather.rainfall)
            if temperature is not None:
                self._score_temperature(estimate, temperature)
            if rainfall is not None:
                self._score_rainfall(estimate, rainfall)

        if not estimate.recommendations:
            estimate.recommendations.extend(DEFAULT_RECOMMENDATIONS)
        estimate.recommendations.append(CLOSING_RECOMMENDATION)

        completeness = sum(
            1
            for value in (soil_ph, nitrogen, phosphorus, potassium, irrigation_type)
            if value is not None
        )
        low, high = CONFIDENCE_BOUNDS
        confidence = min(max(estimate.confidence + completeness * COMPLETENESS_BONUS, low), high)

        variance = estimate.yield_ * RANGE_VARIANCE
        yield_range = YieldRange(
            min=round_half_up(max(estimate.yield_ - variance, MIN_RANGE_YIELD), 1),
            max=round_half_up(estimate.yield_ + variance, 1),
        )

        result = PredictionResult(
            predicted_yield=round_half_up(estimate.yield_, 1),
            confidence=int(confidence),
            yield_range=yield_range,
            factors=tuple(estimate.factors),
            recommendations=tuple(estimate.recommendations),
        )
        logger.info(
            f"Estimated {result.predicted_yield} t/ha "
            f"(confidence {result.confidence}%, {len(result.factors)} factors)"
        )
        return result

    @staticmethod
    def _score_soil_ph(estimate: _Estimate, ph: float) -> None:
        label = format_decimal(ph)
        if 6.0 <= ph <= 7.5:
            estimate.apply(1.10, "Soil pH Level", Impact.POSITIVE, f"{label} (Optimal)", confidence=5)
        elif ph < 5.5 or ph > 8.0:
            estimate.apply(
                0.85,
                "Soil pH Level",
                Impact.NEGATIVE,
                f"{label} (Needs adjustment)",
                recommendation="Adjust soil pH to optimal range (6.0-7.5) using lime or sulfur",
                confidence=-5,
            )
        else:
            estimate.apply(1.0, "Soil pH Level", Impact.NEUTRAL, f"{label} (Acceptable)")

    @staticmethod
    def _score_nitrogen(estimate: _Estimate, nitrogen: float) -> None:
        label = f"{format_decimal(nitrogen)} kg/ha"
        if 100 <= nitrogen <= 150:
            estimate.apply(
                1.15, "Nitrogen Content", Impact.POSITIVE, f"{label} (Excellent)", confidence=8
            )
        elif nitrogen < 80:
            estimate.apply(
                0.90,
                "Nitrogen Content",
                Impact.NEGATIVE,
                f"{label} (Low)",
                recommendation="Increase nitrogen application for better yield",
                confidence=-5,
            )
        else:
            estimate.apply(1.05, "Nitrogen Content", Impact.POSITIVE, f"{label} (Good)")

    @staticmethod
    def _score_phosphorus(estimate: _Estimate, phosphorus: float) -> None:
        # 40-60 and above 100 are left unscored
        label = f"{format_decimal(phosphorus)} kg/ha"
        if 60 <= phosphorus <= 100:
            estimate.apply(
                1.08, "Phosphorus Content", Impact.POSITIVE, f"{label} (Optimal)", confidence=3
            )
        elif phosphorus < 40:
            estimate.apply(
                0.92,
                "Phosphorus Content",
                Impact.NEGATIVE,
                f"{label} (Deficient)",
                recommendation="Apply phosphorus fertilizer to improve root development",
            )

    @staticmethod
    def _score_potassium(estimate: _Estimate, potassium: float) -> None:
        label = f"{format_decimal(potassium)} kg/ha"
        if 80 <= potassium <= 120:
            estimate.apply(1.06, "Potassium Content", Impact.POSITIVE, f"{label} (Good)")
        elif potassium < 60:
            estimate.apply(
                0.94,
                "Potassium Content",
                Impact.NEGATIVE,
                f"{label} (Low)",
                recommendation="Increase potassium for better disease resistance",
            )

    @staticmethod
    def _score_soil_type(estimate: _Estimate, soil_type: str) -> None:
        multiplier = SOIL_MULTIPLIERS.get(soil_type.lower(), 1.0)
        if multiplier > 1.0:
            estimate.apply(multiplier, "Soil Type", Impact.POSITIVE, f"{soil_type} (Excellent)")
        else:
            estimate.apply(multiplier, "Soil Type", Impact.NEUTRAL, f"{soil_type} (Suitable)")

    @staticmethod
    def _score_irrigation(estimate: _Estimate, irrigation_type: str) -> None:
        bonus = IRRIGATION_BONUSES.get(irrigation_type.lower(), 1.0)
        recommendation = None
        if irrigation_type.lower() == "drip":
            recommendation = "Excellent choice of irrigation system - continue with drip irrigation"
        if bonus > 1.05:
            impact, label = Impact.POSITIVE, "Efficient"
        else:
            impact, label = Impact.NEUTRAL, "Standard"
        estimate.apply(
            bonus,
            "Irrigation System",
            impact,
            f"{irrigation_type} ({label})",
            recommendation=recommendation,
        )

    @staticmethod
    def _score_temperature(estimate: _Estimate, temperature: float) -> None:
        label = f"{format_decimal(temperature)}°C"
        if 20 <= temperature <= 28:
            estimate.apply(1.05, "Temperature", Impact.POSITIVE, f"{label} (Optimal)")
        elif temperature < 15 or temperature > 35:
            estimate.apply(
                0.90,
                "Temperature",
                Impact.NEGATIVE,
                f"{label} (Stressful)",
                recommendation="Monitor crop stress due to temperature extremes",
            )

    @staticmethod
    def _score_rainfall(estimate: _Estimate, rainfall: float) -> None:
        label = f"{format_decimal(rainfall)}mm"
        if 400 <= rainfall <= 800:
            estimate.apply(1.08, "Rainfall", Impact.POSITIVE, f"{label} (Adequate)")
        elif rainfall < 300:
            estimate.apply(
                0.85,
                "Rainfall",
                Impact.NEGATIVE,
                f"{label} (Insufficient)",
                recommendation="Increase irrigation frequency due to low rainfall",
            )
        elif rainfall > 1000:
            estimate.apply(
                0.92,
                "Rainfall",
                Impact.NEGATIVE,
                f"{label} (Excessive)",
                recommendation="Ensure proper drainage to prevent waterlogging",
            )
