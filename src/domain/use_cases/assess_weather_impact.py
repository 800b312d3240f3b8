"""Use case for scoring how current weather affects crop growth."""

import logging
from typing import Any, Dict, List, Optional

from ..entities.factor import Impact
from ..entities.weather_data import WeatherData
from ..numeric import round_half_up

logger = logging.getLogger(__name__)

# (optimal band, adequate band, weight)
IMPACT_BANDS = {
    "temperature": ((20, 30), (15, 35), 0.30),
    "rainfall": ((5, 15), (0, 25), 0.25),
    "humidity": ((50, 70), (40, 80), 0.20),
    "soil_moisture": ((40, 60), (30, 70), 0.25),
}


def _band_score(value: float, optimal, adequate) -> int:
    if optimal[0] <= value <= optimal[1]:
        return 100
    if adequate[0] <= value <= adequate[1]:
        return 75
    return 50


def _status(score: int, fallback: str) -> str:
    if score >= 90:
        return "optimal"
    if score >= 70:
        return "adequate"
    return fallback


class AssessWeatherImpactUseCase:
    """Use case to rate a weather reading as favorable, moderate or unfavorable."""

    def execute(self, weather: WeatherData) -> Dict[str, Any]:
        """
        Execute the use case.

        Args:
            weather: Weather reading to assess. Missing readings are scored as 0.

        Returns:
            Dictionary with 'overall', 'score' and per-reading 'factors'
        """
        readings = {
            name: _value(getattr(weather, name)) for name in IMPACT_BANDS
        }
        scores = {
            name: _band_score(readings[name], optimal, adequate)
            for name, (optimal, adequate, _) in IMPACT_BANDS.items()
        }

        factors: List[Dict[str, str]] = [
            {
                "name": "Temperature",
                "status": _status(scores["temperature"], "suboptimal"),
                "impact": _impact(scores["temperature"]),
            },
            {
                "name": "Rainfall",
                "status": _status(
                    scores["rainfall"], "high" if readings["rainfall"] > 25 else "low"
                ),
                "impact": _impact(scores["rainfall"]),
            },
            {
                "name": "Humidity",
                "status": _status(
                    scores["humidity"], "high" if readings["humidity"] > 70 else "low"
                ),
                "impact": _impact(scores["humidity"], neutral_from=60),
            },
            {
                "name": "Soil Moisture",
                "status": _status(
                    scores["soil_moisture"], "low" if readings["soil_moisture"] < 30 else "high"
                ),
                "impact": _impact(scores["soil_moisture"]),
            },
        ]

        total = sum(scores[name] * weight for name, (_, _, weight) in IMPACT_BANDS.items())
        overall_score = int(round_half_up(total))
        if overall_score >= 80:
            overall = "favorable"
        elif overall_score >= 60:
            overall = "moderate"
        else:
            overall = "unfavorable"

        logger.info(f"Weather impact: {overall} ({overall_score})")
        return {"overall": overall, "score": overall_score, "factors": factors}


def _value(reading: Optional[float]) -> float:
    return float(reading) if reading is not None else 0.0


def _impact(score: int, neutral_from: Optional[int] = None) -> str:
    if score >= 70:
        return Impact.POSITIVE.value
    if neutral_from is not None and score >= neutral_from:
        return Impact.NEUTRAL.value
    return Impact.NEGATIVE.value
