"""Tests for EstimateRevenueUseCase and AssessWeatherImpactUseCase."""

from src.domain.entities.weather_data import WeatherData
from src.domain.use_cases.assess_weather_impact import AssessWeatherImpactUseCase
from src.domain.use_cases.estimate_revenue import EstimateRevenueUseCase


def test_revenue_for_known_crop():
    use_case = EstimateRevenueUseCase()
    assert use_case.execute("wheat", 4.4, 2.5) == (320, 3520)
    assert use_case.execute("corn", 10.8, "2") == (280, 6048)


def test_market_price_is_case_insensitive_with_default():
    use_case = EstimateRevenueUseCase()
    assert use_case.market_price("RICE") == 420
    assert use_case.market_price("Cotton") == 1200
    assert use_case.market_price("barley") == 300


def test_revenue_rounds_half_up():
    use_case = EstimateRevenueUseCase(market_prices={"test": 1})
    assert use_case.execute("test", 2.5, 1) == (1, 3)


def test_revenue_with_unparseable_area_is_zero():
    assert EstimateRevenueUseCase().execute("wheat", 4.4, "abc") == (320, 0)


def test_favorable_weather():
    weather = WeatherData(temperature=25.0, rainfall=0.0, humidity=65.0, soil_moisture=42.0)
    impact = AssessWeatherImpactUseCase().execute(weather)

    assert impact["overall"] == "favorable"
    assert impact["score"] == 94  # 30 + 18.75 + 20 + 25
    assert impact["factors"] == [
        {"name": "Temperature", "status": "optimal", "impact": "positive"},
        {"name": "Rainfall", "status": "adequate", "impact": "positive"},
        {"name": "Humidity", "status": "optimal", "impact": "positive"},
        {"name": "Soil Moisture", "status": "optimal", "impact": "positive"},
    ]


def test_unfavorable_weather():
    weather = WeatherData(temperature=40.0, rainfall=30.0, humidity=90.0, soil_moisture=20.0)
    impact = AssessWeatherImpactUseCase().execute(weather)

    assert impact["overall"] == "unfavorable"
    assert impact["score"] == 50
    assert [f["status"] for f in impact["factors"]] == ["suboptimal", "high", "high", "low"]
    assert {f["impact"] for f in impact["factors"]} == {"negative"}


def test_moderate_weather_rounds_half_up():
    # 22.5 + 25 + 15 + 25 = 87.5
    weather = WeatherData(temperature=33.0, rainfall=10.0, humidity=45.0, soil_moisture=50.0)
    impact = AssessWeatherImpactUseCase().execute(weather)
    assert impact["score"] == 88
    assert impact["overall"] == "favorable"


def test_missing_readings_score_as_zero():
    impact = AssessWeatherImpactUseCase().execute(WeatherData())
    assert impact["score"] == 56  # 15 + 18.75 + 10 + 12.5
    assert impact["overall"] == "unfavorable"
    assert [f["status"] for f in impact["factors"]] == ["suboptimal", "adequate", "low", "low"]
