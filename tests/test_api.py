"""Tests for the FastAPI application."""

import pytest
from fastapi.testclient import TestClient
from src.presentation.api.main import app, get_service

WHEAT_FIELD = {
    "crop_type": "wheat",
    "variety": "HD-2967",
    "planting_area": 2.5,
    "soil_type": "loamy",
}


@pytest.fixture
def client(service):
    app.dependency_overrides[get_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_create_and_fetch_crop_field(client):
    response = client.post("/api/crop-fields", json=WHEAT_FIELD)
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    crop_field = body["data"]
    assert crop_field["id"]
    assert crop_field["soil_ph"] is None

    fetched = client.get(f"/api/crop-fields/{crop_field['id']}").json()
    assert fetched == {"success": True, "data": crop_field}

    listed = client.get("/api/crop-fields").json()
    assert [f["id"] for f in listed["data"]] == [crop_field["id"]]


@pytest.mark.parametrize(
    "payload",
    [
        {"crop_type": "wheat", "variety": "HD-2967", "planting_area": 2.5},
        {**WHEAT_FIELD, "crop_type": ""},
        {**WHEAT_FIELD, "nitrogen": -5},
        {**WHEAT_FIELD, "planting_area": "a lot"},
    ],
)
def test_invalid_crop_field(client, payload):
    response = client.post("/api/crop-fields", json=payload)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid crop field data"}


def test_unknown_crop_field(client):
    response = client.get("/api/crop-fields/missing")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Crop field not found"}


def test_update_and_delete_crop_field(client):
    crop_field = client.post("/api/crop-fields", json=WHEAT_FIELD).json()["data"]

    response = client.patch(f"/api/crop-fields/{crop_field['id']}", json={"nitrogen": 120})
    assert response.status_code == 200
    assert response.json()["data"]["nitrogen"] == 120

    assert client.delete(f"/api/crop-fields/{crop_field['id']}").status_code == 200
    assert client.delete(f"/api/crop-fields/{crop_field['id']}").status_code == 404
    assert client.patch("/api/crop-fields/missing", json={"nitrogen": 1}).status_code == 404


@pytest.mark.parametrize("attribute", ["crop_type", "soil_type", "planting_area"])
def test_update_rejects_clearing_required_attributes(client, attribute):
    crop_field = client.post("/api/crop-fields", json=WHEAT_FIELD).json()["data"]

    response = client.patch(f"/api/crop-fields/{crop_field['id']}", json={attribute: None})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid crop field data"}

    prediction = client.post(
        "/api/predictions", json={"crop_field_data": {"id": crop_field["id"]}}
    )
    assert prediction.status_code == 200
    assert prediction.json()["data"]["predicted_yield"] == 4.4


def test_create_prediction_echoes_numbers(client):
    response = client.post(
        "/api/predictions",
        json={"crop_field_data": WHEAT_FIELD, "weather_data": None},
    )
    assert response.status_code == 200
    data = response.json()["data"]

    assert data["predicted_yield"] == 4.4
    assert data["confidence"] == 75
    assert data["yield_range_min"] == 3.7
    assert data["yield_range_max"] == 5.1
    assert data["market_price"] == 320
    assert data["estimated_revenue"] == 3520
    assert data["model_used"] == "Random Forest Regressor"
    assert data["crop_field"]["crop_type"] == "wheat"
    assert data["recommendations"][-1] == "Consider soil testing before next planting season"

    # Stored values stay as text
    stored = client.get(f"/api/predictions/{data['id']}").json()["data"]
    assert stored["predicted_yield"] == "4.4"
    assert stored["estimated_revenue"] == "3520"


def test_prediction_with_raw_weather_payload(client):
    response = client.post(
        "/api/predictions",
        json={
            "crop_field_data": WHEAT_FIELD,
            "weather_data": {"temperature": "10", "rainfall": "not measured"},
        },
    )
    data = response.json()["data"]
    assert data["predicted_yield"] == 4.0  # 4.0 * 1.10 * 0.90
    assert [f["name"] for f in data["factors"]] == ["Soil Type", "Temperature"]
    assert data["weather_data_id"] is not None


def test_prediction_for_existing_and_unknown_field(client):
    crop_field = client.post("/api/crop-fields", json=WHEAT_FIELD).json()["data"]

    response = client.post("/api/predictions", json={"crop_field_data": {"id": crop_field["id"]}})
    assert response.status_code == 200
    assert response.json()["data"]["crop_field_id"] == crop_field["id"]

    response = client.post("/api/predictions", json={"crop_field_data": {"id": "missing"}})
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Crop field not found"}

    listed = client.get(f"/api/crop-fields/{crop_field['id']}/predictions").json()["data"]
    assert len(listed) == 1


def test_prediction_with_invalid_field(client):
    response = client.post("/api/predictions", json={"crop_field_data": {"crop_type": "wheat"}})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Failed to generate prediction"}


def test_prediction_request_must_be_an_object(client):
    response = client.post("/api/predictions", json=[1, 2, 3])
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_unknown_prediction(client):
    response = client.get("/api/predictions/missing")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Prediction not found"}


def test_weather_endpoints(client):
    response = client.get("/api/weather/impact")
    assert response.status_code == 404
    assert response.json()["error"] == "No current weather data available"

    current = client.get("/api/weather/current").json()["data"]
    assert current["temperature"] == 25.0

    impact = client.get("/api/weather/impact").json()["data"]
    assert impact["overall"] == "favorable"
    assert len(impact["factors"]) == 4

    forecast = client.get("/api/weather/forecast").json()["data"]
    assert len(forecast) == 7
    assert set(forecast[0]) == {"day", "temperature", "humidity", "rainfall"}


def test_models_and_summary(client):
    models = client.get("/api/models").json()["data"]
    assert len(models) == 4
    assert models[0]["status"] == "active"

    client.post("/api/predictions", json={"crop_field_data": WHEAT_FIELD})
    summary = client.get("/api/analytics/summary").json()["data"]
    assert summary["total_predictions"] == 1
    assert summary["average_yield_by_crop"] == {"wheat": 4.4}

    models = client.get("/api/models").json()["data"]
    assert models[0]["prediction_count"] == 1248


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}
