"""FastAPI main application."""

import logging
from typing import Any, Dict, List, Optional
from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from ...application.services.crop_yield_service import CropYieldService
from ...domain.exceptions import EntityNotFoundError
from ...domain.numeric import parse_decimal
from ...infrastructure.repositories.in_memory_crop_field_repository import (
    InMemoryCropFieldRepository,
)
from ...infrastructure.repositories.in_memory_weather_repository import InMemoryWeatherRepository
from ...infrastructure.repositories.in_memory_prediction_repository import (
    InMemoryPredictionRepository,
)
from ...infrastructure.repositories.in_memory_ml_model_repository import (
    InMemoryMlModelRepository,
)
from config.settings import (
    API_SETTINGS,
    SERVER_SETTINGS,
    LOGGING_SETTINGS,
    DEFAULT_ML_MODELS,
    DEFAULT_MODEL_NAME,
    DEFAULT_WEATHER,
    FORECAST_TEMPLATE,
    FORECAST_DAYS,
)

logging.basicConfig(level=LOGGING_SETTINGS["level"], format=LOGGING_SETTINGS["format"])
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

# Initialize repositories and service
service = CropYieldService(
    crop_field_repo=InMemoryCropFieldRepository(),
    weather_repo=InMemoryWeatherRepository(),
    prediction_repo=InMemoryPredictionRepository(),
    model_repo=InMemoryMlModelRepository(DEFAULT_ML_MODELS),
    default_model_name=DEFAULT_MODEL_NAME,
    default_weather=DEFAULT_WEATHER,
    forecast_template=FORECAST_TEMPLATE,
)


def get_service() -> CropYieldService:
    """Service dependency, overridable in tests."""
    return service


# Request models
class CropFieldIn(BaseModel):
    """Request model for a new crop field."""

    crop_type: str = Field(..., min_length=1, description="Crop type (e.g., 'wheat')")
    variety: str = Field(..., min_length=1, description="Crop variety")
    planting_area: float = Field(..., ge=0, description="Planted area in hectares")
    soil_type: str = Field(..., min_length=1, description="Soil type (e.g., 'loamy')")
    soil_ph: Optional[float] = Field(None, ge=0, le=14)
    nitrogen: Optional[float] = Field(None, ge=0, description="kg/ha")
    phosphorus: Optional[float] = Field(None, ge=0, description="kg/ha")
    potassium: Optional[float] = Field(None, ge=0, description="kg/ha")
    irrigation_type: Optional[str] = Field(None, description="e.g., 'drip', 'rainfed'")
    fertilizer: Optional[str] = None
    pesticides: Optional[str] = None
    notes: Optional[str] = None


class CropFieldUpdate(BaseModel):
    """Request model for a partial crop field update."""

    crop_type: Optional[str] = Field(None, min_length=1)
    variety: Optional[str] = Field(None, min_length=1)
    planting_area: Optional[float] = Field(None, ge=0)
    soil_type: Optional[str] = Field(None, min_length=1)
    soil_ph: Optional[float] = Field(None, ge=0, le=14)
    nitrogen: Optional[float] = Field(None, ge=0)
    phosphorus: Optional[float] = Field(None, ge=0)
    potassium: Optional[float] = Field(None, ge=0)
    irrigation_type: Optional[str] = None
    fertilizer: Optional[str] = None
    pesticides: Optional[str] = None
    notes: Optional[str] = None


class PredictionRequest(BaseModel):
    """Request model for prediction."""

    crop_field_data: Dict[str, Any] = Field(
        ..., description="{'id': ...} of an existing crop field, or a new crop field"
    )
    weather_data: Optional[Dict[str, Any]] = Field(
        None, description="Weather conditions, e.g. {'temperature': 24, 'rainfall': 550}"
    )


def _ok(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}


# Error envelope
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"success": False, "error": "Invalid request data"})


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": API_SETTINGS["title"],
        "version": API_SETTINGS["version"],
        "endpoints": {
            "crop_fields": "/api/crop-fields",
            "predictions": "/api/predictions",
            "weather": "/api/weather/current",
            "models": "/api/models",
            "analytics": "/api/analytics/summary",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/api/crop-fields")
async def create_crop_field(
    payload: Dict[str, Any] = Body(...),
    service: CropYieldService = Depends(get_service),
):
    """Create a crop field."""
    try:
        validated = CropFieldIn.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Error creating crop field: {e}")
        raise HTTPException(status_code=400, detail="Invalid crop field data")

    crop_field = service.create_crop_field(validated.model_dump())
    return _ok(crop_field.to_dict())


@app.get("/api/crop-fields")
async def list_crop_fields(service: CropYieldService = Depends(get_service)):
    """List all crop fields."""
    try:
        crop_fields = service.list_crop_fields()
    except Exception as e:
        logger.error(f"Error fetching crop fields: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch crop fields")
    return _ok([f.to_dict() for f in crop_fields])


@app.get("/api/crop-fields/{crop_field_id}")
async def get_crop_field(crop_field_id: str, service: CropYieldService = Depends(get_service)):
    """Fetch a single crop field."""
    try:
        crop_field = service.get_crop_field(crop_field_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="Crop field not found")
    return _ok(crop_field.to_dict())


@app.patch("/api/crop-fields/{crop_field_id}")
async def update_crop_field(
    crop_field_id: str,
    updates: CropFieldUpdate,
    service: CropYieldService = Depends(get_service),
):
    """Partially update a crop field."""
    try:
        crop_field = service.update_crop_field(
            crop_field_id, updates.model_dump(exclude_unset=True)
        )
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="Crop field not found")
    except ValueError as e:
        logger.error(f"Error updating crop field: {e}")
        raise HTTPException(status_code=400, detail="Invalid crop field data")
    return _ok(crop_field.to_dict())


@app.delete("/api/crop-fields/{crop_field_id}")
async def delete_crop_field(crop_field_id: str, service: CropYieldService = Depends(get_service)):
    """Delete a crop field."""
    try:
        service.delete_crop_field(crop_field_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="Crop field not found")
    return _ok({"id": crop_field_id})


@app.get("/api/crop-fields/{crop_field_id}/predictions")
async def list_crop_field_predictions(
    crop_field_id: str, service: CropYieldService = Depends(get_service)
):
    """List predictions for one crop field, newest first."""
    try:
        predictions = service.list_predictions_for_crop_field(crop_field_id)
    except Exception as e:
        logger.error(f"Error fetching crop field predictions: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch predictions")
    return _ok([p.to_dict() for p in predictions])


@app.post("/api/predictions")
async def create_prediction(
    request: PredictionRequest, service: CropYieldService = Depends(get_service)
):
    """
    Estimate yield for a crop field and store the prediction.

    Args:
        request: Existing crop field id or new crop field data, plus optional weather

    Returns:
        The stored prediction with numeric fields as numbers and its crop field
    """
    try:
        crop_field_data = request.crop_field_data
        if not crop_field_data.get("id"):
            crop_field_data = CropFieldIn.model_validate(crop_field_data).model_dump()

        result = service.create_prediction(crop_field_data, request.weather_data)
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="Crop field not found")
    except Exception as e:
        logger.error(f"Error generating prediction: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail="Failed to generate prediction")

    prediction = result["prediction"]
    data = prediction.to_dict()
    data.update(
        {
            "crop_field": result["crop_field"].to_dict(),
            # Stored as text, echoed back as numbers
            "predicted_yield": parse_decimal(prediction.predicted_yield),
            "confidence": parse_decimal(prediction.confidence),
            "yield_range_min": parse_decimal(prediction.yield_range_min) or 0.0,
            "yield_range_max": parse_decimal(prediction.yield_range_max) or 0.0,
            "market_price": parse_decimal(prediction.market_price) or 0.0,
            "estimated_revenue": parse_decimal(prediction.estimated_revenue) or 0.0,
        }
    )
    return _ok(data)


@app.get("/api/predictions")
async def list_predictions(service: CropYieldService = Depends(get_service)):
    """List all predictions, newest first."""
    try:
        predictions = service.list_predictions()
    except Exception as e:
        logger.error(f"Error fetching predictions: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch predictions")
    return _ok([p.to_dict() for p in predictions])


@app.get("/api/predictions/{prediction_id}")
async def get_prediction(prediction_id: str, service: CropYieldService = Depends(get_service)):
    """Fetch a single prediction."""
    try:
        prediction = service.get_prediction(prediction_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="Prediction not found")
    return _ok(prediction.to_dict())


@app.get("/api/weather/current")
async def current_weather(service: CropYieldService = Depends(get_service)):
    """Most recent weather reading."""
    try:
        weather = service.get_current_weather()
    except Exception as e:
        logger.error(f"Error fetching current weather: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch current weather")
    return _ok(weather.to_dict())


@app.get("/api/weather/forecast")
async def weather_forecast(service: CropYieldService = Depends(get_service)):
    """Daily forecast for the coming week."""
    try:
        forecast: List[Dict[str, Any]] = service.get_weather_forecast(FORECAST_DAYS)
    except Exception as e:
        logger.error(f"Error fetching weather forecast: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch weather forecast")
    return _ok(forecast)


@app.get("/api/weather/impact")
async def weather_impact(service: CropYieldService = Depends(get_service)):
    """Impact of the current weather on crop growth."""
    try:
        impact = service.get_weather_impact()
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="No current weather data available")
    except Exception as e:
        logger.error(f"Error calculating weather impact: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to calculate weather impact")
    return _ok(impact)


@app.get("/api/models")
async def list_models(service: CropYieldService = Depends(get_service)):
    """List ML model descriptors."""
    return _ok([m.to_dict() for m in service.list_models()])


@app.get("/api/analytics/summary")
async def analytics_summary(service: CropYieldService = Depends(get_service)):
    """Aggregate statistics over stored predictions."""
    try:
        summary = service.summarize_predictions()
    except Exception as e:
        logger.error(f"Error summarizing predictions: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to summarize predictions")
    return _ok(summary)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=SERVER_SETTINGS["host"], port=SERVER_SETTINGS["port"])
