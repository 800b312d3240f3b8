"""Application settings and configuration."""

import os
from pathlib import Path
from typing import Any, Dict, List

# Base directory
BASE_DIR = Path(__file__).parent.parent

# API settings
API_SETTINGS = {
    "title": "Crop Yield Estimation API",
    "description": "API for estimating crop yield from field and weather conditions",
    "version": "1.0.0",
}

# Server settings
SERVER_SETTINGS = {
    "host": os.getenv("API_HOST", "0.0.0.0"),
    "port": int(os.getenv("API_PORT", "8000")),
}

# Logging settings
LOGGING_SETTINGS = {
    "level": os.getenv("LOG_LEVEL", "INFO").upper(),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# Models that predictions are attributed to; the first active one wins
DEFAULT_ML_MODELS: List[Dict[str, Any]] = [
    {
        "name": "Random Forest Regressor",
        "type": "Ensemble",
        "accuracy": "92.3",
        "status": "active",
        "last_trained": "2024-01-15",
        "prediction_count": 1247,
        "features": ["Soil pH", "NPK levels", "Weather", "Crop variety"],
        "training_progress": "100",
    },
    {
        "name": "Neural Network",
        "type": "Deep Learning",
        "accuracy": "88.7",
        "status": "training",
        "last_trained": "2024-01-14",
        "prediction_count": 892,
        "features": ["Soil conditions", "Weather patterns", "Historical yield"],
        "training_progress": "73",
    },
    {
        "name": "Linear Regression",
        "type": "Linear",
        "accuracy": "78.4",
        "status": "inactive",
        "last_trained": "2024-01-10",
        "prediction_count": 2156,
        "features": ["Basic soil data", "Temperature", "Rainfall"],
        "training_progress": "100",
    },
    {
        "name": "Support Vector Machine",
        "type": "SVM",
        "accuracy": "82.1",
        "status": "active",
        "last_trained": "2024-01-12",
        "prediction_count": 1089,
        "features": ["Multi-feature analysis", "Weather data", "Soil composition"],
        "training_progress": "100",
    },
]

DEFAULT_MODEL_NAME = "Default Prediction Model"

# Reading used when no current weather has been recorded
DEFAULT_WEATHER = {
    "temperature": 25.0,
    "humidity": 65.0,
    "rainfall": 0.0,
    "wind_speed": 12.0,
    "soil_moisture": 42.0,
    "uv_index": 7,
    "condition": "partly-cloudy",
}

# Forecast seeded when none is stored, one entry per day starting today
FORECAST_DAYS = 7
FORECAST_TEMPLATE = [
    {"temperature": 24, "humidity": 65, "rainfall": 2},
    {"temperature": 26, "humidity": 72, "rainfall": 8},
    {"temperature": 23, "humidity": 78, "rainfall": 12},
    {"temperature": 25, "humidity": 68, "rainfall": 0},
    {"temperature": 27, "humidity": 61, "rainfall": 0},
    {"temperature": 28, "humidity": 58, "rainfall": 0},
    {"temperature": 26, "humidity": 64, "rainfall": 3},
]
