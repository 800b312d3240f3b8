"""CLI interface for crop yield estimation."""

import argparse
import logging
import sys

from ...domain.entities.crop_field import CropField
from ...domain.entities.weather_data import WeatherSnapshot
from ...domain.use_cases.estimate_yield import EstimateYieldUseCase
from ...domain.use_cases.estimate_revenue import EstimateRevenueUseCase

from config.settings import LOGGING_SETTINGS, SERVER_SETTINGS

logging.basicConfig(
    level=LOGGING_SETTINGS["level"],
    format=LOGGING_SETTINGS["format"],
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)

IMPACT_MARKERS = {"positive": "+", "negative": "-", "neutral": "="}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crop Yield Estimation")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === estimate: one-off yield estimate ===
    estimate_parser = subparsers.add_parser(
        "estimate", help="Estimate yield for a field from the command line"
    )
    estimate_parser.add_argument("--crop-type", type=str, required=True, help="e.g. 'wheat'")
    estimate_parser.add_argument("--soil-type", type=str, required=True, help="e.g. 'loamy'")
    estimate_parser.add_argument(
        "--planting-area", type=float, default=1.0, help="Planted area in hectares (default: 1)"
    )
    estimate_parser.add_argument("--soil-ph", type=str, default=None)
    estimate_parser.add_argument("--nitrogen", type=str, default=None, help="kg/ha")
    estimate_parser.add_argument("--phosphorus", type=str, default=None, help="kg/ha")
    estimate_parser.add_argument("--potassium", type=str, default=None, help="kg/ha")
    estimate_parser.add_argument(
        "--irrigation-type", type=str, default=None, help="drip, sprinkler, flood or rainfed"
    )
    estimate_parser.add_argument("--temperature", type=str, default=None, help="Celsius")
    estimate_parser.add_argument("--rainfall", type=str, default=None, help="mm")

    # === serve: run the HTTP API ===
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve_parser.add_argument("--host", type=str, default=SERVER_SETTINGS["host"])
    serve_parser.add_argument("--port", type=int, default=SERVER_SETTINGS["port"])

    return parser


def run_estimate(args: argparse.Namespace) -> None:
    field = CropField(
        crop_type=args.crop_type,
        soil_type=args.soil_type,
        planting_area=args.planting_area,
        soil_ph=args.soil_ph,
        nitrogen=args.nitrogen,
        phosphorus=args.phosphorus,
        potassium=args.potassium,
        irrigation_type=args.irrigation_type,
    )
    weather = None
    if args.temperature is not None or args.rainfall is not None:
        weather = WeatherSnapshot(temperature=args.temperature, rainfall=args.rainfall)

    result = EstimateYieldUseCase().execute(field, weather)
    market_price, revenue = EstimateRevenueUseCase().execute(
        field.crop_type, result.predicted_yield, field.planting_area
    )

    print("\n" + "=" * 50)
    print(" CROP YIELD ESTIMATE ")
    print("=" * 50)
    print(f" Crop:       {field.crop_type} on {field.soil_type} soil, {field.planting_area} ha")
    print(f" Yield:      {result.predicted_yield} t/ha")
    print(f" Range:      {result.yield_range.min} - {result.yield_range.max} t/ha")
    print(f" Confidence: {result.confidence}%")
    print(f" Revenue:    {revenue} (at {market_price}/t)")
    print("-" * 50)

    print("Factors:")
    for factor in result.factors:
        print(f"  {IMPACT_MARKERS[factor.impact.value]} {factor.name}: {factor.value}")

    print("\nRecommendations:")
    for recommendation in result.recommendations:
        print(f"  • {recommendation}")
    print("=" * 50)


def main():
    args = build_parser().parse_args()

    # === Command: estimate ===
    if args.command == "estimate":
        try:
            run_estimate(args)
        except Exception as e:
            logger.error(f"Estimate failed: {e}", exc_info=True)
            sys.exit(1)

    # === Command: serve ===
    elif args.command == "serve":
        import uvicorn

        logger.info(f"Starting API on {args.host}:{args.port}")
        uvicorn.run("src.presentation.api.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
