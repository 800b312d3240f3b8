"""Use case for aggregating stored predictions into dashboard statistics."""

import logging
from typing import Any, Dict, List, Mapping

import pandas as pd

from ..entities.crop_field import CropField
from ..entities.yield_prediction import YieldPrediction

logger = logging.getLogger(__name__)


class SummarizePredictionsUseCase:
    """Use case to compute totals and averages over stored predictions."""

    def execute(
        self,
        predictions: List[YieldPrediction],
        crop_fields: Mapping[str, CropField],
    ) -> Dict[str, Any]:
        """
        Execute the use case.

        Args:
            predictions: Stored predictions
            crop_fields: Crop fields keyed by id, used to group by crop type

        Returns:
            Dictionary of summary statistics
        """
        logger.info(f"Summarizing {len(predictions)} predictions")

        if not predictions:
            return {
                "total_predictions": 0,
                "average_confidence": 0.0,
                "average_yield": 0.0,
                "total_estimated_revenue": 0.0,
                "average_yield_by_crop": {},
                "predictions_by_model": {},
            }

        df = pd.DataFrame(
            [
                {
                    "crop_type": (
                        crop_fields[p.crop_field_id].crop_type.lower()
                        if p.crop_field_id in crop_fields
                        else "unknown"
                    ),
                    "model_used": p.model_used or "unknown",
                    "predicted_yield": p.predicted_yield,
                    "confidence": p.confidence,
                    "estimated_revenue": p.estimated_revenue,
                }
                for p in predictions
            ]
        )

        # Decimal columns are stored as text
        for column in ["predicted_yield", "confidence", "estimated_revenue"]:
            df[column] = pd.to_numeric(df[column], errors="coerce")

        by_crop = df.groupby("crop_type")["predicted_yield"].mean().round(2)
        by_model = df.groupby("model_used").size()

        return {
            "total_predictions": int(len(df)),
            "average_confidence": round(float(df["confidence"].mean()), 1),
            "average_yield": round(float(df["predicted_yield"].mean()), 2),
            "total_estimated_revenue": float(df["estimated_revenue"].fillna(0).sum()),
            "average_yield_by_crop": {k: float(v) for k, v in by_crop.items()},
            "predictions_by_model": {k: int(v) for k, v in by_model.items()},
        }
