"""Use case for deriving market price and revenue from a prediction."""

import logging
from typing import Dict, Optional, Tuple

from ..numeric import Numeric, parse_decimal, round_half_up

logger = logging.getLogger(__name__)

# Market prices per ton
MARKET_PRICES: Dict[str, float] = {
    "wheat": 320,
    "rice": 420,
    "corn": 280,
    "soybean": 450,
    "cotton": 1200,
    "tomato": 180,
    "potato": 220,
}
DEFAULT_MARKET_PRICE = 300


class EstimateRevenueUseCase:
    """Use case to look up a crop's market price and estimate revenue."""

    def __init__(self, market_prices: Optional[Dict[str, float]] = None):
        """
        Initialize use case.

        Args:
            market_prices: Price per ton keyed by lower-case crop type
                (defaults to MARKET_PRICES)
        """
        self.market_prices = market_prices if market_prices is not None else MARKET_PRICES

    def market_price(self, crop_type: str) -> float:
        """Price per ton for a crop type, case-insensitive."""
        return self.market_prices.get(crop_type.lower(), DEFAULT_MARKET_PRICE)

    def execute(
        self,
        crop_type: str,
        predicted_yield: float,
        planting_area: Optional[Numeric],
    ) -> Tuple[float, int]:
        """
        Execute the use case.

        Args:
            crop_type: Crop type
            predicted_yield: Predicted yield in tons/hectare
            planting_area: Planted area in hectares

        Returns:
            Tuple of (market_price, estimated_revenue)
        """
        price = self.market_price(crop_type)
        area = parse_decimal(planting_area)
        if area is None:
            logger.warning(f"Planting area {planting_area!r} is not a number, revenue set to 0")
            area = 0.0
        revenue = int(round_half_up(predicted_yield * area * price))
        return price, revenue
