"""Application services."""

from .crop_yield_service import CropYieldService

__all__ = ["CropYieldService"]
