"""Crop yield estimation service."""
