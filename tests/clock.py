"""Deterministic clock for tests."""

import itertools
from datetime import datetime, timedelta

START = datetime(2024, 6, 1, 8, 0)  # a Saturday


def make_clock(start: datetime = START):
    """Clock that advances one minute per call so timestamps never tie."""
    ticks = itertools.count()
    return lambda: start + timedelta(minutes=next(ticks))
