"""
SHARPIE Performance

Stability, seakeeping, strength, survivability, recoil and cost.
"""

from .classify import (
    stability_phrase,
    hull_room_phrase,
    deck_room_phrase,
    strength_phrase,
    steadiness_phrase,
    seakeeping_phrase,
    comments,
)
from .results import DerivedPerformance
from .stage import PerformanceStage, super_total, recoil, cost

__all__ = [
    "stability_phrase",
    "hull_room_phrase",
    "deck_room_phrase",
    "strength_phrase",
    "steadiness_phrase",
    "seakeeping_phrase",
    "comments",
    "DerivedPerformance",
    "PerformanceStage",
    "super_total",
    "recoil",
    "cost",
]
