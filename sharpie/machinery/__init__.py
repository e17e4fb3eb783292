"""
SHARPIE Machinery

Powering, bunkerage and machinery weight, and the ship weight balance.
"""

from .powering import (
    hp,
    rf,
    rw,
    pw,
    d_engine_factor,
    bunker_factor,
    num_engines,
    bunker,
    engine_weight,
    fuel_description,
    boiler_description,
    drive_description,
    hp_type,
)
from .results import DerivedEngine
from .stage import EngineStage, crew

__all__ = [
    "hp",
    "rf",
    "rw",
    "pw",
    "d_engine_factor",
    "bunker_factor",
    "num_engines",
    "bunker",
    "engine_weight",
    "fuel_description",
    "boiler_description",
    "drive_description",
    "hp_type",
    "DerivedEngine",
    "EngineStage",
    "crew",
]
