"""
SHARPIE Machinery Results

Derived record for the engine stage, which also closes the ship's weight
balance: hull weight, displacement variants and crew.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from sharpie.core.utils import record_kwargs, record_to_dict


@dataclass(frozen=True)
class DerivedEngine:
    """Powering, bunkerage, machinery weight and the ship weight balance."""
    year: int

    # Power (hp) and resistance
    hp_max: float
    hp_cruise: float
    hp_type: str  # "ihp" or "shp"
    rf_max: float
    rf_cruise: float
    rw_max: float
    rw_cruise: float
    pw_max: float
    pw_cruise: float

    # Machinery
    num_engines: int
    d_engine_factor: float
    bunker_factor: float
    bunker: float
    bunker_max: float
    wgt_engine: float

    fuel_description: str
    boiler_description: str
    drive_description: str

    # Weight balance (long tons)
    wgt_guns: float
    wgt_mounts: float
    wgt_weapons: float
    wgt_armor: float
    wgt_load: float
    wgt_misc: float
    wgt_hull: float

    # Displacements
    d: float
    d_lite: float
    d_std: float
    d_max: float
    t_max: float
    cb_max: float

    crew_max: int
    crew_min: int

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DerivedEngine":
        return cls(**record_kwargs(cls, data))
