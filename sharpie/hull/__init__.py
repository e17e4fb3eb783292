"""
SHARPIE Hull

Hull geometry and freeboard stages.
"""

from sharpie.core.constants import year_adj

from .results import DerivedHull, DerivedFreeboard
from .geometry import (
    HullGeometryStage,
    block_coefficient,
    displacement,
    midship_coefficient,
    prismatic_coefficient,
    waterplane_coefficient,
    sharpness_coefficient,
    effective_length,
    wetted_surface_mumford,
    wetted_surface_denny_mumford,
    wetted_surface_froude,
    stem_length,
    froude_number,
    reynolds_number,
)
from .freeboard import FreeboardStage, deck_profile

__all__ = [
    "year_adj",
    "DerivedHull",
    "DerivedFreeboard",
    "HullGeometryStage",
    "FreeboardStage",
    "deck_profile",
    "block_coefficient",
    "displacement",
    "midship_coefficient",
    "prismatic_coefficient",
    "waterplane_coefficient",
    "sharpness_coefficient",
    "effective_length",
    "wetted_surface_mumford",
    "wetted_surface_denny_mumford",
    "wetted_surface_froude",
    "stem_length",
    "froude_number",
    "reynolds_number",
]
