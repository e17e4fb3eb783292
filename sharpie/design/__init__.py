"""
SHARPIE Design

The immutable design input, the freeboard pre-fill estimators and the
native design file format.
"""

from .inputs import (
    DesignInput,
    HullInput,
    DeckLayout,
    Battery,
    GunGroup,
    Torpedoes,
    Mines,
    ASW,
    Belt,
    DeckArmor,
    ArmorInput,
    EngineInput,
    MiscWeights,
)
from .estimators import estimate_freeboard, flush_heights, break_heights, ESTIMATORS
from .schema import DesignFileModel
from .io import load_design, save_design, design_to_dict, design_from_dict
from .templates import template_design

__all__ = [
    "DesignInput",
    "HullInput",
    "DeckLayout",
    "Battery",
    "GunGroup",
    "Torpedoes",
    "Mines",
    "ASW",
    "Belt",
    "DeckArmor",
    "ArmorInput",
    "EngineInput",
    "MiscWeights",
    "estimate_freeboard",
    "flush_heights",
    "break_heights",
    "ESTIMATORS",
    "DesignFileModel",
    "load_design",
    "save_design",
    "design_to_dict",
    "design_from_dict",
    "template_design",
]
