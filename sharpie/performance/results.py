"""
SHARPIE Performance Results
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from sharpie.core.utils import record_kwargs, record_to_dict


@dataclass(frozen=True)
class DerivedPerformance:
    """Stability, seakeeping, strength, survivability, recoil and cost."""
    # Superstructure moments
    super_total: float
    super_factor: float
    super_factor_long: float

    # Stability
    kb: float
    bm: float
    kg: float
    stability: float
    gm: float  # metacentric height (ft)
    stability_adj: float
    roll_period: float  # seconds

    # Seakeeping
    seaboat: float
    steadiness: float  # 0..100
    seakeeping: float

    # Structure and space
    hull_frac: float
    str_cross: float
    str_long: float
    str_comp: float
    hull_room: float
    deck_room: float

    # Survivability
    flotation: float  # tons
    shell_damage: float  # hits of the main battery shell
    torpedo_damage: float

    recoil: float

    # Cost
    cost_units: float
    cost_gbp: float  # millions
    cost_usd: float  # millions

    phrases: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DerivedPerformance":
        return cls(**record_kwargs(cls, data))
