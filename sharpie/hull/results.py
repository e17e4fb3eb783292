"""
SHARPIE Hull Results

Derived records for the hull geometry and freeboard stages.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from sharpie.core.constants import FT3_PER_TON_SEA
from sharpie.core.utils import record_kwargs, record_to_dict


# =============================================================================
# HULL GEOMETRY
# =============================================================================

@dataclass(frozen=True)
class DerivedHull:
    """Hull form coefficients, areas and speed-length quantities."""
    # Dimensions
    lwl: float
    loa: float
    b: float
    bb: float  # effective beam over bulges
    t: float
    stem_len: float
    boxy: bool

    # Displacement and form
    d: float
    cb: float
    cs: float  # sharpness coefficient
    cm: float  # midship section coefficient
    cp: float  # prismatic coefficient
    cwp: float  # waterplane coefficient

    # Areas
    wp: float  # waterplane area (ft²)
    ws: float  # wetted surface, Mumford (ft²)
    ws_denny_mumford: float
    ws_froude: float

    # Length and speed
    leff: float
    vn: float
    len2beam: float
    ts: float  # draught at side
    fn: float  # Froude number at maximum speed
    re: float  # Reynolds number at maximum speed

    def t_calc(self, d: float) -> float:
        """Draught at displacement d."""
        tpi = self.wp / FT3_PER_TON_SEA
        if tpi == 0.0:
            return self.t
        return self.t + (d - self.d) / tpi

    def cb_calc(self, d: float, t: Optional[float] = None) -> float:
        """Block coefficient at displacement d, clamped to [0, 1]."""
        t = self.t if t is None else t
        volume = self.lwl * self.bb * t
        if volume == 0.0:
            return 0.0
        return min(max(d * FT3_PER_TON_SEA / volume, 0.0), 1.0)

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DerivedHull":
        return cls(**record_kwargs(cls, data))


# =============================================================================
# FREEBOARD
# =============================================================================

@dataclass(frozen=True)
class DerivedFreeboard:
    """Deck layout, average freeboards and the deck profile."""
    # Segment fractions of Lwl
    fc_len: float
    fd_len: float
    ad_len: float
    qd_len: float

    # Segment heights used by the gun stage
    fc_fwd: float
    fd_aft: float
    ad_fwd: float

    # Segment averages
    fc: float
    fd: float
    ad: float
    qd: float

    freeboard: float
    freeboard_dist: float
    b: float
    is_wet_fwd: bool
    year_adj: float

    deck_profile: Tuple[str, ...]

    @property
    def deck_description(self) -> str:
        return ", ".join(self.deck_profile)

    def free_cap(self, broadside: bool) -> float:
        """Cap on effective freeboard for side-mounted guns."""
        if self.b > 0.0 and self.freeboard > self.b / 3.0:
            return self.freeboard ** 2 * 3.0 / self.b
        if broadside:
            return self.freeboard - 6.0
        return self.freeboard

    def to_dict(self) -> Dict[str, Any]:
        data = record_to_dict(self)
        data["deck_description"] = self.deck_description
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DerivedFreeboard":
        return cls(**record_kwargs(cls, data))
