"""
SHARPIE Armour Results
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from sharpie.core.enums import BulkheadType, DeckType
from sharpie.core.utils import record_kwargs, record_to_dict


@dataclass(frozen=True)
class DerivedArmor:
    """Plate weights (long tons) and belt limits."""
    # Belts
    wgt_main: float
    wgt_end: float
    wgt_upper: float

    # Torpedo protection
    wgt_bulge: float
    wgt_bulkhead: float
    bh_kind: BulkheadType
    flotation_factor: float  # 1.0 without a bulkhead
    torpedo_factor: float

    # Deck and conning towers
    deck_kind: DeckType
    wgt_deck: float
    wgt_ct_fwd: float
    wgt_ct_aft: float

    wgt_guns: float  # gun armour from the gun stage
    wgt_engine: float  # machinery weight used for box decks

    belt_coverage: float
    max_belt_hgt: float
    budget: float

    @property
    def wgt_belts(self) -> float:
        return self.wgt_main + self.wgt_end + self.wgt_upper

    @property
    def wgt_torpedo(self) -> float:
        return self.wgt_bulge + self.wgt_bulkhead

    @property
    def wgt_ct(self) -> float:
        return self.wgt_ct_fwd + self.wgt_ct_aft

    @property
    def wgt_total(self) -> float:
        return self.wgt_belts + self.wgt_torpedo + self.wgt_deck + self.wgt_ct + self.wgt_guns

    def to_dict(self) -> Dict[str, Any]:
        data = record_to_dict(self)
        data.update({
            "wgt_belts": round(self.wgt_belts, 4),
            "wgt_torpedo": round(self.wgt_torpedo, 4),
            "wgt_ct": round(self.wgt_ct, 4),
            "wgt_total": round(self.wgt_total, 4),
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DerivedArmor":
        kwargs = record_kwargs(cls, data)
        kwargs["bh_kind"] = BulkheadType(data["bh_kind"])
        kwargs["deck_kind"] = DeckType(data["deck_kind"])
        return cls(**kwargs)
