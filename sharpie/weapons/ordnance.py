"""
SHARPIE Other Ordnance

Torpedo, mine and anti-submarine weapon weights and the hull and deck
space taken by torpedo tubes.
"""

from __future__ import annotations
from typing import Iterable
import math

from sharpie.core.constants import POUND2TON
from sharpie.core.enums import ASWType, MineType, TorpedoType
from sharpie.design.inputs import ASW, Mines, Torpedoes

# ==================== Weight Factors ====================

TORPEDO_FACTORS = {
    TorpedoType.FIXED_TUBES: 0.25,
    TorpedoType.DECK_SIDE_TUBES: 1.0,
    TorpedoType.CENTRE_TUBES: 1.0,
    TorpedoType.DECK_RELOADS: 0.25,
    TorpedoType.BOW_TUBES: 1.0,
    TorpedoType.STERN_TUBES: 1.0,
    TorpedoType.BOW_AND_STERN_TUBES: 1.0,
    TorpedoType.SUBMERGED_SIDE_TUBES: 1.0,
    TorpedoType.SUBMERGED_RELOADS: 0.25,
}

MINE_FACTORS = {
    MineType.STERN_RAILS: 0.25,
    MineType.BOW_TUBES: 1.0,
    MineType.STERN_TUBES: 1.0,
    MineType.SIDE_TUBES: 1.0,
}

ASW_FACTORS = {
    ASWType.STERN_RACKS: 0.25,
    ASWType.THROWERS: 0.5,
    ASWType.HEDGEHOGS: 0.5,
    ASWType.SQUID_MORTARS: 10.0,
}

# Tube arrangements below the waterline
HULL_TUBES = (
    TorpedoType.BOW_TUBES,
    TorpedoType.STERN_TUBES,
    TorpedoType.BOW_AND_STERN_TUBES,
    TorpedoType.SUBMERGED_SIDE_TUBES,
)


# =============================================================================
# TORPEDOES
# =============================================================================

def torpedo_weight(torp: Torpedoes) -> float:
    """Weight of tubes and torpedoes in long tons."""
    divisor = ((1907.0 - torp.year) + 25.0) * 937.0
    body = math.pi * torp.diam ** 2 * torp.length / divisor if divisor > 0.0 else 0.0
    return body + 0.004 * (torp.year - 1890) * torp.num * TORPEDO_FACTORS[torp.kind]


def torpedo_hull_space(torp: Torpedoes) -> float:
    """Internal volume (ft³) taken by submerged tubes and reloads."""
    if torp.kind in HULL_TUBES:
        return torp.length * 2.5 * (torp.diam * 2.75 / 12.0) ** 2 * torp.num
    if torp.kind == TorpedoType.SUBMERGED_RELOADS:
        return torp.length * 1.5 * (torp.diam * 1.5 / 12.0) ** 2 * torp.num
    return 0.0


def _mount_width(torp: Torpedoes) -> float:
    per = torp.num // torp.mounts
    return per * torp.diam / 12.0 + (per - 1) * 0.5


def torpedo_deck_space(torp: Torpedoes, b: float) -> float:
    """Deck area (ft²) taken by deck tubes and reloads; trainable tubes need mounts."""
    if torp.kind == TorpedoType.FIXED_TUBES:
        return torp.length * torp.diam / 12.0 * torp.num
    if torp.kind in (TorpedoType.DECK_SIDE_TUBES, TorpedoType.CENTRE_TUBES) and torp.mounts == 0:
        return 0.0
    if torp.kind == TorpedoType.DECK_SIDE_TUBES:
        width = _mount_width(torp)
        # Training circle plus the tube footprint
        radius = math.sqrt(torp.length ** 2 + width ** 2) * 0.5
        return math.pi * radius ** 2 + width * 0.5 * torp.length
    if torp.kind == TorpedoType.CENTRE_TUBES:
        width = _mount_width(torp)
        return math.sqrt(torp.length ** 2 + width ** 2) * b * torp.mounts
    if torp.kind == TorpedoType.DECK_RELOADS:
        return torp.length * 1.5 * (torp.diam + 6.0) / 12.0 * torp.num
    return 0.0


# =============================================================================
# MINES AND ASW
# =============================================================================

def mine_weight(mines: Mines) -> float:
    return (mines.num + mines.reload) * mines.wgt / POUND2TON * MINE_FACTORS[mines.kind]


def asw_weight(asw: ASW) -> float:
    return (asw.num + asw.reload) * asw.wgt / POUND2TON * ASW_FACTORS[asw.kind]


def total_torpedo_weight(torpedoes: Iterable[Torpedoes]) -> float:
    return sum(torpedo_weight(t) for t in torpedoes)


def total_asw_weight(asw: Iterable[ASW]) -> float:
    return sum(asw_weight(a) for a in asw)
