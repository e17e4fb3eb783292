"""
SHARPIE Armour Plating

Plate weights for belts, bulkheads, decks and conning towers, in long tons.
All thicknesses are inches, lengths and heights feet.
"""

from __future__ import annotations
import math

from sharpie.core.constants import ARMOR_INCH, fpow
from sharpie.core.enums import DeckType
from sharpie.core.utils import positive_divide, safe_divide
from sharpie.design.inputs import Belt, DeckArmor


# =============================================================================
# BELTS
# =============================================================================

def belt_weight(belt: Belt, lwl: float, cwp: float, b: float, tapered: bool = False) -> float:
    """
    Weight of a belt, bulge or bulkhead on both sides of the ship.

    Main and upper belts are tapered: they gain an extra length that grows
    as the belt stops short of the ends of a full waterline.
    """
    extra = 0.0
    if tapered:
        extra = fpow(1.0 - safe_divide(belt.len, lwl), 1.0 - cwp) * b
    return (belt.len + extra) * belt.hgt * belt.thick * ARMOR_INCH * 2.0


def ct_weight(thick: float, d: float) -> float:
    """Conning tower weight."""
    return 10.0 * fpow(d / 10000.0, 2.0 / 3.0) * thick


def max_belt_hgt(t: float, freeboard_dist: float, incline: float) -> float:
    """Highest belt the hull side can carry at the given incline (degrees)."""
    cos = math.cos(math.radians(abs(incline)))
    return (t + freeboard_dist) / cos + 0.02 if cos > 0.0 else math.inf


def belt_coverage(main_len: float, lwl: float) -> float:
    """Fraction of the vitals (65% of Lwl) covered by the main belt."""
    return positive_divide(main_len, lwl * 0.65)


# =============================================================================
# DECKS
# =============================================================================

def forecastle_area(fc_len: float, lwl: float, b: float, cwp: float) -> float:
    return fpow(fc_len * 2.0, 1.0 - cwp ** 2) * b * lwl * fc_len * 0.5


def quarterdeck_area(qd_len: float, lwl: float, b: float, cwp: float) -> float:
    return fpow(qd_len, 1.0 - cwp) * b * lwl * qd_len / 4.0 * (2.0 + fpow(2.0, 1.0 - cwp))


def _box_area(weight: float, d: float, lwl: float, b: float) -> float:
    return (positive_divide(weight, d * 0.94) * 0.65 * lwl + 16.0) * (b + 16.0) - 256.0


def deck_area_factor(
    kind: DeckType,
    d: float,
    lwl: float,
    b: float,
    fc_len: float,
    qd_len: float,
    wp: float,
    cwp: float,
    wgt_engine: float,
    wgt_mag: float,
) -> float:
    """
    Main deck area (ft²) to be plated.

    Armoured and protected decks cover the waterplane less the forecastle
    and quarterdeck; box decks cover only the spaces they protect.
    """
    if kind == DeckType.BOX_OVER_MACHINERY:
        return _box_area(wgt_engine * 3.0, d, lwl, b)
    if kind == DeckType.BOX_OVER_MAGAZINE:
        return _box_area(wgt_mag, d, lwl, b)
    if kind == DeckType.BOX_OVER_BOTH:
        return _box_area(wgt_engine * 3.0 + wgt_mag, d, lwl, b)

    fc_part = fpow(fc_len * 2.0, 1.0 - cwp ** 2) * b * lwl * fc_len / 2.0
    qd_part = (
        fpow(qd_len, 1.0 - cwp) * b * lwl * qd_len * 0.25
        + (fpow(qd_len, 1.0 - cwp) + fpow(qd_len * 2.0, 1.0 - cwp)) * b * lwl * qd_len * 0.25
    )
    return (wp - fc_part - qd_part) * 1.01


def deck_weight(
    deck: DeckArmor,
    d: float,
    lwl: float,
    b: float,
    fc_len: float,
    qd_len: float,
    wp: float,
    cwp: float,
    wgt_engine: float,
    wgt_mag: float,
) -> float:
    main = deck_area_factor(deck.kind, d, lwl, b, fc_len, qd_len, wp, cwp, wgt_engine, wgt_mag)
    fc = forecastle_area(fc_len, lwl, b, cwp)
    qd = quarterdeck_area(qd_len, lwl, b, cwp)
    return (main * deck.md + fc * deck.fc + qd * deck.qd) * ARMOR_INCH
