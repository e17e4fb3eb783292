"""
SHARPIE Freeboard Estimators

Optional pre-fill for deck heights. Runs before compute() and returns a new
DesignInput; compute() itself never estimates missing heights.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Dict
import logging

from sharpie.core.constants import fsqrt, year_adj
from .inputs import DesignInput

logger = logging.getLogger(__name__)

FLUSH = "flush"
BREAK = "break"
ESTIMATORS = (FLUSH, BREAK)


def bow_freeboard(lwl: float, year: int) -> float:
    """Era-adjusted freeboard at the stem."""
    return (1.1 - (1.0 - year_adj(year)) * 0.5) * fsqrt(lwl)


def flush_heights(lwl: float, year: int) -> Dict[str, float]:
    """Deck heights for a flush-decked hull."""
    bow = bow_freeboard(lwl, year)
    other = 0.7 * fsqrt(lwl)
    mid = (bow + other) / 2.0
    return {
        "fc_fwd": bow,
        "fc_aft": mid,
        "fd_fwd": mid,
        "fd_aft": other,
        "ad_fwd": other,
        "ad_aft": other,
        "qd_fwd": other,
        "qd_aft": other,
    }


def break_heights(lwl: float, year: int) -> Dict[str, float]:
    """Deck heights for a hull with a break aft of the forward deck."""
    bow = bow_freeboard(lwl, year)
    other = 0.9 * fsqrt(lwl)
    return {
        "fc_fwd": bow,
        "fc_aft": other,
        "fd_fwd": other,
        "fd_aft": other,
        "ad_fwd": other * 0.5,
        "ad_aft": other * 0.5,
        "qd_fwd": other * 0.5,
        "qd_aft": other * 0.5,
    }


def estimate_freeboard(design: DesignInput, method: str = FLUSH) -> DesignInput:
    """
    Fill every unset deck height of the design.

    Heights the user entered are kept. Returns the design unchanged when
    nothing is missing.

    Raises:
        ValueError: unknown estimation method
    """
    if method == FLUSH:
        estimate = flush_heights(design.hull.lwl, design.year)
    elif method == BREAK:
        estimate = break_heights(design.hull.lwl, design.year)
    else:
        raise ValueError(f"Unknown freeboard estimate: {method!r} (expected one of {ESTIMATORS})")

    deck = design.hull.deck
    missing = deck.missing_heights
    if not missing:
        return design

    logger.debug(f"Estimating {len(missing)} deck heights ({method})")
    filled = replace(deck, **{name: estimate[name] for name in missing})
    return replace(design, hull=replace(design.hull, deck=filled))
