"""
SHARPIE Hull Geometry

Hull form coefficients, wetted surface estimates and speed-length numbers.

Implements:
- block_coefficient / displacement: Cb <-> D through the immersed volume
- midship_coefficient, prismatic_coefficient, waterplane_coefficient (Parsons)
- Wetted surface by Mumford, Denny-Mumford and Froude
- HullGeometryStage: DerivedHull plus Cb and dimension checks
"""

from __future__ import annotations
from typing import Optional, Tuple
import math
import logging

from sharpie.core.constants import (
    FT3_PER_TON_SEA,
    GRAVITY_FT_S2,
    KNOTS_TO_FT_S,
    WATER_KINEMATIC_VISCOSITY,
    fpow,
    fsqrt,
)
from sharpie.core.enums import BowType, SternType
from sharpie.core.utils import clamp, safe_divide
from sharpie.design.inputs import DesignInput, HullInput
from sharpie.validators.aggregator import StageDiagnostics
from .results import DerivedHull

logger = logging.getLogger(__name__)

CB_MIN = 0.3  # exclusive
CB_MAX = 1.0
CM_CB_FLOOR = 0.001  # keeps cb ** -3.56 finite

# Parsons waterplane terms (a, f) per stern type
WATERPLANE_TERMS = {
    SternType.TRANSOM_SMALL: (0.262, 0.79),
    SternType.TRANSOM_LARGE: (0.262, 0.81),
    SternType.CRUISER: (0.262, 0.76),
    SternType.ROUND: (0.262, 0.76),
}
BOXY_WATERPLANE_TERMS = (0.175, 0.875)


# =============================================================================
# FORM COEFFICIENTS
# =============================================================================

def block_coefficient(d: float, lwl: float, bb: float, t: float) -> float:
    """Cb for displacement d, clamped to [0, 1]; 0 when the volume is 0."""
    volume = lwl * bb * t
    if volume == 0.0:
        return 0.0
    return clamp(d * FT3_PER_TON_SEA / volume, 0.0, 1.0)


def displacement(cb: float, lwl: float, bb: float, t: float) -> float:
    """Normal displacement in long tons for block coefficient cb."""
    return cb * lwl * bb * t / FT3_PER_TON_SEA


def resolve_cb_and_d(hull: HullInput) -> Tuple[float, float]:
    """A given Cb wins; otherwise Cb is derived from the given displacement."""
    bb = hull.bb_eff
    if hull.cb is not None:
        return hull.cb, displacement(hull.cb, hull.lwl, bb, hull.t)
    if hull.d is not None:
        return block_coefficient(hull.d, hull.lwl, bb, hull.t), hull.d
    return 0.0, 0.0


def midship_coefficient(cb: float) -> float:
    """Midship section coefficient (Kerlen)."""
    if cb <= 0.0:
        return 1.006
    return 1.006 - 0.0056 * max(cb, CM_CB_FLOOR) ** -3.56


def prismatic_coefficient(cb: float) -> float:
    return cb / midship_coefficient(cb)


def waterplane_coefficient(stern_type: SternType, cb: float, boxy: bool) -> float:
    """Waterplane area coefficient (Parsons), with a fine-hull correction below Cb 0.4."""
    a, f = WATERPLANE_TERMS[stern_type]
    if boxy or cb >= 0.75:
        a, f = BOXY_WATERPLANE_TERMS

    cwp = min(a + f * prismatic_coefficient(max(cb, 0.4)), 1.0)
    if cb < 0.4:
        cwp -= 0.0281 - fpow(cb - 0.3, 1.55)
    return cwp


def sharpness_coefficient(lwl: float, bb: float, cb: float) -> float:
    if lwl == 0.0:
        return 0.0
    return 0.4 * fpow(bb / lwl * 6.0, 1.0 / 3.0) * fsqrt(cb / 0.52)


def effective_length(stern_type: SternType, lwl: float, bb: float, cs: float) -> float:
    """Effective length for wave making; transom sterns lengthen the hull."""
    if cs == 0.0:
        return 0.0
    if stern_type == SternType.TRANSOM_SMALL:
        return bb * 0.5 / cs + lwl
    if stern_type == SternType.TRANSOM_LARGE:
        return bb / cs + lwl
    return lwl


# =============================================================================
# WETTED SURFACE
# =============================================================================

def wetted_surface_mumford(lwl: float, t: float, d: float) -> float:
    if t == 0.0:
        return 0.0
    return lwl * t * 1.7 + d * FT3_PER_TON_SEA / t


def wetted_surface_denny_mumford(lwl: float, bb: float, t: float, cb: float) -> float:
    """w = Lwl * (1.7 * T + B * Cb)"""
    return lwl * (1.7 * t + bb * cb)


def wetted_surface_froude(lwl: float, bb: float, t: float, cb: float) -> float:
    """w = 3.4 * V^(2/3) + 0.485 * Lwl * V^(1/3), V the immersed volume."""
    volume = lwl * bb * t * cb
    return 3.4 * fpow(volume, 2.0 / 3.0) + 0.485 * lwl * fpow(volume, 1.0 / 3.0)


# =============================================================================
# LENGTH AND SPEED
# =============================================================================

def stem_length(fc_fwd: float, bow_angle: float) -> float:
    """Length added by a raked stem; 0 for angles of 90 degrees or more."""
    if abs(bow_angle) >= 90.0:
        return 0.0
    return fc_fwd * math.tan(math.radians(bow_angle))


def length_overall(hull: HullInput, stem_len: float) -> float:
    ram = hull.ram_len if hull.bow_type == BowType.RAM else 0.0
    return hull.lwl + max(ram, stem_len, 0.0) + max(hull.stern_overhang, 0.0)


def froude_number(v_knots: float, lwl: float) -> float:
    if lwl <= 0.0:
        return 0.0
    return v_knots * KNOTS_TO_FT_S / math.sqrt(GRAVITY_FT_S2 * lwl)


def reynolds_number(v_knots: float, lwl: float) -> float:
    return v_knots * KNOTS_TO_FT_S * lwl / WATER_KINEMATIC_VISCOSITY


# =============================================================================
# HULL GEOMETRY STAGE
# =============================================================================

class HullGeometryStage:
    """
    First calculation stage.

    Resolves Cb and displacement, derives the form coefficients and
    reports out-of-range Cb and non-positive dimensions.
    """

    def calculate(
        self,
        design: DesignInput,
        diagnostics: Optional[StageDiagnostics] = None,
    ) -> DerivedHull:
        hull = design.hull
        logger.debug(f"Hull stage: lwl={hull.lwl} b={hull.b} t={hull.t}")

        bb = hull.bb_eff
        boxy = design.engine.shafts < 2
        cb, d = resolve_cb_and_d(hull)

        cm = midship_coefficient(cb)
        cwp = waterplane_coefficient(hull.stern_type, cb, boxy)
        cs = sharpness_coefficient(hull.lwl, bb, cb)
        leff = effective_length(hull.stern_type, hull.lwl, bb, cs)
        stem_len = stem_length(hull.deck.height("fc_fwd"), hull.bow_angle)

        derived = DerivedHull(
            lwl=hull.lwl,
            loa=length_overall(hull, stem_len),
            b=hull.b,
            bb=bb,
            t=hull.t,
            stem_len=stem_len,
            boxy=boxy,
            d=d,
            cb=cb,
            cs=cs,
            cm=cm,
            cp=cb / cm,
            cwp=cwp,
            wp=cwp * hull.lwl * hull.b,
            ws=wetted_surface_mumford(hull.lwl, hull.t, d),
            ws_denny_mumford=wetted_surface_denny_mumford(hull.lwl, bb, hull.t, cb),
            ws_froude=wetted_surface_froude(hull.lwl, bb, hull.t, cb),
            leff=leff,
            vn=fsqrt(leff),
            len2beam=safe_divide(hull.lwl, bb),
            ts=(2.0 * cm - 1.0) * hull.t,
            fn=froude_number(design.engine.vmax, hull.lwl),
            re=reynolds_number(design.engine.vmax, hull.lwl),
        )

        if diagnostics is not None:
            self._validate(hull, derived, diagnostics)

        logger.debug(f"Hull stage: d={d:.1f} cb={cb:.4f} cwp={cwp:.4f}")
        return derived

    def _validate(self, hull: HullInput, derived: DerivedHull, diagnostics: StageDiagnostics) -> None:
        if hull.lwl <= 0.0 or hull.b <= 0.0 or hull.t <= 0.0:
            diagnostics.error("hull", "Hull dimensions must be greater than zero")
        if derived.cb <= CB_MIN or derived.cb > CB_MAX:
            diagnostics.error("hull.cb", "Cb Coefficient must be 0.3 to 1.00")
