"""
SHARPIE Performance Stage

Final calculation stage. Runs once, in order:

1. superstructure moments
2. stability (KB, BM, KG)
3. trim-adjusted stability, metacentric height and roll period
4. seaboat quality, steadiness and seakeeping
5. hull strength and internal/deck space
6. flotation and damage resistance
7. recoil
8. cost
9. report phrases

Every ratio is 0 when its denominator is not positive.
"""

from __future__ import annotations
from typing import Optional
import logging
import math

from sharpie.armor.results import DerivedArmor
from sharpie.core.constants import POUND2TON, fpow, fsqrt
from sharpie.core.utils import clamp, positive_divide
from sharpie.design.inputs import DesignInput
from sharpie.hull.results import DerivedFreeboard, DerivedHull
from sharpie.machinery.results import DerivedEngine
from sharpie.validators.aggregator import StageDiagnostics
from sharpie.weapons.results import DerivedGuns
from .classify import comments
from .results import DerivedPerformance

logger = logging.getLogger(__name__)

COST_PER_UNIT = 55.0
GBP_TO_USD = 4.0


def super_total(guns: DerivedGuns) -> float:
    """
    Vertical moment of the gun batteries.

    The first battery's moment is added a second time; long-standing
    behaviour that existing designs are balanced against.
    """
    if not guns.batteries:
        return 0.0
    return guns.batteries[0].super_num + sum(b.super_num for b in guns.batteries)


def recoil(broadside: float, super_factor: float, d: float, stability_adj: float, steadiness: float) -> float:
    """Effect of firing the broadside on the ship; over 1 restricts the arcs."""
    if d <= 0.0 or stability_adj <= 0.0 or steadiness <= 0.0:
        return 0.0
    divisor = fpow(d, 2.0 / 3.0) * math.sqrt(stability_adj) * math.sqrt(steadiness / 50.0)
    return broadside / POUND2TON * (1.0 + super_factor) * 50.0 / divisor


def cost(units: float, year: int):
    """Cost in millions of pounds and dollars."""
    era = 1.0 + max(0, year - 1914) * 0.03
    gbp = units * COST_PER_UNIT * era / 1e6
    return gbp, gbp * GBP_TO_USD


class PerformanceStage:
    """Sixth calculation stage."""

    def calculate(
        self,
        design: DesignInput,
        hull: DerivedHull,
        fb: DerivedFreeboard,
        guns: DerivedGuns,
        armor: DerivedArmor,
        engine: DerivedEngine,
        diagnostics: Optional[StageDiagnostics] = None,
    ) -> DerivedPerformance:
        d = hull.d
        t = hull.t
        depth = t + fb.freeboard
        logger.debug(f"Performance stage: d={d:.1f} depth={depth:.2f}")

        # 1. Superstructure moments
        total = super_total(guns)
        super_factor = positive_divide(
            total + (armor.wgt_upper + armor.wgt_ct) * fb.freeboard, d * depth,
        )
        super_factor_long = positive_divide(
            sum(b.long_num for b in guns.batteries) + armor.wgt_end * 0.4, d,
        )

        # 2. Stability
        kb = t * (5.0 / 6.0 - positive_divide(hull.cb, 3.0 * hull.cwp))
        bm = positive_divide(hull.cwp ** 2 * hull.bb ** 2, 11.7 * t * hull.cb)
        moment = (
            engine.wgt_hull * depth * 0.6
            + engine.wgt_engine * t * 0.5
            + engine.wgt_load * t * 0.4
            + (armor.wgt_main + armor.wgt_end + armor.wgt_bulge + armor.wgt_bulkhead) * t * 0.9
            + armor.wgt_deck * depth
            + (armor.wgt_upper + armor.wgt_ct) * depth
            + guns.wgt_weapons * depth
            + engine.wgt_misc * depth * 0.5
            + guns.guns_total * t
            + total
        )
        kg = positive_divide(moment, d)
        stability = positive_divide(kb + bm, kg)
        gm = kb + bm - kg

        # 3. Trim and roll
        stability_adj = stability * (1.0 - super_factor_long)
        roll_period = 0.44 * hull.bb / math.sqrt(gm) if gm > 0.0 else 0.0

        # 4. Seaboat
        seaboat = min(
            fsqrt(positive_divide(fb.fc_fwd, 1.1 * fsqrt(hull.lwl)))
            * (1.0 - 0.25 * engine.pw_max)
            * fpow(max(stability_adj, 0.0), 0.25),
            2.0,
        )
        steadiness = clamp(
            50.0 * seaboat * fsqrt(hull.len2beam / 7.0) * (1.0 - super_factor), 0.0, 100.0,
        )
        seakeeping = seaboat * steadiness / 50.0

        # 5. Structure and space
        hull_frac = positive_divide(engine.wgt_hull, d)
        str_cross = positive_divide(hull_frac, 0.25 * fpow(positive_divide(hull.bb, depth), 0.25))
        str_long = positive_divide(
            hull_frac,
            0.25 * fsqrt(positive_divide(hull.lwl, 12.0 * depth))
            * (1.0 + 2.0 * super_factor_long)
            * (1.05 if guns.super_aft else 1.0),
        )
        threshold = 1.0 - (1.0 - fb.year_adj) * 0.25
        if str_cross >= threshold:
            str_comp = 0.75 * str_cross + 0.25 * str_long
        else:
            str_comp = 0.25 * str_cross + 0.75 * str_long

        hull_room = positive_divide(
            positive_divide(t + fb.freeboard_dist, t),
            1.0
            + 4.0 * positive_divide(engine.wgt_engine, d)
            + 2.0 * positive_divide(guns.wgt_mag, d)
            + positive_divide(guns.torpedo_hull_space, 35.0 * d),
        )
        deck_room = (
            1.0
            - positive_divide(guns.torpedo_deck_space, hull.wp)
            - positive_divide(guns.gun_deck_space, hull.wp)
        )

        # 6. Flotation and damage
        flotation = (
            (hull.wp * fb.freeboard / 35.0 + 0.5 * engine.wgt_hull)
            * clamp(str_comp, 0.0, 1.0)
            * armor.flotation_factor
        )
        shell_wgt = guns.batteries[0].shell_wgt if guns.batteries else 0.0
        shell_damage = positive_divide(flotation, shell_wgt / POUND2TON * 1000.0)
        torpedo_damage = flotation / 4000.0 * armor.torpedo_factor

        # 7. Recoil
        recoil_value = recoil(guns.broadside, super_factor, d, stability_adj, steadiness)

        # 8. Cost
        units = (
            engine.wgt_hull
            + 2.5 * armor.wgt_total
            + 3.0 * (guns.wgt_guns + guns.wgt_mounts)
            + 2.0 * engine.wgt_engine
            + 3.0 * guns.wgt_weapons
            + engine.wgt_misc
        )
        cost_gbp, cost_usd = cost(units, design.year)

        # 9. Phrases
        phrases = comments(
            stability_adj, hull_room, deck_room, str_comp,
            steadiness, seakeeping, fb.is_wet_fwd, recoil_value,
        )

        derived = DerivedPerformance(
            super_total=total,
            super_factor=super_factor,
            super_factor_long=super_factor_long,
            kb=kb,
            bm=bm,
            kg=kg,
            stability=stability,
            gm=gm,
            stability_adj=stability_adj,
            roll_period=roll_period,
            seaboat=seaboat,
            steadiness=steadiness,
            seakeeping=seakeeping,
            hull_frac=hull_frac,
            str_cross=str_cross,
            str_long=str_long,
            str_comp=str_comp,
            hull_room=hull_room,
            deck_room=deck_room,
            flotation=flotation,
            shell_damage=shell_damage,
            torpedo_damage=torpedo_damage,
            recoil=recoil_value,
            cost_units=units,
            cost_gbp=cost_gbp,
            cost_usd=cost_usd,
            phrases=tuple(phrases),
        )

        if diagnostics is not None:
            if str_comp < 0.5:
                diagnostics.error("performance.str_comp", "Design Failure: Hull structure insufficient")
            if stability_adj < 1.0:
                diagnostics.warning("performance.stability", "Design is unstable")

        logger.debug(
            f"Performance stage: gm={gm:.2f} stability={stability_adj:.2f} "
            f"str_comp={str_comp:.2f} seakeeping={seakeeping:.2f}"
        )
        return derived
