"""
SHARPIE Engine Stage

Powering, bunkerage and machinery weight, then the ship weight balance:
what is left of the displacement for the hull structure, the light,
standard and full load displacements and the crew.
"""

from __future__ import annotations
from typing import Optional
import logging

from sharpie.armor.results import DerivedArmor
from sharpie.core.constants import (
    BATTERY_YEAR,
    COMPLEX_RECIPROCATING_YEAR,
    DIESEL_YEAR,
    ELECTRIC_DRIVE_YEAR,
    GASOLINE_YEAR,
    GEARED_DRIVE_YEAR,
    OIL_FUEL_YEAR,
    RECIPROCATING_HP_PER_SHAFT,
    TURBINE_HP_PER_SHAFT,
    TURBINE_YEAR,
    fpow,
)
from sharpie.core.enums import BoilerType, DriveType, FuelType
from sharpie.design.inputs import DesignInput, EngineInput
from sharpie.hull.results import DerivedHull
from sharpie.validators.aggregator import StageDiagnostics
from sharpie.weapons.results import DerivedGuns
from . import powering
from .results import DerivedEngine

logger = logging.getLogger(__name__)

# (flag, introduction year, warning)
ERA_CHECKS = (
    (FuelType.OIL, OIL_FUEL_YEAR, "Oil fuel"),
    (FuelType.DIESEL, DIESEL_YEAR, "Diesel engines"),
    (FuelType.GASOLINE, GASOLINE_YEAR, "Gasoline engines"),
    (FuelType.BATTERY, BATTERY_YEAR, "Battery power"),
    (BoilerType.TURBINE, TURBINE_YEAR, "Steam turbines"),
    (BoilerType.COMPLEX, COMPLEX_RECIPROCATING_YEAR, "Complex reciprocating engines"),
    (DriveType.GEARED, GEARED_DRIVE_YEAR, "Geared drive"),
    (DriveType.ELECTRIC, ELECTRIC_DRIVE_YEAR, "Electric drive"),
)


def _fitted(engine: EngineInput, flag) -> bool:
    if isinstance(flag, FuelType):
        return bool(engine.fuel & flag)
    if isinstance(flag, BoilerType):
        return bool(engine.boiler & flag)
    return bool(engine.drive & flag)


def crew(d: float):
    """Maximum and minimum complement for displacement d."""
    crew_max = int(fpow(d, 0.75) * 0.56)
    return crew_max, int(crew_max * 0.7692)


class EngineStage:
    """Fifth calculation stage."""

    def calculate(
        self,
        design: DesignInput,
        hull: DerivedHull,
        guns: DerivedGuns,
        armor: DerivedArmor,
        diagnostics: Optional[StageDiagnostics] = None,
    ) -> DerivedEngine:
        engine = design.engine
        year = design.engine_year
        d, lwl, leff, cs, ws = hull.d, hull.lwl, hull.leff, hull.cs, hull.ws
        logger.debug(f"Engine stage: year={year} vmax={engine.vmax} shafts={engine.shafts}")

        # Only cruising horsepower is capped at maximum speed
        v_cruise = min(engine.vcruise, engine.vmax)
        rf_max = powering.rf(engine.vmax, ws)
        rf_cruise = powering.rf(engine.vcruise, ws)
        rw_max = powering.rw(engine.vmax, d, lwl, cs)
        rw_cruise = powering.rw(engine.vcruise, d, lwl, cs)

        bunker = powering.bunker(engine, year, d, lwl, leff, cs, ws)
        wgt_engine = powering.engine_weight(engine, year, d, lwl, leff, cs, ws)

        # Weight balance
        wgt_load = d * 0.02 + bunker + guns.wgt_mag
        wgt_hull = (
            d - guns.wgt_guns - guns.wgt_mounts - guns.wgt_weapons
            - armor.wgt_total - wgt_engine - wgt_load - design.misc.total
        )
        d_max = d + 0.8 * bunker
        t_max = hull.t_calc(d_max)
        crew_max, crew_min = crew(d)

        derived = DerivedEngine(
            year=year,
            hp_max=powering.hp(engine.vmax, d, lwl, leff, cs, ws, year),
            hp_cruise=powering.hp(v_cruise, d, lwl, leff, cs, ws, year),
            hp_type=powering.hp_type(engine.boiler),
            rf_max=rf_max,
            rf_cruise=rf_cruise,
            rw_max=rw_max,
            rw_cruise=rw_cruise,
            pw_max=powering.pw(rw_max, rf_max),
            pw_cruise=powering.pw(rw_cruise, rf_cruise),
            num_engines=powering.num_engines(engine.boiler),
            d_engine_factor=powering.d_engine_factor(engine.boiler, engine.fuel, year),
            bunker_factor=powering.bunker_factor(engine.boiler, year),
            bunker=bunker,
            bunker_max=1.8 * bunker,
            wgt_engine=wgt_engine,
            fuel_description=powering.fuel_description(engine.fuel),
            boiler_description=powering.boiler_description(engine.boiler),
            drive_description=powering.drive_description(engine.drive),
            wgt_guns=guns.wgt_guns,
            wgt_mounts=guns.wgt_mounts,
            wgt_weapons=guns.wgt_weapons,
            wgt_armor=armor.wgt_total,
            wgt_load=wgt_load,
            wgt_misc=design.misc.total,
            wgt_hull=wgt_hull,
            d=d,
            d_lite=d - wgt_load,
            d_std=d - bunker,
            d_max=d_max,
            t_max=t_max,
            cb_max=hull.cb_calc(d_max, t_max),
            crew_max=crew_max,
            crew_min=crew_min,
        )

        if diagnostics is not None:
            self._validate(engine, derived, diagnostics)

        logger.debug(
            f"Engine stage: hp={derived.hp_max:.0f} engine={wgt_engine:.1f} "
            f"bunker={bunker:.1f} hull={wgt_hull:.1f}"
        )
        return derived

    def _validate(self, engine: EngineInput, derived: DerivedEngine, diagnostics: StageDiagnostics) -> None:
        if not 0.0 <= engine.pct_coal <= 100.0:
            diagnostics.error("engine.pct_coal", "Coal percentage must be 0 to 100")

        message = powering.description_error(derived.fuel_description)
        if message:
            diagnostics.error("engine.fuel", message)

        message = powering.description_error(derived.boiler_description)
        if engine.fuel.is_steam and message:
            diagnostics.error("engine.boiler", message)

        message = powering.description_error(derived.drive_description)
        if message:
            diagnostics.error("engine.drive", message)

        if engine.shafts < 1:
            diagnostics.error("engine.shafts", "Engine must drive at least one shaft")
        else:
            reciprocating = engine.boiler.is_reciprocating and not engine.boiler.is_turbine
            ceiling = RECIPROCATING_HP_PER_SHAFT if reciprocating else TURBINE_HP_PER_SHAFT
            if derived.hp_max / engine.shafts > ceiling:
                kind = "reciprocating engines" if reciprocating else "turbines"
                diagnostics.warning("engine.shafts", f"Too much power per shaft for {kind}")

        if engine.vcruise > engine.vmax:
            diagnostics.warning("engine.vcruise", "Cruising speed exceeds maximum speed")

        for flag, introduced, name in ERA_CHECKS:
            if _fitted(engine, flag) and derived.year < introduced:
                diagnostics.warning("engine.year", f"{name} not available before {introduced}")

        if derived.wgt_hull < 0.0:
            diagnostics.error("weights", "Design Failure: Reduce weights or increase Displacement")
