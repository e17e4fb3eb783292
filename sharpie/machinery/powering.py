"""
SHARPIE Powering

Horsepower, resistance, bunkerage and machinery weight.

Implements:
- hp: installed power for a speed (wave + friction resistance)
- rf / rw / pw: friction and wave resistance and their ratio
- bunker: fuel carried for the cruising range
- d_engine_factor / bunker_factor: era factors per engine type
- engine_weight: machinery weight from maximum power
- fuel / boiler / drive descriptions
"""

from __future__ import annotations
from typing import Dict

from sharpie.core.constants import BUNKER_RANGE, fpow
from sharpie.core.enums import BoilerType, DriveType, FuelType
from sharpie.core.utils import safe_divide
from sharpie.design.inputs import EngineInput

HP_DIVISOR = 184.1666667
FRICTION_EXPONENT = 1.83

ERROR_PREFIX = "ERROR: "


# =============================================================================
# POWER AND RESISTANCE
# =============================================================================

def _early(year: int) -> float:
    """Penalty for machinery older than 1890."""
    return 1.0 + (1890 - year) / 100.0 if year < 1890 else 1.0


def hp(v: float, d: float, lwl: float, leff: float, cs: float, ws: float, year: int) -> float:
    """Horsepower required to reach speed v (knots)."""
    if v <= 15.0:
        len_hp = lwl - (leff - lwl)
    elif v >= 25.0:
        len_hp = leff
    else:
        len_hp = (leff - lwl) * ((v - 20.0) / 5.0) + lwl

    if len_hp == 0.0:
        return 0.0

    power = (
        fpow(d, 2.0 / 3.0) / len_hp * cs * fpow(v, 4.0)
        + 0.01 * ws * fpow(v, FRICTION_EXPONENT)
    ) * v / HP_DIVISOR
    return power * _early(year)


def rf(v: float, ws: float) -> float:
    """Friction resistance."""
    return 0.01 * ws * fpow(v, FRICTION_EXPONENT)


def rw(v: float, d: float, lwl: float, cs: float) -> float:
    """Wave-making resistance."""
    if lwl == 0.0:
        return 0.0
    return fpow(d, 2.0 / 3.0) / lwl * cs * fpow(v, 4.0)


def pw(rw_value: float, rf_value: float) -> float:
    """Wave share of total resistance."""
    return safe_divide(rw_value, rw_value + rf_value)


# =============================================================================
# ERA FACTORS
# =============================================================================

def d_engine_factor(boiler: BoilerType, fuel: FuelType, year: int) -> float:
    """Machinery power-to-weight factor summed over the engine types fitted."""
    a = b = c = 0.0

    if boiler & BoilerType.SIMPLE:
        if year <= 1884:
            a = 1.2 + (year - 1860) * 0.05
        elif year <= 1949:
            a = 2.45 + (year - 1885) * 0.025
        else:
            a = 4.075

    if boiler & BoilerType.COMPLEX:
        if year <= 1905:
            b = 1.2 + (year - 1860) * 0.05
        elif year <= 1910:
            b = 3.5 + (year - 1906)
        elif year <= 1949:
            b = 7.5 + (year - 1910) * 0.025
        else:
            b = 8.5

    if boiler.is_turbine or not fuel.is_steam:
        if year <= 1897:
            c = 1.2 + (year - 1860) * 0.05
        elif year <= 1902:
            c = 1.0 + (year - 1898) * 0.5
        elif year <= 1909:
            c = 4.0 + (year - 1903)
        elif year <= 1949:
            c = 11.0 + (year - 1910) * 0.2
        else:
            c = 19.0

    return a + b + c


def bunker_factor(boiler: BoilerType, year: int) -> float:
    """Fuel economy factor; turbines improve after 1898."""
    if boiler.is_reciprocating or year < 1898:
        return 1.0 - (1910 - year) / 70.0
    if year < 1920:
        return 1.0 + (year - 1910) / 20.0
    if year < 1950:
        return 1.5 + (year - 1920) / 60.0
    return 2.0


def num_engines(boiler: BoilerType) -> int:
    """One engine per boiler type fitted."""
    return bin(boiler.value).count("1")


# =============================================================================
# BUNKERAGE AND WEIGHT
# =============================================================================

def bunker(
    engine: EngineInput,
    year: int,
    d: float,
    lwl: float,
    leff: float,
    cs: float,
    ws: float,
) -> float:
    """Normal bunkerage in long tons."""
    if engine.vcruise == 0.0:
        return 0.0

    pct = engine.pct_coal / 100.0
    fuel = safe_divide(engine.range, 1.0 + 0.4 * (1.0 - pct))
    fuel = safe_divide(fuel, bunker_factor(engine.boiler, year))

    hp_cruise = hp(min(engine.vcruise, engine.vmax), d, lwl, leff, cs, ws, year)
    if hp_cruise == 0.0:
        return d * 0.005
    return safe_divide(fuel, 1.8 / hp_cruise * BUNKER_RANGE * engine.vcruise * 0.1) + d * 0.005


def engine_weight(
    engine: EngineInput,
    year: int,
    d: float,
    lwl: float,
    leff: float,
    cs: float,
    ws: float,
) -> float:
    """Machinery weight in long tons."""
    factor = d_engine_factor(engine.boiler, engine.fuel, year)
    engines = max(num_engines(engine.boiler), 1)
    pct = engine.pct_coal / 100.0
    divisor = factor / engines * (1.1 - pct / 10.0)
    early = 1.0 + (1890 - year) / 100.0 if year <= 1889 else 1.0

    hp_max = hp(engine.vmax, d, lwl, leff, cs, ws, year)
    return safe_divide(hp_max, divisor) / early


# =============================================================================
# DESCRIPTIONS
# =============================================================================

_F = FuelType
FUEL_DESCRIPTIONS: Dict[FuelType, str] = {
    _F.COAL: "Coal fired boilers",
    _F.OIL: "Oil fired boilers",
    _F.COAL | _F.OIL: "Coal and oil fired boilers",
    _F.COAL | _F.DIESEL: "Coal fired boilers plus diesel motors",
    _F.OIL | _F.DIESEL: "Oil fired boilers plus diesel motors",
    _F.COAL | _F.OIL | _F.DIESEL: "Coal and oil fired boilers plus diesel motors",
    _F.DIESEL: "Diesel internal combustion motors",
    _F.DIESEL | _F.BATTERY: "Diesel internal combustion engines plus batteries",
    _F.GASOLINE: "Gasoline internal combustion motors",
    _F.GASOLINE | _F.BATTERY: "Gasoline internal combustion motors plus batteries",
    _F.BATTERY: "Battery powered",
}

_B = BoilerType
BOILER_DESCRIPTIONS: Dict[BoilerType, str] = {
    _B.SIMPLE: "simple reciprocating steam engines",
    _B.COMPLEX: "complex reciprocating steam engines",
    _B.TURBINE: "steam turbines",
    _B.SIMPLE | _B.COMPLEX: "reciprocating steam engines",
    _B.SIMPLE | _B.TURBINE: "reciprocating cruising steam engines and steam turbines",
    _B.SIMPLE | _B.COMPLEX | _B.TURBINE: "ERROR: Too many types of steam engines",
}

_D = DriveType
DRIVE_DESCRIPTIONS: Dict[DriveType, str] = {
    _D.DIRECT: "Direct drive",
    _D.GEARED: "Geared drive",
    _D.ELECTRIC: "Electric motors",
    _D.HYDRAULIC: "Hydraulic drive",
    _D.GEARED | _D.ELECTRIC: "Electric cruising motors plus geared drives",
    _D(0): "ERROR: No drive to shaft",
}


def fuel_description(fuel: FuelType) -> str:
    return FUEL_DESCRIPTIONS.get(fuel, "ERROR: Revise fuels")


def boiler_description(boiler: BoilerType) -> str:
    return BOILER_DESCRIPTIONS.get(boiler, "ERROR: No steam engines")


def drive_description(drive: DriveType) -> str:
    return DRIVE_DESCRIPTIONS.get(drive, "ERROR: Revise drives")


def hp_type(boiler: BoilerType) -> str:
    """Indicated horsepower for reciprocating engines, shaft horsepower otherwise."""
    return "ihp" if boiler.is_reciprocating else "shp"


def description_error(description: str) -> str:
    """The message of an "ERROR: ..." description, or "" when it is not an error."""
    if description.startswith(ERROR_PREFIX):
        return description[len(ERROR_PREFIX):]
    return ""
