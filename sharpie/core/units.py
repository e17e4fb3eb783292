"""
SHARPIE Display Unit Conversion

The engine works in Imperial units. Conversions here are applied by the
report layer only.
"""

from enum import Enum

from .enums import Units

INCH_TO_MM = 25.4
FEET_TO_METERS = 0.3048
SQFEET_TO_SQMETERS = 0.092903
POUND_TO_KG = 0.45359236
HP_TO_KW = 0.746
LONG_TON_TO_TONNE = 1.0160469


class UnitType(Enum):
    """Kinds of quantity that have a metric display form."""
    LENGTH_SMALL = "length_small"      # inches -> mm
    LENGTH_LONG = "length_long"        # feet -> m
    AREA = "area"                      # ft² -> m²
    WEIGHT = "weight"                  # lb -> kg
    DISPLACEMENT = "displacement"      # long tons -> tonnes
    POWER = "power"                    # hp -> kW
    WEIGHT_PER_AREA = "weight_per_area"


_FACTORS = {
    UnitType.LENGTH_SMALL: INCH_TO_MM,
    UnitType.LENGTH_LONG: FEET_TO_METERS,
    UnitType.AREA: SQFEET_TO_SQMETERS,
    UnitType.WEIGHT: POUND_TO_KG,
    UnitType.DISPLACEMENT: LONG_TON_TO_TONNE,
    UnitType.POWER: HP_TO_KW,
    UnitType.WEIGHT_PER_AREA: POUND_TO_KG / SQFEET_TO_SQMETERS,
}

_LABELS = {
    UnitType.LENGTH_SMALL: ("in", "mm"),
    UnitType.LENGTH_LONG: ("ft", "m"),
    UnitType.AREA: ("sq ft", "m²"),
    UnitType.WEIGHT: ("lb", "kg"),
    UnitType.DISPLACEMENT: ("t", "t"),
    UnitType.POWER: ("hp", "kW"),
    UnitType.WEIGHT_PER_AREA: ("lb/sq ft", "kg/m²"),
}


def to_metric(value: float, unit_type: UnitType) -> float:
    """Convert an Imperial value to its metric display value."""
    return value * _FACTORS[unit_type]


def convert(value: float, unit_type: UnitType, units: Units) -> float:
    """Value in the requested display units."""
    if units == Units.METRIC:
        return to_metric(value, unit_type)
    return value


def label(unit_type: UnitType, units: Units) -> str:
    """Unit label for the requested display units."""
    imperial, metric = _LABELS[unit_type]
    return metric if units == Units.METRIC else imperial
