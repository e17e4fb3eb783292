"""
SHARPIE Physical Constants and Era Cutoffs

All quantities are Imperial: feet, long tons, inches of plate, knots.
"""

import math

# ==================== Physical Constants ====================

FT3_PER_TON_SEA = 35.0          # Cubic feet of sea water per long ton
POUND2TON = 2240.0              # Pounds per long ton
ARMOR_INCH = 0.0185             # Long tons per square foot per inch of plate
GRAVITY_FT_S2 = 32.174          # ft/s²
WATER_KINEMATIC_VISCOSITY = 1.1e-6
KNOTS_TO_FT_S = 1.6878099

# ==================== Era Adjustment ====================

YEAR_ADJ_START = 1890
YEAR_ADJ_END = 1950
YEAR_ADJ_RAMP = 66.666664

# ==================== Machinery Introduction Years ====================

OIL_FUEL_YEAR = 1898
DIESEL_YEAR = 1904
GASOLINE_YEAR = 1898
BATTERY_YEAR = 1898
TURBINE_YEAR = 1898
COMPLEX_RECIPROCATING_YEAR = 1885
GEARED_DRIVE_YEAR = 1911
ELECTRIC_DRIVE_YEAR = 1898

# Power per shaft before a design is flagged
RECIPROCATING_HP_PER_SHAFT = 15_000.0
TURBINE_HP_PER_SHAFT = 50_000.0

# Range divisor used by the bunkerage formula
BUNKER_RANGE = 7000.0

# ==================== Deck Layout Defaults ====================

DEFAULT_FC_LEN = 0.2
DEFAULT_FD_LEN = 0.3
DEFAULT_QD_LEN = 0.15


def year_adj(year: float) -> float:
    """
    Era adjustment for hull design sophistication.

    1.0 between 1890 and 1950 inclusive, a linear ramp below 1890 and 0.0
    after 1950.
    """
    if year > YEAR_ADJ_END:
        return 0.0
    if year < YEAR_ADJ_START:
        return 1.0 - (YEAR_ADJ_START - year) / YEAR_ADJ_RAMP
    return 1.0


def fpow(base: float, exponent: float) -> float:
    """Real power that yields 0.0 instead of a complex number or an exception."""
    if exponent == 0:
        return 1.0
    if base <= 0.0:
        return 0.0
    return base ** exponent


def fsqrt(value: float) -> float:
    """Square root clamped at zero."""
    return math.sqrt(value) if value > 0.0 else 0.0
