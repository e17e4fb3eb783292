"""
Unit tests for core/constants.py, core/enums.py, core/units.py and core/utils.py

Tests the era adjustment, guarded arithmetic, flag helpers and display
unit conversion.
"""

import math
from dataclasses import dataclass

import pytest

from sharpie.core.constants import fpow, fsqrt, year_adj
from sharpie.core.enums import (
    BoilerType,
    DeckType,
    FuelType,
    GunDistribution,
    Units,
    flag_from_names,
    flag_members,
    flag_names,
)
from sharpie.core.units import UnitType, convert, label, to_metric
from sharpie.core.utils import clamp, positive_divide, record_kwargs, record_to_dict, safe_divide


# =============================================================================
# ERA ADJUSTMENT
# =============================================================================

class TestYearAdj:
    """Tests for year_adj."""

    def test_modern_era_is_one(self):
        """Years 1890 to 1950 inclusive give 1.0."""
        assert year_adj(1890) == 1.0
        assert year_adj(1920) == 1.0
        assert year_adj(1950) == 1.0

    def test_after_1950_is_zero(self):
        """Years after 1950 give 0.0."""
        assert year_adj(1951) == 0.0

    def test_ramp_before_1890(self):
        """Earlier years ramp down linearly."""
        assert abs(year_adj(1860) - (1.0 - 30.0 / 66.666664)) < 1e-9
        assert year_adj(1889) < 1.0

    def test_reference_years(self):
        """1800 ramps to -0.35 and 2000 is past the cutoff."""
        assert abs(year_adj(1800) - (-0.35)) < 1e-6
        assert year_adj(2000) == 0.0


# =============================================================================
# GUARDED ARITHMETIC
# =============================================================================

class TestGuardedArithmetic:
    """Tests for fpow, fsqrt, safe_divide, positive_divide and clamp."""

    def test_fpow_negative_base(self):
        """A negative base yields 0 instead of a complex number."""
        assert fpow(-8.0, 1.0 / 3.0) == 0.0

    def test_fpow_zero_exponent(self):
        """Anything to the power 0 is 1."""
        assert fpow(0.0, 0.0) == 1.0
        assert fpow(-2.0, 0) == 1.0

    def test_fpow_positive(self):
        """Positive bases behave like **."""
        assert abs(fpow(4.0, 0.5) - 2.0) < 1e-12

    def test_fsqrt(self):
        """Square root clamped at zero."""
        assert fsqrt(9.0) == 3.0
        assert fsqrt(-4.0) == 0.0
        assert fsqrt(0.0) == 0.0

    def test_safe_divide(self):
        """Division by zero returns the default."""
        assert safe_divide(6.0, 3.0) == 2.0
        assert safe_divide(1.0, 0.0) == 0.0
        assert safe_divide(1.0, 0.0, default=-1.0) == -1.0

    def test_safe_divide_negative_denominator(self):
        """Negative denominators divide normally."""
        assert safe_divide(6.0, -3.0) == -2.0

    def test_positive_divide(self):
        """Non-positive denominators return the default."""
        assert positive_divide(6.0, 3.0) == 2.0
        assert positive_divide(6.0, -3.0) == 0.0
        assert positive_divide(6.0, 0.0) == 0.0

    def test_clamp(self):
        """Values are held inside the bounds."""
        assert clamp(5.0, 0.0, 1.0) == 1.0
        assert clamp(-5.0, 0.0, 1.0) == 0.0
        assert clamp(0.5, 0.0, 1.0) == 0.5


# =============================================================================
# ENUMS
# =============================================================================

class TestFlags:
    """Tests for the flag helpers."""

    def test_flag_from_names(self):
        """Names combine into one flag value."""
        assert flag_from_names(FuelType, ["coal", "oil"]) == FuelType.COAL | FuelType.OIL

    def test_flag_from_names_empty(self):
        """No names gives the empty flag."""
        assert flag_from_names(BoilerType, []) == BoilerType(0)

    def test_flag_from_unknown_name(self):
        """Unknown names raise KeyError."""
        with pytest.raises(KeyError):
            flag_from_names(FuelType, ["peat"])

    def test_flag_names_in_declaration_order(self):
        """Names come back in declaration order."""
        assert flag_names(FuelType.OIL | FuelType.COAL) == ["coal", "oil"]
        assert flag_members(BoilerType.TURBINE | BoilerType.SIMPLE) == [
            BoilerType.SIMPLE, BoilerType.TURBINE,
        ]

    def test_is_steam(self):
        """Coal and oil are steam fuels."""
        assert FuelType.COAL.is_steam
        assert (FuelType.OIL | FuelType.DIESEL).is_steam
        assert not FuelType.DIESEL.is_steam

    def test_boiler_kinds(self):
        """Reciprocating and turbine membership."""
        assert BoilerType.COMPLEX.is_reciprocating
        assert not BoilerType.TURBINE.is_reciprocating
        assert (BoilerType.SIMPLE | BoilerType.TURBINE).is_turbine


class TestEnums:
    """Tests for the closed enumerations."""

    def test_eighteen_distributions(self):
        """Every placement appears on the centreline and on the sides."""
        assert len(GunDistribution) == 18

    def test_box_decks(self):
        """Three deck kinds are boxes."""
        boxes = [k for k in DeckType if k.is_box]
        assert len(boxes) == 3
        assert not DeckType.MULTIPLE_ARMORED.is_box

    def test_deck_description(self):
        """Deck kinds carry a report description."""
        assert DeckType.BOX_OVER_BOTH.description == "Box over machinery & magazines"


# =============================================================================
# DISPLAY UNITS
# =============================================================================

class TestUnits:
    """Tests for display unit conversion."""

    def test_feet_to_metres(self):
        """1 ft = 0.3048 m."""
        assert abs(to_metric(1.0, UnitType.LENGTH_LONG) - 0.3048) < 0.0001

    def test_inches_to_mm(self):
        """1 in = 25.4 mm."""
        assert abs(to_metric(1.0, UnitType.LENGTH_SMALL) - 25.4) < 0.0001

    def test_long_tons_to_tonnes(self):
        """1 long ton = 1.016 tonnes."""
        assert abs(to_metric(1.0, UnitType.DISPLACEMENT) - 1.0160469) < 0.0001

    def test_imperial_unchanged(self):
        """Imperial display leaves values alone."""
        assert convert(12.5, UnitType.POWER, Units.IMPERIAL) == 12.5

    def test_metric_converted(self):
        """Metric display converts."""
        assert abs(convert(1000.0, UnitType.POWER, Units.METRIC) - 746.0) < 0.001

    def test_labels(self):
        """Labels follow the display units."""
        assert label(UnitType.LENGTH_LONG, Units.IMPERIAL) == "ft"
        assert label(UnitType.LENGTH_LONG, Units.METRIC) == "m"
        assert label(UnitType.POWER, Units.METRIC) == "kW"


# =============================================================================
# RECORD SERIALIZATION
# =============================================================================

@dataclass(frozen=True)
class _Record:
    value: float
    kind: Units
    flags: tuple
    ok: bool


class TestRecordSerialization:
    """Tests for record_to_dict and record_kwargs."""

    def test_record_to_dict(self):
        """Floats are rounded, enums become values, tuples become lists."""
        data = record_to_dict(_Record(1.234567, Units.METRIC, (1.0, 2.0), True))
        assert data == {"value": 1.2346, "kind": "metric", "flags": [1.0, 2.0], "ok": True}

    def test_infinity_survives(self):
        """Infinite values are kept."""
        data = record_to_dict(_Record(math.inf, Units.METRIC, (), False))
        assert data["value"] == math.inf

    def test_record_kwargs(self):
        """Unknown keys are dropped and lists become tuples."""
        kwargs = record_kwargs(_Record, {"value": 1.0, "flags": [1, 2], "extra": 5})
        assert kwargs == {"value": 1.0, "flags": (1, 2)}
