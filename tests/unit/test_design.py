"""
Unit tests for design/inputs.py, design/estimators.py and design/io.py

Tests the design snapshot, the freeboard pre-fill estimators and the
native JSON design file.
"""

import json
from dataclasses import FrozenInstanceError, replace

import pytest

from sharpie.core.enums import BoilerType, FuelType, GunLayout, MountPosition
from sharpie.design.estimators import BREAK, FLUSH, break_heights, estimate_freeboard, flush_heights
from sharpie.design.inputs import (
    Battery,
    DeckLayout,
    DesignInput,
    EngineInput,
    GunGroup,
    HullInput,
    MiscWeights,
)
from sharpie.design.io import design_from_dict, design_to_dict, load_design, save_design
from sharpie.errors import DesignFileError
from sharpie.pipeline.engine import compute


# =============================================================================
# DESIGN INPUT
# =============================================================================

class TestDeckLayout:
    """Tests for DeckLayout."""

    def test_default_fractions(self):
        """Unset fractions use the default layout."""
        deck = DeckLayout()
        assert deck.fc == 0.2
        assert deck.fd == 0.3
        assert deck.qd == 0.15
        assert abs(deck.ad - 0.35) < 1e-12

    def test_after_deck_is_remainder(self):
        """The after deck takes what the other segments leave."""
        deck = DeckLayout(fc_len=0.25, fd_len=0.25, qd_len=0.1)
        assert abs(deck.ad - 0.4) < 1e-12

    def test_unset_height_is_zero(self):
        """Unset heights read as 0.0."""
        deck = DeckLayout(fc_fwd=20.0)
        assert deck.height("fc_fwd") == 20.0
        assert deck.height("qd_aft") == 0.0

    def test_missing_heights(self):
        """Missing heights are listed in order."""
        deck = DeckLayout(fc_fwd=1.0, fc_aft=1.0, fd_fwd=1.0, fd_aft=1.0, ad_fwd=1.0, ad_aft=1.0)
        assert deck.missing_heights == ("qd_fwd", "qd_aft")


class TestDesignInput:
    """Tests for DesignInput and its parts."""

    def test_frozen(self):
        """Designs cannot be modified in place."""
        design = DesignInput()
        with pytest.raises(FrozenInstanceError):
            design.year = 1920

    def test_effective_beam(self):
        """Beam over bulges falls back to the waterline beam."""
        assert HullInput(b=50.0).bb_eff == 50.0
        assert HullInput(b=50.0, bb=56.0).bb_eff == 56.0

    def test_battery_year_defaults_to_design(self):
        """A battery without a year uses the year laid down."""
        design = DesignInput(year=1910)
        assert design.battery_year(Battery()) == 1910
        assert design.battery_year(Battery(year=1905)) == 1905

    def test_engine_year_defaults_to_design(self):
        """An engine without a year uses the year laid down."""
        assert DesignInput(year=1910).engine_year == 1910
        assert DesignInput(year=1910, engine=EngineInput(year=1908)).engine_year == 1908

    def test_group_mounts(self):
        """Group mounts sum every position."""
        group = GunGroup(layout=GunLayout.TWIN, superstructure=1, above=1, deck=2, below=1, sub=1)
        assert group.num_mounts == 6
        assert group.count(MountPosition.DECK) == 2

    def test_battery_mounts(self):
        """Battery mounts sum both groups."""
        battery = Battery(groups=(GunGroup(deck=2), GunGroup(above=3)))
        assert battery.num_mounts == 5

    def test_misc_total(self):
        """Miscellaneous weights add up."""
        assert MiscWeights(vital=1.0, hull=2.0, on=3.0, above=4.0, void=5.0).total == 15.0


# =============================================================================
# FREEBOARD ESTIMATORS
# =============================================================================

class TestEstimators:
    """Tests for the freeboard pre-fill."""

    def test_flush_heights(self):
        """Flush estimate for a 400 ft hull in 1900."""
        heights = flush_heights(400.0, 1900)
        assert abs(heights["fc_fwd"] - 22.0) < 0.0001
        assert abs(heights["fd_fwd"] - 18.0) < 0.0001
        assert abs(heights["qd_aft"] - 14.0) < 0.0001

    def test_break_heights(self):
        """Break estimate drops the after half of the ship."""
        heights = break_heights(400.0, 1900)
        assert abs(heights["fc_fwd"] - 22.0) < 0.0001
        assert abs(heights["fd_aft"] - 18.0) < 0.0001
        assert abs(heights["ad_fwd"] - 9.0) < 0.0001

    def test_late_bow_lower(self):
        """After 1950 the bow estimate loses its era bonus."""
        assert abs(flush_heights(400.0, 1951)["fc_fwd"] - 12.0) < 0.0001

    def test_fills_only_missing(self):
        """Entered heights are kept."""
        design = DesignInput(hull=HullInput(lwl=400.0, deck=DeckLayout(fc_fwd=30.0)))
        estimated = estimate_freeboard(design, FLUSH)
        assert estimated.hull.deck.fc_fwd == 30.0
        assert abs(estimated.hull.deck.fd_fwd - 18.0) < 0.0001
        assert estimated.hull.deck.missing_heights == ()

    def test_original_unchanged(self):
        """The input design is not modified."""
        design = DesignInput(hull=HullInput(lwl=400.0))
        estimate_freeboard(design, BREAK)
        assert design.hull.deck.fc_fwd is None

    def test_complete_design_returned_as_is(self, battleship):
        """A design with every height set comes back unchanged."""
        assert estimate_freeboard(battleship, FLUSH) is battleship

    def test_unknown_method(self):
        """Unknown methods raise ValueError."""
        with pytest.raises(ValueError, match="Unknown freeboard estimate"):
            estimate_freeboard(DesignInput(), "sloped")


# =============================================================================
# DESIGN FILES
# =============================================================================

class TestDesignFiles:
    """Tests for the native JSON design file."""

    def test_roundtrip(self, battleship, tmp_path):
        """Saving then loading gives the same design."""
        path = save_design(battleship, tmp_path / "ship.json")
        assert load_design(path) == battleship

    def test_reload_computes_identically(self, destroyer, tmp_path):
        """A saved and reloaded design gives the same result and diagnostics."""
        result, diagnostics = compute(destroyer)
        reloaded, reloaded_diags = compute(load_design(save_design(destroyer, tmp_path / "dd.json")))
        assert reloaded.to_dict() == result.to_dict()
        assert reloaded_diags == diagnostics

    def test_roundtrip_destroyer(self, destroyer):
        """Dictionary conversion keeps flags and enums."""
        assert design_from_dict(design_to_dict(destroyer)) == destroyer

    def test_flags_written_as_names(self, battleship):
        """Flag sets are written as lists of names."""
        data = design_to_dict(battleship)
        assert data["engine"]["fuel"] == ["coal", "oil"]
        assert data["engine"]["boiler"] == ["complex"]
        assert data["format_version"] == 1

    def test_minimal_file(self):
        """Only the year and main dimensions are required."""
        design = design_from_dict({"year": 1910, "hull": {"lwl": 400, "b": 60, "t": 20}})
        assert design.hull.lwl == 400.0
        assert design.engine.fuel == FuelType.COAL
        assert design.engine.boiler == BoilerType.SIMPLE
        assert len(design.batteries) == 0

    def test_single_group_padded(self):
        """A battery with one group gets an empty second group."""
        design = design_from_dict({
            "year": 1910,
            "hull": {"lwl": 400, "b": 60, "t": 20},
            "batteries": [{"diameter": 6, "groups": [{"deck": 4}]}],
        })
        assert design.batteries[0].groups[0].deck == 4
        assert design.batteries[0].groups[1].num_mounts == 0

    def test_missing_file(self, tmp_path):
        """A missing file raises DesignFileError."""
        with pytest.raises(DesignFileError, match="file not found"):
            load_design(tmp_path / "missing.json")

    def test_invalid_encoding(self, tmp_path):
        """Bytes that are not UTF-8 raise DesignFileError."""
        path = tmp_path / "bad.json"
        path.write_bytes(b"\xff\xfe{\"year\": 1906}")
        with pytest.raises(DesignFileError, match="invalid encoding"):
            load_design(path)

    def test_invalid_json(self, tmp_path):
        """Malformed JSON raises DesignFileError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(DesignFileError, match="invalid JSON"):
            load_design(path)

    def test_not_an_object(self, tmp_path):
        """A JSON list is not a design."""
        path = tmp_path / "list.json"
        path.write_text("[]")
        with pytest.raises(DesignFileError, match="JSON object"):
            load_design(path)

    def test_unknown_field(self, tmp_path):
        """Unknown fields fail validation."""
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({"year": 1910, "hull": {"lwl": 1, "b": 1, "t": 1}, "sails": 3}))
        with pytest.raises(DesignFileError, match="invalid design"):
            load_design(path)

    def test_unknown_enum_value(self, tmp_path):
        """Unknown enum values fail validation."""
        path = tmp_path / "enum.json"
        path.write_text(json.dumps({
            "year": 1910,
            "hull": {"lwl": 1, "b": 1, "t": 1, "stern_type": "square"},
        }))
        with pytest.raises(DesignFileError):
            load_design(path)

    def test_unknown_fuel_name(self, tmp_path):
        """Unknown flag names fail validation."""
        path = tmp_path / "fuel.json"
        path.write_text(json.dumps({
            "year": 1910,
            "hull": {"lwl": 1, "b": 1, "t": 1},
            "engine": {"fuel": ["peat"]},
        }))
        with pytest.raises(DesignFileError):
            load_design(path)

    def test_negative_thickness_rejected(self, tmp_path):
        """Armour thickness cannot be negative."""
        path = tmp_path / "armour.json"
        path.write_text(json.dumps({
            "year": 1910,
            "hull": {"lwl": 1, "b": 1, "t": 1},
            "armor": {"main": {"thick": -1}},
        }))
        with pytest.raises(DesignFileError):
            load_design(path)

    def test_error_carries_path(self, tmp_path):
        """The error names the file."""
        path = tmp_path / "missing.json"
        with pytest.raises(DesignFileError) as exc_info:
            load_design(path)
        assert exc_info.value.path == str(path)

    def test_modified_design_saves(self, battleship, tmp_path):
        """Derived designs save like any other."""
        design = replace(battleship, name="Renamed")
        loaded = load_design(save_design(design, tmp_path / "sub" / "renamed.json"))
        assert loaded.name == "Renamed"
