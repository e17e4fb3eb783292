"""
Unit tests for validators/taxonomy.py and validators/aggregator.py

Tests Diagnostic records and the ordered validation engine.
"""

import pytest

from sharpie.core.enums import Severity, Stage
from sharpie.validators import taxonomy
from sharpie.validators.aggregator import ValidationEngine
from sharpie.validators.taxonomy import Diagnostic


# =============================================================================
# DIAGNOSTIC
# =============================================================================

class TestDiagnostic:
    """Tests for Diagnostic."""

    def test_helpers(self):
        """warning() and error() set the severity."""
        w = taxonomy.warning(Stage.GUNS, "batteries[0]", "Guns outweigh the ship")
        e = taxonomy.error(Stage.HULL, "hull.cb", "Cb too low")
        assert w.severity == Severity.WARNING
        assert not w.is_error
        assert e.is_error

    def test_to_dict(self):
        """Enums are written as values."""
        d = Diagnostic(Severity.ERROR, Stage.ARMOR, "armor.main.len", "Main + End armor belts too long")
        assert d.to_dict() == {
            "severity": "error",
            "stage": "armor",
            "field": "armor.main.len",
            "message": "Main + End armor belts too long",
        }

    def test_from_dict(self):
        """from_dict reverses to_dict."""
        d = Diagnostic(Severity.WARNING, Stage.ENGINE, "engine.year", "Oil fuel not available before 1898")
        assert Diagnostic.from_dict(d.to_dict()) == d

    def test_from_dict_defaults(self):
        """Field and message may be omitted."""
        d = Diagnostic.from_dict({"severity": "warning", "stage": "hull"})
        assert d.field == ""
        assert d.message == ""

    def test_from_dict_unknown_stage(self):
        """Unknown stages are rejected."""
        with pytest.raises(ValueError):
            Diagnostic.from_dict({"severity": "warning", "stage": "rigging"})

    def test_str(self):
        """String form shows severity, stage and message."""
        d = Diagnostic(Severity.WARNING, Stage.PERFORMANCE, "performance.stability", "Design is unstable")
        assert str(d) == "WARNING [performance] Design is unstable"


# =============================================================================
# VALIDATION ENGINE
# =============================================================================

class TestValidationEngine:
    """Tests for ValidationEngine."""

    def setup_method(self):
        """Create an empty engine."""
        self.engine = ValidationEngine()

    def test_empty(self):
        """A new engine holds nothing."""
        assert len(self.engine) == 0
        assert not self.engine.has_errors
        assert self.engine.summary() == {"total": 0, "errors": 0, "warnings": 0}

    def test_emission_order(self):
        """Diagnostics keep the order they were raised in."""
        hull = self.engine.for_stage(Stage.HULL)
        guns = self.engine.for_stage(Stage.GUNS)
        guns.warning("batteries[0]", "first")
        hull.error("hull.cb", "second")
        guns.warning("batteries[1]", "third")
        assert [d.message for d in self.engine.diagnostics] == ["first", "second", "third"]

    def test_no_deduplication(self):
        """The same condition raised twice is kept twice."""
        guns = self.engine.for_stage(Stage.GUNS)
        guns.warning("batteries[0].groups[0]", "Casemate mounts should be paired")
        guns.warning("batteries[0].groups[0]", "Casemate mounts should be paired")
        assert len(self.engine) == 2

    def test_recorder_sets_stage(self):
        """Stage recorders stamp their stage."""
        diagnostic = self.engine.for_stage(Stage.ENGINE).error("engine.shafts", "No shafts")
        assert diagnostic.stage == Stage.ENGINE
        assert diagnostic.severity == Severity.ERROR

    def test_errors_and_warnings(self):
        """Errors and warnings are split by severity."""
        perf = self.engine.for_stage(Stage.PERFORMANCE)
        perf.error("performance.str_comp", "Design Failure: Hull structure insufficient")
        perf.warning("performance.stability", "Design is unstable")
        assert self.engine.has_errors
        assert len(self.engine.errors) == 1
        assert len(self.engine.warnings) == 1
        assert self.engine.summary() == {"total": 2, "errors": 1, "warnings": 1}

    def test_by_stage(self):
        """Diagnostics can be filtered by stage."""
        self.engine.for_stage(Stage.HULL).error("hull.lwl", "Hull dimensions must be greater than zero")
        armor = self.engine.for_stage(Stage.ARMOR)
        armor.error("armor.upper.len", "Upper belt too long")
        assert [d.field for d in self.engine.by_stage(Stage.ARMOR)] == ["armor.upper.len"]
        assert armor.diagnostics == self.engine.by_stage(Stage.ARMOR)

    def test_diagnostics_copy(self):
        """The diagnostics list is a copy."""
        self.engine.for_stage(Stage.HULL).warning("hull", "x")
        self.engine.diagnostics.clear()
        assert len(self.engine) == 1

    def test_to_dict(self):
        """to_dict carries the summary and every diagnostic."""
        self.engine.for_stage(Stage.FREEBOARD).warning("hull.deck.fc_len", "Forecastle too long")
        data = self.engine.to_dict()
        assert data["summary"]["warnings"] == 1
        assert data["diagnostics"][0]["stage"] == "freeboard"
