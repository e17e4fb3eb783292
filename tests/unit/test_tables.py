"""
Unit tests for tables/lookup.py and errors/taxonomy.py

Tests the enum-keyed lookup tables and the exceptions raised for keys
outside a table's domain.
"""

import pytest

from sharpie.core.enums import (
    BulkheadType,
    GunDistribution,
    GunLayout,
    GunType,
    MountType,
    Placement,
)
from sharpie.errors import DesignFileError, InternalError, SharpieError, UnknownKeyError
from sharpie.tables.lookup import DEFAULT_TABLES, LookupTables, TableKind


class TestLookupTables:
    """Tests for LookupTables."""

    def setup_method(self):
        """Use the default tables."""
        self.tables = DEFAULT_TABLES

    def test_every_key_present(self):
        """Each table covers its whole enum."""
        assert len(self.tables.table(TableKind.GUN_TYPE)) == len(GunType)
        assert len(self.tables.table(TableKind.MOUNT_TYPE)) == len(MountType)
        assert len(self.tables.table(TableKind.GUN_LAYOUT)) == len(GunLayout)
        assert len(self.tables.table(TableKind.GUN_DISTRIBUTION)) == len(GunDistribution)
        assert len(self.tables.table(TableKind.BULKHEAD_TYPE)) == len(BulkheadType)

    def test_gun_record(self):
        """Gun records carry their constants."""
        record = self.tables.gun(GunType.BREECH_LOADING)
        assert record.description == "breech loading"
        assert record.mount_factor == 1.0

    def test_mount_accepts(self):
        """Mounts list the guns they can carry."""
        turret = self.tables.mount(MountType.TURRET)
        assert turret.accepts(GunType.BREECH_LOADING)
        assert not turret.accepts(GunType.MUZZLE_LOADING)

    def test_layout_record(self):
        """Twin mounts carry two guns with a weight saving."""
        record = self.tables.layout(GunLayout.TWIN)
        assert record.guns == 2
        assert record.wgt_adj < 1.0

    def test_distribution_record(self):
        """Distribution records split side and placement."""
        record = self.tables.distribution(GunDistribution.SIDE_ENDS)
        assert record.side is True
        assert record.placement == Placement.ENDS
        assert record.position == "on sides, ends"

    def test_centre_distribution_position(self):
        """Centreline distributions say so."""
        record = self.tables.distribution(GunDistribution.CENTRE_AMIDSHIPS)
        assert record.side is False
        assert record.position == "on centreline, amidships"

    def test_bulkhead_record(self):
        """Bulkhead records carry the protection factors."""
        record = self.tables.bulkhead(BulkheadType.ADDITIONAL)
        assert record.torpedo_factor > self.tables.bulkhead(BulkheadType.STRENGTHENED).torpedo_factor

    def test_tables_read_only(self):
        """Tables cannot be modified."""
        with pytest.raises(TypeError):
            self.tables.table(TableKind.GUN_TYPE)[GunType.BREECH_LOADING] = None


class TestUnknownKeys:
    """Tests for keys outside a table's domain."""

    def test_wrong_key_type(self):
        """A key of the wrong enum raises UnknownKeyError."""
        with pytest.raises(UnknownKeyError):
            DEFAULT_TABLES.get(TableKind.GUN_TYPE, MountType.TURRET)

    def test_string_key(self):
        """Plain strings are not keys."""
        with pytest.raises(UnknownKeyError):
            DEFAULT_TABLES.get(TableKind.MOUNT_TYPE, "turret")

    def test_unknown_table(self):
        """An unknown table kind raises UnknownKeyError."""
        with pytest.raises(UnknownKeyError):
            DEFAULT_TABLES.get("guns", GunType.BREECH_LOADING)

    def test_missing_entry(self):
        """A table built without an entry raises for that entry."""
        tables = LookupTables({TableKind.GUN_TYPE: {}})
        with pytest.raises(UnknownKeyError) as exc_info:
            tables.gun(GunType.BREECH_LOADING)
        assert exc_info.value.kind == TableKind.GUN_TYPE
        assert exc_info.value.key == GunType.BREECH_LOADING

    def test_unknown_key_is_internal_error(self):
        """UnknownKeyError is an InternalError and a KeyError."""
        error = UnknownKeyError(TableKind.GUN_TYPE, "x")
        assert isinstance(error, InternalError)
        assert isinstance(error, KeyError)
        assert isinstance(error, SharpieError)


class TestErrors:
    """Tests for the exception taxonomy."""

    def test_str_includes_code(self):
        """Exceptions print their code."""
        error = UnknownKeyError(TableKind.GUN_TYPE, "x")
        assert str(error).startswith("[SHARPIE_101]")

    def test_to_dict(self):
        """Exceptions serialize for JSON output."""
        data = DesignFileError("ship.json", "file not found").to_dict()
        assert data["code"] == "SHARPIE_200"
        assert data["type"] == "DesignFileError"
        assert data["message"] == "ship.json: file not found"
        assert data["details"] == {"path": "ship.json"}

    def test_default_message(self):
        """Without a message the class docstring is used."""
        assert InternalError().message.startswith("Internal calculation fault")
