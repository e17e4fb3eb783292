"""
Unit tests for weapons/ordnance.py and weapons/layout.py

Tests torpedo, mine and ASW weights, torpedo space, and where gun groups
sit along the hull.
"""

import math

import pytest

from sharpie.core.enums import (
    ASWType,
    GunDistribution,
    GunLayout,
    MineType,
    TorpedoType,
)
from sharpie.design.inputs import ASW, Mines, Torpedoes
from sharpie.hull.results import DerivedFreeboard
from sharpie.tables.lookup import DEFAULT_TABLES
from sharpie.weapons.layout import EMPTY_POSITION, mount_phrase, resolve_distribution
from sharpie.weapons.ordnance import (
    asw_weight,
    mine_weight,
    torpedo_deck_space,
    torpedo_hull_space,
    torpedo_weight,
)


def _freeboard(**overrides) -> DerivedFreeboard:
    """Four equal segments stepping down toward the stern."""
    values = dict(
        fc_len=0.25, fd_len=0.25, ad_len=0.25, qd_len=0.25,
        fc_fwd=26.0, fd_aft=18.0, ad_fwd=17.0,
        fc=24.0, fd=20.0, ad=16.0, qd=12.0,
        freeboard=18.0, freeboard_dist=18.0, b=60.0,
        is_wet_fwd=False, year_adj=1.0, deck_profile=(),
    )
    values.update(overrides)
    return DerivedFreeboard(**values)


def _position(distribution: GunDistribution, n: int, broadside: bool = False, **fb):
    return resolve_distribution(DEFAULT_TABLES.distribution(distribution), n, _freeboard(**fb), broadside)


# =============================================================================
# TORPEDOES
# =============================================================================

class TestTorpedoWeight:
    """Tests for torpedo_weight."""

    def test_early_torpedoes(self):
        """1900 deck tubes: body plus tube weight."""
        torp = Torpedoes(year=1900, num=4, mounts=2, diam=18.0, length=21.0)
        expected = math.pi * 18.0 ** 2 * 21.0 / (32.0 * 937.0) + 0.004 * 10 * 4
        assert abs(torpedo_weight(torp) - expected) < 0.0001
        assert abs(torpedo_weight(torp) - 0.8729) < 0.001

    def test_late_torpedoes_body_guarded(self):
        """After 1931 the body term is dropped."""
        torp = Torpedoes(year=1940, num=4, mounts=2, diam=21.0, length=22.0)
        assert abs(torpedo_weight(torp) - 0.8) < 0.0001

    def test_reload_factor(self):
        """Fixed tubes carry a quarter weight factor."""
        torp = Torpedoes(year=1940, num=4, mounts=2, diam=21.0, length=22.0, kind=TorpedoType.FIXED_TUBES)
        assert abs(torpedo_weight(torp) - 0.2) < 0.0001

    def test_no_torpedoes(self):
        """An empty mounting weighs nothing."""
        assert torpedo_weight(Torpedoes(year=1890)) == 0.0


class TestTorpedoSpace:
    """Tests for torpedo hull and deck space."""

    def test_deck_side_tubes(self):
        """Training circle plus the tube footprint."""
        torp = Torpedoes(year=1900, num=2, mounts=1, diam=18.0, length=21.0)
        assert abs(torpedo_deck_space(torp, 20.0) - 392.73) < 0.01

    def test_centre_tubes(self):
        """Centreline tubes sweep the beam."""
        torp = Torpedoes(year=1900, num=2, mounts=1, diam=18.0, length=21.0, kind=TorpedoType.CENTRE_TUBES)
        assert abs(torpedo_deck_space(torp, 20.0) - 425.79) < 0.01

    def test_fixed_tubes(self):
        """Fixed tubes take their own footprint."""
        torp = Torpedoes(year=1900, num=4, mounts=4, diam=18.0, length=21.0, kind=TorpedoType.FIXED_TUBES)
        assert abs(torpedo_deck_space(torp, 20.0) - 126.0) < 0.0001

    def test_deck_reloads(self):
        """Deck reloads take a padded footprint."""
        torp = Torpedoes(year=1900, num=4, mounts=1, diam=18.0, length=21.0, kind=TorpedoType.DECK_RELOADS)
        assert abs(torpedo_deck_space(torp, 20.0) - 252.0) < 0.0001

    def test_no_mounts(self):
        """Trainable tubes without mounts take no deck space."""
        torp = Torpedoes(year=1900, num=4, mounts=0, diam=18.0, length=21.0)
        assert torpedo_deck_space(torp, 20.0) == 0.0
        centre = Torpedoes(year=1900, num=4, mounts=0, diam=18.0, length=21.0, kind=TorpedoType.CENTRE_TUBES)
        assert torpedo_deck_space(centre, 20.0) == 0.0

    def test_reloads_without_mounts(self):
        """Deck reloads take deck space without any mounts."""
        torp = Torpedoes(year=1940, num=8, mounts=0, diam=21.0, length=22.0, kind=TorpedoType.DECK_RELOADS)
        assert abs(torpedo_deck_space(torp, 30.0) - 594.0) < 0.0001

    def test_fixed_tubes_without_mounts(self):
        """Fixed tubes are sized by count alone."""
        torp = Torpedoes(year=1900, num=4, mounts=0, diam=18.0, length=21.0, kind=TorpedoType.FIXED_TUBES)
        assert abs(torpedo_deck_space(torp, 20.0) - 126.0) < 0.0001

    def test_hull_tubes_no_deck_space(self):
        """Submerged tubes take no deck space."""
        torp = Torpedoes(year=1900, num=4, mounts=2, diam=18.0, length=17.0, kind=TorpedoType.SUBMERGED_SIDE_TUBES)
        assert torpedo_deck_space(torp, 20.0) == 0.0

    def test_submerged_hull_space(self):
        """Submerged tubes take hull volume."""
        torp = Torpedoes(year=1900, num=4, mounts=2, diam=18.0, length=17.0, kind=TorpedoType.SUBMERGED_SIDE_TUBES)
        assert abs(torpedo_hull_space(torp) - 2892.65625) < 0.0001

    def test_submerged_reloads_hull_space(self):
        """Submerged reloads take less volume than tubes."""
        torp = Torpedoes(year=1900, num=4, mounts=2, diam=18.0, length=17.0, kind=TorpedoType.SUBMERGED_RELOADS)
        assert abs(torpedo_hull_space(torp) - 516.375) < 0.0001

    def test_deck_tubes_no_hull_space(self):
        """Deck tubes take no hull volume."""
        assert torpedo_hull_space(Torpedoes(year=1900, num=4, mounts=2, diam=18.0, length=17.0)) == 0.0


class TestMinesAndASW:
    """Tests for mine and ASW weights."""

    def test_mines(self):
        """Stern rails carry a quarter factor."""
        mines = Mines(year=1915, num=200, wgt=10.0, kind=MineType.STERN_RAILS)
        assert abs(mine_weight(mines) - 200 * 10.0 / 2240.0 * 0.25) < 1e-9

    def test_mines_with_reloads(self):
        """Reloads weigh the same as mines carried."""
        mines = Mines(year=1915, num=10, reload=10, wgt=2240.0, kind=MineType.SIDE_TUBES)
        assert abs(mine_weight(mines) - 20.0) < 1e-9

    def test_asw(self):
        """Throwers carry half weight."""
        asw = ASW(year=1940, num=4, reload=8, wgt=300.0, kind=ASWType.THROWERS)
        assert abs(asw_weight(asw) - 12 * 300.0 / 2240.0 * 0.5) < 1e-9

    def test_squid_heavy(self):
        """Squid mortars carry a heavy factor."""
        asw = ASW(year=1944, num=1, wgt=224.0, kind=ASWType.SQUID_MORTARS)
        assert abs(asw_weight(asw) - 1.0) < 1e-9


# =============================================================================
# GUN LAYOUT
# =============================================================================

class TestResolveDistribution:
    """Tests for resolve_distribution."""

    def test_no_mounts(self):
        """An empty group has no position."""
        assert _position(GunDistribution.CENTRE_EVEN, 0) == EMPTY_POSITION

    def test_even_spread(self):
        """Even placement splits by segment length."""
        position = _position(GunDistribution.CENTRE_EVEN, 4)
        assert abs(position.mounts_fwd - 2.0) < 1e-9
        assert abs(position.mounts_aft - 2.0) < 1e-9
        assert abs(position.fwd_free - 22.0) < 1e-9
        assert abs(position.aft_free - 14.0) < 1e-9
        assert abs(position.free - 18.0) < 1e-9

    def test_single_even_tie_goes_forward(self):
        """A single mount with equal halves goes forward."""
        position = _position(GunDistribution.CENTRE_EVEN, 1)
        assert position.mounts_fwd == 1.0
        assert position.mounts_aft == 0.0
        assert abs(position.free - 22.0) < 1e-9

    def test_single_ends_tie_goes_forward(self):
        """A single end mount goes to the forecastle on a tie."""
        position = _position(GunDistribution.CENTRE_ENDS, 1)
        assert position.mounts_fwd == 1.0
        assert position.free == 24.0

    def test_single_ends_longer_quarterdeck(self):
        """A single end mount goes to the longer end."""
        position = _position(GunDistribution.CENTRE_ENDS, 1, fc_len=0.2, qd_len=0.3)
        assert position.mounts_fwd == 0.0
        assert position.free == 12.0

    def test_single_amidships(self):
        """A single amidships mount goes forward on a tie."""
        position = _position(GunDistribution.CENTRE_AMIDSHIPS, 1)
        assert position.mounts_fwd == 1.0
        assert position.free == 18.0

    def test_amidships_pair(self):
        """Amidships pairs split between the midbreak ends."""
        position = _position(GunDistribution.CENTRE_AMIDSHIPS, 2)
        assert position.mounts_fwd == 1.0
        assert abs(position.free - 17.5) < 1e-9

    def test_forward_bias(self):
        """Majority forward puts n // 2 + 1 forward."""
        position = _position(GunDistribution.CENTRE_FWD_BIAS, 3)
        assert position.mounts_fwd == 2.0
        assert position.mounts_aft == 1.0
        assert abs(position.free - 56.0 / 3.0) < 1e-9

    def test_aft_bias(self):
        """Majority aft puts n // 2 + 1 aft."""
        position = _position(GunDistribution.CENTRE_AFT_BIAS, 3)
        assert position.mounts_fwd == 1.0
        assert position.mounts_aft == 2.0

    def test_single_bias_mount(self):
        """A single forward-bias mount is forward."""
        assert _position(GunDistribution.CENTRE_FWD_BIAS, 1).mounts_fwd == 1.0

    def test_forward_deck(self):
        """Forward deck mounts use the forward deck freeboard."""
        position = _position(GunDistribution.CENTRE_FORWARD, 2)
        assert position.mounts_fwd == 2.0
        assert position.free == 20.0

    def test_aft_deck(self):
        """Aft deck mounts use the aft deck freeboard."""
        position = _position(GunDistribution.CENTRE_AFT, 2)
        assert position.mounts_fwd == 0.0
        assert position.free == 16.0

    def test_midbreak_positions(self):
        """Mounts at the midbreak use the segment end heights."""
        assert _position(GunDistribution.CENTRE_FD_AFT, 2).free == 18.0
        assert _position(GunDistribution.CENTRE_AD_FWD, 2).free == 17.0

    def test_side_mounts_capped_for_broadside(self):
        """Broadside mounts on the sides lose 6 ft of freeboard."""
        position = _position(GunDistribution.SIDE_EVEN, 4, broadside=True)
        assert abs(position.free - 12.0) < 1e-9

    def test_side_mounts_capped(self):
        """Side mounts never sit above the average freeboard."""
        position = _position(GunDistribution.SIDE_FORWARD, 2)
        assert position.free == 18.0

    def test_centre_mounts_uncapped(self):
        """Centreline mounts are not capped."""
        assert _position(GunDistribution.CENTRE_FORWARD, 2).free == 20.0


class TestMountPhrase:
    """Tests for mount_phrase."""

    def test_single_mount(self):
        """One mount is singular."""
        assert mount_phrase(1, DEFAULT_TABLES.layout(GunLayout.TWIN)) == "1 twin mount"

    def test_plural(self):
        """Several mounts are plural."""
        assert mount_phrase(4, DEFAULT_TABLES.layout(GunLayout.SINGLE)) == "4 single mounts"
