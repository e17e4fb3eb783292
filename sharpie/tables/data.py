"""
SHARPIE Default Table Data

Constant records for every table key. Built once at import and wrapped in
read-only mappings by sharpie.tables.lookup.
"""

from sharpie.core.enums import (
    BulkheadType,
    GunDistribution,
    GunLayout,
    GunType,
    MountType,
    Placement,
)
from .records import (
    BulkheadRecord,
    GunDistributionRecord,
    GunLayoutRecord,
    GunTypeRecord,
    MountTypeRecord,
)

ML = GunType.MUZZLE_LOADING
BL = GunType.BREECH_LOADING
QF = GunType.QUICK_FIRING
AA = GunType.ANTI_AIR
DP = GunType.DUAL_PURPOSE
RF = GunType.RAPID_FIRE
MG = GunType.MACHINE_GUN


# =============================================================================
# GUN TYPES
# =============================================================================

GUN_TYPES = {
    GunType.MUZZLE_LOADING: GunTypeRecord("muzzle loading", 1800, 20.0, 0.0331, 0.9),
    GunType.BREECH_LOADING: GunTypeRecord("breech loading", 1860, 20.0, 0.0289, 1.0),
    GunType.QUICK_FIRING: GunTypeRecord("quick firing", 1881, 8.0, 0.0260, 1.1),
    GunType.ANTI_AIR: GunTypeRecord("anti-air", 1914, 6.0, 0.0250, 1.3),
    GunType.DUAL_PURPOSE: GunTypeRecord("dual purpose", 1930, 6.0, 0.0270, 1.4),
    GunType.RAPID_FIRE: GunTypeRecord("automatic rapid fire", 1900, 4.0, 0.0200, 1.5),
    GunType.MACHINE_GUN: GunTypeRecord("machine", 1885, 0.8, 0.0200, 1.0),
}


# =============================================================================
# MOUNT TYPES
# =============================================================================

MOUNT_TYPES = {
    MountType.BROADSIDE: MountTypeRecord(
        description="broadside", min_year=1800,
        wgt_factor=0.4, mount_adj=0.40,
        face_factor=0.40, back_factor=0.0, barb_factor=0.0,
        below_deck=True, paired=True, centreline=False,
        guns=frozenset({ML, BL, QF}),
    ),
    MountType.COLES_TURRET: MountTypeRecord(
        description="Coles/Ericsson turret", min_year=1860,
        wgt_factor=1.8, mount_adj=1.00,
        face_factor=1.40, back_factor=2.0, barb_factor=0.0,
        below_deck=False, paired=False, centreline=True,
        guns=frozenset({ML, BL}),
    ),
    MountType.OPEN_BARBETTE: MountTypeRecord(
        description="open barbette", min_year=1875,
        wgt_factor=1.1, mount_adj=0.80,
        face_factor=0.50, back_factor=0.0, barb_factor=1.0,
        below_deck=False, paired=False, centreline=True,
        guns=frozenset({ML, BL, QF}),
    ),
    MountType.CENTRE_PIVOT: MountTypeRecord(
        description="centre pivot", min_year=1860,
        wgt_factor=0.6, mount_adj=0.50,
        face_factor=0.50, back_factor=0.0, barb_factor=0.0,
        below_deck=False, paired=False, centreline=True,
        guns=frozenset({ML, BL, QF}),
    ),
    MountType.TURRET: MountTypeRecord(
        description="turret on barbette", min_year=1880,
        wgt_factor=1.6, mount_adj=1.00,
        face_factor=1.25, back_factor=2.5, barb_factor=1.0,
        below_deck=False, paired=False, centreline=True,
        guns=frozenset({BL, QF, AA, DP}),
    ),
    MountType.DECK_AND_HOIST: MountTypeRecord(
        description="deck and hoist", min_year=1890,
        wgt_factor=0.9, mount_adj=0.70,
        face_factor=0.80, back_factor=1.5, barb_factor=0.5,
        below_deck=False, paired=False, centreline=True,
        guns=frozenset({BL, QF, AA, DP}),
    ),
    MountType.DECK: MountTypeRecord(
        description="deck", min_year=1860,
        wgt_factor=0.5, mount_adj=0.60,
        face_factor=0.50, back_factor=0.0, barb_factor=0.0,
        below_deck=False, paired=False, centreline=True,
        guns=frozenset({ML, BL, QF, AA, DP, RF, MG}),
    ),
    MountType.CASEMATE: MountTypeRecord(
        description="casemate", min_year=1885,
        wgt_factor=0.6, mount_adj=0.50,
        face_factor=0.60, back_factor=0.8, barb_factor=0.0,
        below_deck=True, paired=True, centreline=True,
        guns=frozenset({BL, QF, DP}),
    ),
    MountType.AUTOMATIC: MountTypeRecord(
        description="automatic", min_year=1920,
        wgt_factor=1.2, mount_adj=0.40,
        face_factor=0.30, back_factor=0.0, barb_factor=0.0,
        below_deck=False, paired=False, centreline=True,
        guns=frozenset({AA, RF, MG}),
    ),
}


# =============================================================================
# GUN LAYOUTS
# =============================================================================

GUN_LAYOUTS = {
    GunLayout.SINGLE: GunLayoutRecord("single", 1, 1.00, 1),
    GunLayout.TWO_ROW: GunLayoutRecord("2-row", 2, 1.00, 1),
    GunLayout.TWIN: GunLayoutRecord("twin", 2, 0.75, 2),
    GunLayout.THREE_ROW: GunLayoutRecord("3-row", 3, 1.00, 1),
    GunLayout.TRIPLE: GunLayoutRecord("triple", 3, 0.66, 3),
    GunLayout.FOUR_ROW: GunLayoutRecord("4-row", 4, 1.00, 1),
    GunLayout.QUAD: GunLayoutRecord("quad", 4, 0.60, 4),
    GunLayout.FIVE_ROW: GunLayoutRecord("5-row", 5, 1.00, 1),
    GunLayout.QUINTUPLE: GunLayoutRecord("quintuple", 5, 0.55, 5),
}


# =============================================================================
# GUN DISTRIBUTIONS
# =============================================================================

PLACEMENTS = {
    Placement.EVEN: ("evenly spread", 0.25),
    Placement.ENDS: ("ends", 0.45),
    Placement.FWD_BIAS: ("majority forward", 0.35),
    Placement.AFT_BIAS: ("majority aft", 0.35),
    Placement.FORWARD: ("forward deck", 0.30),
    Placement.AFT: ("aft deck", 0.30),
    Placement.FD_AFT: ("forward deck aft", 0.10),
    Placement.AD_FWD: ("aft deck forward", 0.10),
    Placement.AMIDSHIPS: ("amidships", 0.10),
}


def _distribution_records():
    records = {}
    for member in GunDistribution:
        side, _, placement_name = member.value.partition("_")
        placement = Placement(placement_name)
        description, long_arm = PLACEMENTS[placement]
        records[member] = GunDistributionRecord(
            description=description,
            side=(side == "side"),
            placement=placement,
            long_arm=long_arm,
        )
    return records


GUN_DISTRIBUTIONS = _distribution_records()


# =============================================================================
# BULKHEADS
# =============================================================================

BULKHEAD_TYPES = {
    BulkheadType.STRENGTHENED: BulkheadRecord("strengthened bulkheads", 0.95, 1.05, 1.2),
    BulkheadType.ADDITIONAL: BulkheadRecord("additional longitudinal bulkheads", 0.85, 1.10, 1.4),
}
