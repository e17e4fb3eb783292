"""
SHARPIE Core Enumerations

All closed enumerations used by the design input, the lookup tables and the
calculation stages. Values are the names used in native design files.
"""

from enum import Enum, Flag, auto


# =============================================================================
# HULL
# =============================================================================

class SternType(str, Enum):
    """Stern shapes; each fixes the waterplane coefficient terms."""
    TRANSOM_SMALL = "transom_small"
    TRANSOM_LARGE = "transom_large"
    CRUISER = "cruiser"
    ROUND = "round"


class BowType(str, Enum):
    """Bow shapes. A ram bow adds its length to length overall."""
    NORMAL = "normal"
    BULB_STRAIGHT = "bulb_straight"
    BULB_FORWARD = "bulb_forward"
    RAM = "ram"


# =============================================================================
# ARMAMENT
# =============================================================================

class GunType(str, Enum):
    """Gun families in rough order of introduction."""
    MUZZLE_LOADING = "muzzle_loading"
    BREECH_LOADING = "breech_loading"
    QUICK_FIRING = "quick_firing"
    ANTI_AIR = "anti_air"
    DUAL_PURPOSE = "dual_purpose"
    RAPID_FIRE = "rapid_fire"
    MACHINE_GUN = "machine_gun"


class MountType(str, Enum):
    """Gun mountings."""
    BROADSIDE = "broadside"
    COLES_TURRET = "coles_turret"
    OPEN_BARBETTE = "open_barbette"
    CENTRE_PIVOT = "centre_pivot"
    TURRET = "turret"
    DECK_AND_HOIST = "deck_and_hoist"
    DECK = "deck"
    CASEMATE = "casemate"
    AUTOMATIC = "automatic"


class GunLayout(str, Enum):
    """Guns per mount and how they are arranged."""
    SINGLE = "single"
    TWO_ROW = "two_row"
    TWIN = "twin"
    THREE_ROW = "three_row"
    TRIPLE = "triple"
    FOUR_ROW = "four_row"
    QUAD = "quad"
    FIVE_ROW = "five_row"
    QUINTUPLE = "quintuple"


class Placement(str, Enum):
    """Fore and aft placement pattern of a gun group."""
    EVEN = "even"
    ENDS = "ends"
    FWD_BIAS = "fwd_bias"
    AFT_BIAS = "aft_bias"
    FORWARD = "forward"
    AFT = "aft"
    FD_AFT = "fd_aft"
    AD_FWD = "ad_fwd"
    AMIDSHIPS = "amidships"


class GunDistribution(str, Enum):
    """
    Placement of a gun group on the centreline or on the sides.

    Eighteen members: every Placement once on the centreline and once on
    the sides.
    """
    CENTRE_EVEN = "centre_even"
    CENTRE_ENDS = "centre_ends"
    CENTRE_FWD_BIAS = "centre_fwd_bias"
    CENTRE_AFT_BIAS = "centre_aft_bias"
    CENTRE_FORWARD = "centre_forward"
    CENTRE_AFT = "centre_aft"
    CENTRE_FD_AFT = "centre_fd_aft"
    CENTRE_AD_FWD = "centre_ad_fwd"
    CENTRE_AMIDSHIPS = "centre_amidships"
    SIDE_EVEN = "side_even"
    SIDE_ENDS = "side_ends"
    SIDE_FWD_BIAS = "side_fwd_bias"
    SIDE_AFT_BIAS = "side_aft_bias"
    SIDE_FORWARD = "side_forward"
    SIDE_AFT = "side_aft"
    SIDE_FD_AFT = "side_fd_aft"
    SIDE_AD_FWD = "side_ad_fwd"
    SIDE_AMIDSHIPS = "side_amidships"


class MountPosition(str, Enum):
    """Vertical position buckets for gun mounts."""
    SUPERSTRUCTURE = "superstructure"
    ABOVE = "above"
    DECK = "deck"
    BELOW = "below"
    SUB = "sub"


class TorpedoType(str, Enum):
    """Torpedo tube and reload arrangements."""
    FIXED_TUBES = "fixed_tubes"
    DECK_SIDE_TUBES = "deck_side_tubes"
    CENTRE_TUBES = "centre_tubes"
    DECK_RELOADS = "deck_reloads"
    BOW_TUBES = "bow_tubes"
    STERN_TUBES = "stern_tubes"
    BOW_AND_STERN_TUBES = "bow_and_stern_tubes"
    SUBMERGED_SIDE_TUBES = "submerged_side_tubes"
    SUBMERGED_RELOADS = "submerged_reloads"


class MineType(str, Enum):
    """Mine laying arrangements."""
    STERN_RAILS = "stern_rails"
    BOW_TUBES = "bow_tubes"
    STERN_TUBES = "stern_tubes"
    SIDE_TUBES = "side_tubes"


class ASWType(str, Enum):
    """Anti-submarine weapon types."""
    STERN_RACKS = "stern_racks"
    THROWERS = "throwers"
    HEDGEHOGS = "hedgehogs"
    SQUID_MORTARS = "squid_mortars"


# =============================================================================
# ARMOUR
# =============================================================================

class BulkheadType(str, Enum):
    """Torpedo bulkhead construction."""
    STRENGTHENED = "strengthened"
    ADDITIONAL = "additional"


class DeckType(str, Enum):
    """Deck armour configuration."""
    MULTIPLE_ARMORED = "multiple_armored"
    SINGLE_ARMORED = "single_armored"
    MULTIPLE_PROTECTED = "multiple_protected"
    SINGLE_PROTECTED = "single_protected"
    BOX_OVER_MACHINERY = "box_over_machinery"
    BOX_OVER_MAGAZINE = "box_over_magazine"
    BOX_OVER_BOTH = "box_over_both"

    @property
    def description(self) -> str:
        return DECK_TYPE_DESCRIPTIONS[self]

    @property
    def is_box(self) -> bool:
        return self in (
            DeckType.BOX_OVER_MACHINERY,
            DeckType.BOX_OVER_MAGAZINE,
            DeckType.BOX_OVER_BOTH,
        )


DECK_TYPE_DESCRIPTIONS = {
    DeckType.MULTIPLE_ARMORED: "Armoured deck - multiple decks",
    DeckType.SINGLE_ARMORED: "Armoured deck - single deck",
    DeckType.MULTIPLE_PROTECTED: "Protected deck - multiple decks",
    DeckType.SINGLE_PROTECTED: "Protected deck - single deck",
    DeckType.BOX_OVER_MACHINERY: "Box over machinery",
    DeckType.BOX_OVER_MAGAZINE: "Box over magazines",
    DeckType.BOX_OVER_BOTH: "Box over machinery & magazines",
}


# =============================================================================
# MACHINERY
# =============================================================================

class FuelType(Flag):
    """Fuels carried; any combination may be selected."""
    COAL = auto()
    OIL = auto()
    DIESEL = auto()
    GASOLINE = auto()
    BATTERY = auto()

    @property
    def is_steam(self) -> bool:
        return bool(self & (FuelType.COAL | FuelType.OIL))


class BoilerType(Flag):
    """Steam engine types fitted."""
    SIMPLE = auto()
    COMPLEX = auto()
    TURBINE = auto()

    @property
    def is_reciprocating(self) -> bool:
        return bool(self & (BoilerType.SIMPLE | BoilerType.COMPLEX))

    @property
    def is_turbine(self) -> bool:
        return bool(self & BoilerType.TURBINE)


class DriveType(Flag):
    """Transmission from engines to shafts."""
    DIRECT = auto()
    GEARED = auto()
    ELECTRIC = auto()
    HYDRAULIC = auto()


def flag_members(value: Flag) -> list:
    """Members set in a flag value, in declaration order."""
    return [member for member in type(value) if member & value]


def flag_from_names(flag_type, names) -> Flag:
    """Build a flag value from member values such as ["coal", "oil"]."""
    value = flag_type(0)
    for name in names:
        value |= flag_type[str(name).upper()]
    return value


def flag_names(value: Flag) -> list:
    """Lower-case member names for a flag value."""
    return [member.name.lower() for member in flag_members(value)]


# =============================================================================
# DIAGNOSTICS
# =============================================================================

class Severity(str, Enum):
    """Diagnostic severity. Errors mark an infeasible design, not a crash."""
    WARNING = "warning"
    ERROR = "error"


class Stage(str, Enum):
    """Calculation stages in evaluation order."""
    HULL = "hull"
    FREEBOARD = "freeboard"
    GUNS = "guns"
    ARMOR = "armor"
    ENGINE = "engine"
    PERFORMANCE = "performance"


class Units(str, Enum):
    """Display units for reports."""
    IMPERIAL = "imperial"
    METRIC = "metric"
