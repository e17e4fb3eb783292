"""
SHARPIE Design Input

Immutable snapshot of the user-entered design. Created by the file loader
or by callers; never mutated by the calculation stages. Use
dataclasses.replace() to derive a modified design.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from sharpie.core.constants import DEFAULT_FC_LEN, DEFAULT_FD_LEN, DEFAULT_QD_LEN
from sharpie.core.enums import (
    ASWType,
    BoilerType,
    BowType,
    BulkheadType,
    DeckType,
    DriveType,
    FuelType,
    GunDistribution,
    GunLayout,
    GunType,
    MineType,
    MountPosition,
    MountType,
    SternType,
    TorpedoType,
)


# =============================================================================
# HULL
# =============================================================================

@dataclass(frozen=True)
class DeckLayout:
    """
    Deck segment lengths (fractions of Lwl) and heights above the waterline.

    Unset fractions take the default layout; unset heights count as 0.0
    in the stages and are filled in by the freeboard estimators.
    """
    fc_len: Optional[float] = None
    fd_len: Optional[float] = None
    qd_len: Optional[float] = None

    fc_fwd: Optional[float] = None
    fc_aft: Optional[float] = None
    fd_fwd: Optional[float] = None
    fd_aft: Optional[float] = None
    ad_fwd: Optional[float] = None
    ad_aft: Optional[float] = None
    qd_fwd: Optional[float] = None
    qd_aft: Optional[float] = None

    HEIGHT_FIELDS = (
        "fc_fwd", "fc_aft", "fd_fwd", "fd_aft",
        "ad_fwd", "ad_aft", "qd_fwd", "qd_aft",
    )

    @property
    def fc(self) -> float:
        return DEFAULT_FC_LEN if self.fc_len is None else self.fc_len

    @property
    def fd(self) -> float:
        return DEFAULT_FD_LEN if self.fd_len is None else self.fd_len

    @property
    def qd(self) -> float:
        return DEFAULT_QD_LEN if self.qd_len is None else self.qd_len

    @property
    def ad(self) -> float:
        """After deck: the remainder of the waterline length."""
        return 1.0 - self.fc - self.fd - self.qd

    def height(self, name: str) -> float:
        value = getattr(self, name)
        return 0.0 if value is None else value

    @property
    def missing_heights(self) -> Tuple[str, ...]:
        return tuple(h for h in self.HEIGHT_FIELDS if getattr(self, h) is None)


@dataclass(frozen=True)
class HullInput:
    """Principal dimensions and hull form."""
    lwl: float = 0.0  # ft
    b: float = 0.0  # ft
    bb: float = 0.0  # beam over bulges, 0 means same as b
    t: float = 0.0  # ft
    cb: Optional[float] = None
    d: Optional[float] = None  # normal displacement, long tons

    bow_type: BowType = BowType.NORMAL
    ram_len: float = 0.0
    stern_type: SternType = SternType.CRUISER
    stern_overhang: float = 0.0
    bow_angle: float = 0.0  # degrees, positive raked forward

    deck: DeckLayout = field(default_factory=DeckLayout)

    @property
    def bb_eff(self) -> float:
        return self.bb if self.bb > 0 else self.b


# =============================================================================
# ARMAMENT
# =============================================================================

@dataclass(frozen=True)
class GunGroup:
    """One of the two independently laid-out mount groups of a battery."""
    layout: GunLayout = GunLayout.SINGLE
    distribution: GunDistribution = GunDistribution.CENTRE_EVEN
    superstructure: int = 0
    above: int = 0
    deck: int = 0
    below: int = 0
    sub: int = 0

    @property
    def num_mounts(self) -> int:
        return self.superstructure + self.above + self.deck + self.below + self.sub

    def count(self, position: MountPosition) -> int:
        return getattr(self, position.value)


@dataclass(frozen=True)
class Battery:
    """A gun battery: one calibre of gun in up to two mount groups."""
    gun_type: GunType = GunType.BREECH_LOADING
    mount_type: MountType = MountType.DECK
    diameter: float = 0.0  # bore, inches
    caliber: float = 45.0  # barrel length in calibres
    year: Optional[int] = None
    shells: int = 0  # rounds per gun
    shell_wgt: float = 0.0  # lb, 0 means use estimate
    armor_face: float = 0.0
    armor_back: float = 0.0
    armor_barb: float = 0.0
    groups: Tuple[GunGroup, GunGroup] = (GunGroup(), GunGroup())

    @property
    def num_mounts(self) -> int:
        return sum(g.num_mounts for g in self.groups)


@dataclass(frozen=True)
class Torpedoes:
    year: int = 0
    num: int = 0
    mounts: int = 0
    diam: float = 0.0  # inches
    length: float = 0.0  # ft
    kind: TorpedoType = TorpedoType.DECK_SIDE_TUBES


@dataclass(frozen=True)
class Mines:
    year: int = 0
    num: int = 0
    reload: int = 0
    wgt: float = 0.0  # lb each
    kind: MineType = MineType.STERN_RAILS


@dataclass(frozen=True)
class ASW:
    year: int = 0
    num: int = 0
    reload: int = 0
    wgt: float = 0.0  # lb each
    kind: ASWType = ASWType.STERN_RACKS


# =============================================================================
# ARMOUR
# =============================================================================

@dataclass(frozen=True)
class Belt:
    thick: float = 0.0  # inches
    len: float = 0.0  # ft
    hgt: float = 0.0  # ft


@dataclass(frozen=True)
class DeckArmor:
    fc: float = 0.0  # forecastle, inches
    md: float = 0.0  # main deck
    qd: float = 0.0  # quarterdeck
    kind: DeckType = DeckType.MULTIPLE_ARMORED


@dataclass(frozen=True)
class ArmorInput:
    main: Belt = field(default_factory=Belt)
    end: Belt = field(default_factory=Belt)
    upper: Belt = field(default_factory=Belt)
    bulge: Belt = field(default_factory=Belt)
    bulkhead: Belt = field(default_factory=Belt)
    incline: float = 0.0  # degrees
    bh_kind: BulkheadType = BulkheadType.STRENGTHENED
    bh_beam: float = 0.0  # ft between torpedo bulkheads
    deck: DeckArmor = field(default_factory=DeckArmor)
    ct_fwd: float = 0.0
    ct_aft: float = 0.0


# =============================================================================
# MACHINERY AND MISCELLANEOUS
# =============================================================================

@dataclass(frozen=True)
class EngineInput:
    year: Optional[int] = None
    fuel: FuelType = FuelType.COAL
    boiler: BoilerType = BoilerType.SIMPLE
    drive: DriveType = DriveType.DIRECT
    vmax: float = 0.0  # knots
    vcruise: float = 0.0  # knots
    range: float = 0.0  # nautical miles
    shafts: int = 1
    pct_coal: float = 0.0  # percent of bunkerage carried as coal


@dataclass(frozen=True)
class MiscWeights:
    """Miscellaneous weights in long tons."""
    vital: float = 0.0
    hull: float = 0.0
    on: float = 0.0
    above: float = 0.0
    void: float = 0.0

    @property
    def total(self) -> float:
        return self.vital + self.hull + self.on + self.above + self.void


# =============================================================================
# DESIGN
# =============================================================================

@dataclass(frozen=True)
class DesignInput:
    """Complete user-entered design snapshot."""
    name: str = ""
    country: str = ""
    kind: str = ""
    year: int = 1900  # laid down

    hull: HullInput = field(default_factory=HullInput)
    batteries: Tuple[Battery, ...] = ()
    torpedoes: Tuple[Torpedoes, ...] = ()
    mines: Mines = field(default_factory=Mines)
    asw: Tuple[ASW, ...] = ()
    armor: ArmorInput = field(default_factory=ArmorInput)
    engine: EngineInput = field(default_factory=EngineInput)
    misc: MiscWeights = field(default_factory=MiscWeights)

    def battery_year(self, battery: Battery) -> int:
        return battery.year if battery.year is not None else self.year

    @property
    def engine_year(self) -> int:
        return self.engine.year if self.engine.year is not None else self.year
