"""
SHARPIE Design File Schema

Pydantic models for the native JSON design file. The models validate the
file and convert it into the frozen DesignInput used by the engine.
Enumerations are written by value; flag sets as lists of lower-case names.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

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
    MountType,
    SternType,
    TorpedoType,
    flag_from_names,
)
from .inputs import (
    ASW,
    ArmorInput,
    Battery,
    Belt,
    DeckArmor,
    DeckLayout,
    DesignInput,
    EngineInput,
    GunGroup,
    HullInput,
    Mines,
    MiscWeights,
    Torpedoes,
)


class _Model(BaseModel):
    model_config = ConfigDict(extra="forbid")


def _check_flag_names(flag_type, names: List[str]) -> List[str]:
    valid = {member.name.lower() for member in flag_type}
    cleaned = [str(n).lower() for n in names]
    unknown = [n for n in cleaned if n not in valid]
    if unknown:
        raise ValueError(f"unknown {flag_type.__name__} names {unknown}; valid: {sorted(valid)}")
    return cleaned


# =============================================================================
# Hull
# =============================================================================


class DeckLayoutModel(_Model):
    fc_len: Optional[float] = Field(None, ge=0.0)
    fd_len: Optional[float] = Field(None, ge=0.0)
    qd_len: Optional[float] = Field(None, ge=0.0)
    fc_fwd: Optional[float] = None
    fc_aft: Optional[float] = None
    fd_fwd: Optional[float] = None
    fd_aft: Optional[float] = None
    ad_fwd: Optional[float] = None
    ad_aft: Optional[float] = None
    qd_fwd: Optional[float] = None
    qd_aft: Optional[float] = None

    def to_input(self) -> DeckLayout:
        return DeckLayout(**self.model_dump())


class HullModel(_Model):
    lwl: float = Field(..., description="Waterline length (ft)")
    b: float = Field(..., description="Waterline beam (ft)")
    bb: float = Field(0.0, description="Beam over bulges (ft), 0 for none")
    t: float = Field(..., description="Draught (ft)")
    cb: Optional[float] = None
    d: Optional[float] = Field(None, description="Normal displacement (tons)")
    bow_type: BowType = BowType.NORMAL
    ram_len: float = 0.0
    stern_type: SternType = SternType.CRUISER
    stern_overhang: float = 0.0
    bow_angle: float = 0.0
    deck: DeckLayoutModel = Field(default_factory=DeckLayoutModel)

    def to_input(self) -> HullInput:
        values = self.model_dump(exclude={"deck"})
        return HullInput(deck=self.deck.to_input(), **values)


# =============================================================================
# Armament
# =============================================================================


class GunGroupModel(_Model):
    layout: GunLayout = GunLayout.SINGLE
    distribution: GunDistribution = GunDistribution.CENTRE_EVEN
    superstructure: int = Field(0, ge=0)
    above: int = Field(0, ge=0)
    deck: int = Field(0, ge=0)
    below: int = Field(0, ge=0)
    sub: int = Field(0, ge=0)

    def to_input(self) -> GunGroup:
        return GunGroup(**self.model_dump())


class BatteryModel(_Model):
    gun_type: GunType = GunType.BREECH_LOADING
    mount_type: MountType = MountType.DECK
    diameter: float = Field(0.0, ge=0.0)
    caliber: float = Field(45.0, ge=0.0)
    year: Optional[int] = None
    shells: int = Field(0, ge=0)
    shell_wgt: float = Field(0.0, ge=0.0)
    armor_face: float = Field(0.0, ge=0.0)
    armor_back: float = Field(0.0, ge=0.0)
    armor_barb: float = Field(0.0, ge=0.0)
    groups: List[GunGroupModel] = Field(default_factory=list, max_length=2)

    def to_input(self) -> Battery:
        groups = [g.to_input() for g in self.groups]
        while len(groups) < 2:
            groups.append(GunGroup())
        values = self.model_dump(exclude={"groups"})
        return Battery(groups=(groups[0], groups[1]), **values)


class TorpedoesModel(_Model):
    year: int = 0
    num: int = Field(0, ge=0)
    mounts: int = Field(0, ge=0)
    diam: float = Field(0.0, ge=0.0)
    length: float = Field(0.0, ge=0.0)
    kind: TorpedoType = TorpedoType.DECK_SIDE_TUBES

    def to_input(self) -> Torpedoes:
        return Torpedoes(**self.model_dump())


class MinesModel(_Model):
    year: int = 0
    num: int = Field(0, ge=0)
    reload: int = Field(0, ge=0)
    wgt: float = Field(0.0, ge=0.0)
    kind: MineType = MineType.STERN_RAILS

    def to_input(self) -> Mines:
        return Mines(**self.model_dump())


class ASWModel(_Model):
    year: int = 0
    num: int = Field(0, ge=0)
    reload: int = Field(0, ge=0)
    wgt: float = Field(0.0, ge=0.0)
    kind: ASWType = ASWType.STERN_RACKS

    def to_input(self) -> ASW:
        return ASW(**self.model_dump())


# =============================================================================
# Armour
# =============================================================================


class BeltModel(_Model):
    thick: float = Field(0.0, ge=0.0)
    len: float = Field(0.0, ge=0.0)
    hgt: float = Field(0.0, ge=0.0)

    def to_input(self) -> Belt:
        return Belt(**self.model_dump())


class DeckArmorModel(_Model):
    fc: float = Field(0.0, ge=0.0)
    md: float = Field(0.0, ge=0.0)
    qd: float = Field(0.0, ge=0.0)
    kind: DeckType = DeckType.MULTIPLE_ARMORED

    def to_input(self) -> DeckArmor:
        return DeckArmor(**self.model_dump())


class ArmorModel(_Model):
    main: BeltModel = Field(default_factory=BeltModel)
    end: BeltModel = Field(default_factory=BeltModel)
    upper: BeltModel = Field(default_factory=BeltModel)
    bulge: BeltModel = Field(default_factory=BeltModel)
    bulkhead: BeltModel = Field(default_factory=BeltModel)
    incline: float = 0.0
    bh_kind: BulkheadType = BulkheadType.STRENGTHENED
    bh_beam: float = Field(0.0, ge=0.0)
    deck: DeckArmorModel = Field(default_factory=DeckArmorModel)
    ct_fwd: float = Field(0.0, ge=0.0)
    ct_aft: float = Field(0.0, ge=0.0)

    def to_input(self) -> ArmorInput:
        return ArmorInput(
            main=self.main.to_input(),
            end=self.end.to_input(),
            upper=self.upper.to_input(),
            bulge=self.bulge.to_input(),
            bulkhead=self.bulkhead.to_input(),
            incline=self.incline,
            bh_kind=self.bh_kind,
            bh_beam=self.bh_beam,
            deck=self.deck.to_input(),
            ct_fwd=self.ct_fwd,
            ct_aft=self.ct_aft,
        )


# =============================================================================
# Machinery
# =============================================================================


class EngineModel(_Model):
    year: Optional[int] = None
    fuel: List[str] = Field(default_factory=lambda: ["coal"])
    boiler: List[str] = Field(default_factory=lambda: ["simple"])
    drive: List[str] = Field(default_factory=lambda: ["direct"])
    vmax: float = Field(0.0, ge=0.0)
    vcruise: float = Field(0.0, ge=0.0)
    range: float = Field(0.0, ge=0.0)
    shafts: int = 1
    pct_coal: float = 0.0

    @field_validator("fuel")
    @classmethod
    def validate_fuel(cls, v):
        return _check_flag_names(FuelType, v)

    @field_validator("boiler")
    @classmethod
    def validate_boiler(cls, v):
        return _check_flag_names(BoilerType, v)

    @field_validator("drive")
    @classmethod
    def validate_drive(cls, v):
        return _check_flag_names(DriveType, v)

    def to_input(self) -> EngineInput:
        return EngineInput(
            year=self.year,
            fuel=flag_from_names(FuelType, self.fuel),
            boiler=flag_from_names(BoilerType, self.boiler),
            drive=flag_from_names(DriveType, self.drive),
            vmax=self.vmax,
            vcruise=self.vcruise,
            range=self.range,
            shafts=self.shafts,
            pct_coal=self.pct_coal,
        )


class MiscModel(_Model):
    vital: float = 0.0
    hull: float = 0.0
    on: float = 0.0
    above: float = 0.0
    void: float = 0.0

    def to_input(self) -> MiscWeights:
        return MiscWeights(**self.model_dump())


# =============================================================================
# Design file
# =============================================================================


class DesignFileModel(_Model):
    """Top-level native design file."""

    format_version: int = Field(1, description="Design file format version")
    name: str = ""
    country: str = ""
    kind: str = ""
    year: int = Field(..., description="Year laid down")
    hull: HullModel
    batteries: List[BatteryModel] = Field(default_factory=list)
    torpedoes: List[TorpedoesModel] = Field(default_factory=list)
    mines: MinesModel = Field(default_factory=MinesModel)
    asw: List[ASWModel] = Field(default_factory=list)
    armor: ArmorModel = Field(default_factory=ArmorModel)
    engine: EngineModel = Field(default_factory=EngineModel)
    misc: MiscModel = Field(default_factory=MiscModel)

    def to_design_input(self) -> DesignInput:
        return DesignInput(
            name=self.name,
            country=self.country,
            kind=self.kind,
            year=self.year,
            hull=self.hull.to_input(),
            batteries=tuple(b.to_input() for b in self.batteries),
            torpedoes=tuple(t.to_input() for t in self.torpedoes),
            mines=self.mines.to_input(),
            asw=tuple(a.to_input() for a in self.asw),
            armor=self.armor.to_input(),
            engine=self.engine.to_input(),
            misc=self.misc.to_input(),
        )
