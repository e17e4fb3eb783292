"""
SHARPIE Gun Battery Stage

Per-battery gun, mount, magazine and gun armour weights, mount positions,
superstructure moments and weight concentration.

Two long-standing behaviours are kept as they are:
- the barbette armour of both groups uses group 1's effective diameter
- the superstructure total counts the first battery twice (see
  sharpie.performance.stage)
"""

from __future__ import annotations
from dataclasses import replace
from typing import List, Optional, Tuple
import math
import logging

from sharpie.core.constants import ARMOR_INCH, POUND2TON, year_adj
from sharpie.core.enums import MountPosition, MountType
from sharpie.core.utils import safe_divide
from sharpie.design.inputs import Battery, DesignInput
from sharpie.hull.results import DerivedFreeboard, DerivedHull
from sharpie.tables.lookup import LookupTables
from sharpie.tables.records import GunLayoutRecord, GunTypeRecord, MountTypeRecord
from sharpie.validators.aggregator import StageDiagnostics
from .layout import GroupPosition, mount_phrase, resolve_distribution
from .ordnance import (
    mine_weight,
    torpedo_deck_space,
    torpedo_hull_space,
    total_asw_weight,
    total_torpedo_weight,
)
from .results import DerivedGunBattery, DerivedGuns

logger = logging.getLogger(__name__)

SHELL_EST_DIVISOR = 1.9830943211886
SHELL_BAND = (0.5, 1.5)

# Mount height above the group freeboard, in gunhouse heights
POSITION_OFFSETS = {
    MountPosition.SUPERSTRUCTURE: 2,
    MountPosition.ABOVE: 1,
    MountPosition.DECK: 0,
    MountPosition.BELOW: -1,
    MountPosition.SUB: -2,
}


def _cap(text: str) -> str:
    return text[:1].upper() + text[1:]


# =============================================================================
# BATTERY FORMULAS
# =============================================================================

def house_height(diameter: float) -> float:
    """Gunhouse height in feet."""
    return 5.0 + 0.4 * diameter


def effective_diameter(diameter: float, layout: GunLayoutRecord) -> float:
    """Bore scaled for the guns in the mount and their arrangement."""
    if diameter <= 0.0:
        return 0.0
    calc = layout.guns * diameter * (1.0 + (1.0 / diameter) ** layout.diameter_power)
    if diameter < 12.0:
        calc *= 1.0 + (12.0 - diameter) / 120.0
    if layout.wgt_adj < 1.0:
        calc *= 0.5 + 0.5 * layout.wgt_adj
    return calc


def shell_weight_estimate(diameter: float, caliber: float, ya: float) -> float:
    """Estimated shell weight (lb) for bore, barrel length and era."""
    delta = caliber - 45.0
    cal_adj = 1.0 + math.copysign(math.sqrt(abs(delta)), delta) / 45.0 if delta else 1.0
    era = 1.0 - (1.0 - ya) * 0.25
    return diameter ** 3 / SHELL_EST_DIVISOR * cal_adj * era


def gun_weight(num: int, gun: GunTypeRecord, diameter: float, caliber: float, ya: float) -> float:
    return num * gun.wgt_factor * diameter ** 3 * caliber / 45.0 * (1.0 + (1.0 - ya) * 0.5)


def mount_weight(
    wgt_gun: float,
    mount: MountTypeRecord,
    gun: GunTypeRecord,
    wgt_adj: float,
    diameter: float,
) -> float:
    diam_corr = 1.0 + max(0.0, 12.0 - diameter) / 48.0
    return wgt_gun * mount.wgt_factor * gun.mount_factor * wgt_adj * diam_corr


def magazine_weight(num: int, shells: int, shell_wgt: float, caliber: float) -> float:
    return num * shells * shell_wgt * (1.0 + 0.5 * caliber / 45.0) / POUND2TON


def concentration(shell_wgt: float, num: int, mounts: int, mount: MountTypeRecord, broadside: float) -> float:
    """Share of the broadside, rewarded for fewer larger mounts where the mount allows it."""
    if broadside == 0.0 or mounts == 0:
        return 0.0
    factor = (4.0 / mounts) ** 0.25 - 1.0 if mount.mount_adj > 0.6 else -0.1
    return shell_wgt * num / broadside * factor


# =============================================================================
# GUN BATTERY STAGE
# =============================================================================

class GunBatteryStage:
    """
    Third calculation stage.

    Each battery is computed independently; concentration needs the total
    broadside and is filled in by a second pass.
    """

    def __init__(self, tables: LookupTables):
        self.tables = tables

    def calculate(
        self,
        design: DesignInput,
        hull: DerivedHull,
        fb: DerivedFreeboard,
        diagnostics: Optional[StageDiagnostics] = None,
    ) -> DerivedGuns:
        logger.debug(f"Gun stage: {len(design.batteries)} batteries")

        batteries: List[DerivedGunBattery] = [
            self._battery(i, battery, design, fb, diagnostics)
            for i, battery in enumerate(design.batteries)
        ]

        # Second pass: concentration against the whole broadside
        broadside = sum(b.wgt_broad for b in batteries)
        batteries = [
            replace(b, concentration=concentration(
                b.shell_wgt, b.num, b.mounts, self.tables.mount(b.mount_type), broadside,
            ))
            for b in batteries
        ]

        guns = DerivedGuns(
            batteries=tuple(batteries),
            wgt_guns=sum(b.wgt_gun for b in batteries),
            wgt_mounts=sum(b.wgt_mount for b in batteries),
            wgt_armor=sum(b.armor_wgt for b in batteries),
            wgt_mag=sum(b.wgt_mag for b in batteries),
            broadside=broadside,
            wgt_torpedoes=total_torpedo_weight(design.torpedoes),
            wgt_mines=mine_weight(design.mines),
            wgt_asw=total_asw_weight(design.asw),
            torpedo_hull_space=sum(torpedo_hull_space(t) for t in design.torpedoes),
            torpedo_deck_space=sum(torpedo_deck_space(t, hull.b) for t in design.torpedoes),
        )

        if diagnostics is not None and guns.guns_total > hull.d:
            diagnostics.error("batteries", "Design Failure: Reduce guns or increase Displacement")

        logger.debug(
            f"Gun stage: guns={guns.wgt_guns:.1f} mounts={guns.wgt_mounts:.1f} "
            f"armour={guns.wgt_armor:.1f} broadside={guns.broadside:.0f}lb"
        )
        return guns

    def _battery(
        self,
        index: int,
        battery: Battery,
        design: DesignInput,
        fb: DerivedFreeboard,
        diagnostics: Optional[StageDiagnostics],
    ) -> DerivedGunBattery:
        gun = self.tables.gun(battery.gun_type)
        mount = self.tables.mount(battery.mount_type)
        layouts = [self.tables.layout(g.layout) for g in battery.groups]
        distributions = [self.tables.distribution(g.distribution) for g in battery.groups]

        year = design.battery_year(battery)
        ya = year_adj(year)
        diameter = battery.diameter
        caliber = battery.caliber

        # Mount counts
        num_mounts = tuple(g.num_mounts for g in battery.groups)
        guns = tuple(layout.guns for layout in layouts)
        num = sum(n * k for n, k in zip(num_mounts, guns))
        mounts = sum(num_mounts)

        wgt_adj = safe_divide(
            sum(layout.wgt_adj * n for layout, n in zip(layouts, num_mounts)), mounts,
        )
        diameter_calc = tuple(effective_diameter(diameter, layout) for layout in layouts)

        # Shells
        wgt_shell_est = shell_weight_estimate(diameter, caliber, ya)
        shell_wgt = battery.shell_wgt if battery.shell_wgt > 0 else wgt_shell_est

        # Weights
        wgt_gun = gun_weight(num, gun, diameter, caliber, ya)
        wgt_mount = mount_weight(wgt_gun, mount, gun, wgt_adj, diameter)
        wgt_mag = magazine_weight(num, battery.shells, shell_wgt, caliber)
        wgt_broad = num * shell_wgt

        # Positions
        broadside_mount = battery.mount_type == MountType.BROADSIDE
        positions: Tuple[GroupPosition, ...] = tuple(
            resolve_distribution(dist, n, fb, broadside_mount)
            for dist, n in zip(distributions, num_mounts)
        )

        # Gun armour
        hh = house_height(diameter)
        face = back = barb = 0.0
        for g, group in enumerate(battery.groups):
            n = num_mounts[g]
            face += mount.face_factor * n * diameter_calc[g] * hh * battery.armor_face * ARMOR_INCH
            back += mount.back_factor * n * diameter_calc[g] * hh * battery.armor_back * ARMOR_INCH
            barb_hgt = positions[g].free * 0.5 + safe_divide(
                hh * (2 * group.superstructure + group.above), n,
            )
            cap = 5 if mount.mount_adj > 0.6 else 4
            saturation = min(guns[g], cap) ** 0.25
            # Group 1 diameter for both groups
            barb += (
                mount.barb_factor * n * diameter_calc[0] * barb_hgt
                * battery.armor_barb * ARMOR_INCH * saturation
            )

        # Moments
        battery_wgt = wgt_gun + wgt_mount + face + back + barb
        per_mount = safe_divide(battery_wgt, mounts)
        super_num = 0.0
        long_num = 0.0
        super_aft = False
        for g, group in enumerate(battery.groups):
            for position, offset in POSITION_OFFSETS.items():
                height = positions[g].free + offset * hh
                super_num += per_mount * group.count(position) * height
            long_num += per_mount * num_mounts[g] * distributions[g].long_arm
            if group.superstructure > 0 and positions[g].mounts_aft > positions[g].mounts_fwd:
                super_aft = True

        layout_phrases = tuple(
            mount_phrase(n, layout) for n, layout in zip(num_mounts, layouts) if n > 0
        )
        position_phrases = tuple(
            dist.position for dist, n in zip(distributions, num_mounts) if n > 0
        )

        derived = DerivedGunBattery(
            index=index,
            gun_type=battery.gun_type,
            mount_type=battery.mount_type,
            year=year,
            diameter=diameter,
            caliber=caliber,
            num=num,
            mounts=mounts,
            num_mounts=num_mounts,
            guns=guns,
            wgt_adj=wgt_adj,
            diameter_calc=diameter_calc,
            house_hgt=hh,
            shell_wgt=shell_wgt,
            wgt_shell_est=wgt_shell_est,
            wgt_gun=wgt_gun,
            wgt_mount=wgt_mount,
            wgt_mag=wgt_mag,
            wgt_broad=wgt_broad,
            armor_face_wgt=face,
            armor_back_wgt=back,
            armor_barb_wgt=barb,
            positions=positions,
            super_num=super_num,
            long_num=long_num,
            super_aft=super_aft,
            concentration=0.0,
            description=(
                f'{num} - {diameter:g}" {caliber:g} cal {gun.description} guns '
                f"in {mount.description} mounts, {year} Model"
            ),
            layout_phrases=layout_phrases,
            position_phrases=position_phrases,
        )

        if diagnostics is not None:
            self._validate(index, battery, derived, gun, mount, distributions, diagnostics)
        return derived

    def _validate(
        self,
        index: int,
        battery: Battery,
        derived: DerivedGunBattery,
        gun: GunTypeRecord,
        mount: MountTypeRecord,
        distributions,
        diagnostics: StageDiagnostics,
    ) -> None:
        prefix = f"batteries[{index}]"

        if derived.year < gun.min_year:
            diagnostics.warning(
                f"{prefix}.year", f"{_cap(gun.description)} guns not available before {gun.min_year}",
            )
        if battery.diameter > gun.max_diameter:
            diagnostics.warning(
                f"{prefix}.diameter",
                f'Gun diameter exceeds {gun.max_diameter:g}" for {gun.description} guns',
            )
        if derived.year < mount.min_year:
            diagnostics.warning(
                f"{prefix}.mount_type",
                f"{_cap(mount.description)} mounts not available before {mount.min_year}",
            )
        if not mount.accepts(battery.gun_type):
            diagnostics.error(
                f"{prefix}.mount_type",
                f"{_cap(mount.description)} mounts cannot carry {gun.description} guns",
            )

        low, high = SHELL_BAND
        est = derived.wgt_shell_est
        if battery.shell_wgt > 0 and not (low * est <= battery.shell_wgt <= high * est):
            diagnostics.warning(
                f"{prefix}.shell_wgt", "Shell weight outside expected range (50% to 150% of estimate)",
            )

        if battery.armor_back > 0 and mount.back_factor == 0:
            diagnostics.warning(
                f"{prefix}.armor_back", f"{_cap(mount.description)} mounts have no gunhouse for back armour",
            )
        if battery.armor_barb > 0 and mount.barb_factor == 0:
            diagnostics.warning(
                f"{prefix}.armor_barb", f"{_cap(mount.description)} mounts cannot have barbette armour",
            )
        if battery.armor_back > battery.armor_face > 0:
            diagnostics.warning(f"{prefix}.armor_back", "Back armour thicker than face armour")

        for g, group in enumerate(battery.groups):
            n = group.num_mounts
            if n == 0:
                continue
            field = f"{prefix}.groups[{g}]"
            if mount.paired and n % 2 == 1:
                diagnostics.warning(field, "Broadside and casemate mounts must be in pairs")
            if not mount.centreline and not distributions[g].side:
                diagnostics.warning(f"{field}.distribution", "Broadside mounts cannot be on the centreline")
            if group.below + group.sub > 0 and not mount.below_deck:
                diagnostics.warning(
                    field, f"{_cap(mount.description)} mounts cannot be placed below deck",
                )
            if group.superstructure > group.above + group.deck:
                diagnostics.warning(field, "Too many superstructure mounts for mounts below them")
            if group.sub > 2:
                diagnostics.warning(field, "Too many mounts in submerged positions")
