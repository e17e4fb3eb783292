"""
SHARPIE Armour Stage

Belt, torpedo protection, deck and conning tower weights, and the checks
that keep the armour within the hull and the displacement.
"""

from __future__ import annotations
from typing import Optional
import logging

from sharpie.design.inputs import DesignInput
from sharpie.hull.results import DerivedFreeboard, DerivedHull
from sharpie.machinery.powering import engine_weight
from sharpie.tables.lookup import LookupTables
from sharpie.validators.aggregator import StageDiagnostics
from sharpie.weapons.results import DerivedGuns
from .plating import belt_coverage, belt_weight, ct_weight, deck_weight, max_belt_hgt
from .results import DerivedArmor

logger = logging.getLogger(__name__)


class ArmorStage:
    """Fourth calculation stage."""

    def __init__(self, tables: LookupTables):
        self.tables = tables

    def calculate(
        self,
        design: DesignInput,
        hull: DerivedHull,
        fb: DerivedFreeboard,
        guns: DerivedGuns,
        diagnostics: Optional[StageDiagnostics] = None,
    ) -> DerivedArmor:
        armor = design.armor
        lwl, cwp, b, d = hull.lwl, hull.cwp, hull.b, hull.d

        # Box decks are sized from the machinery, which is not derived yet
        wgt_engine = engine_weight(
            design.engine, design.engine_year, d, lwl, hull.leff, hull.cs, hull.ws,
        )

        fitted = armor.bulkhead.len > 0
        bulkhead = self.tables.bulkhead(armor.bh_kind)

        derived = DerivedArmor(
            wgt_main=belt_weight(armor.main, lwl, cwp, b, tapered=True),
            wgt_end=belt_weight(armor.end, lwl, cwp, b),
            wgt_upper=belt_weight(armor.upper, lwl, cwp, b, tapered=True),
            wgt_bulge=belt_weight(armor.bulge, lwl, cwp, b),
            wgt_bulkhead=belt_weight(armor.bulkhead, lwl, cwp, b),
            bh_kind=armor.bh_kind,
            flotation_factor=bulkhead.flotation_factor if fitted else 1.0,
            torpedo_factor=bulkhead.torpedo_factor if fitted else 1.0,
            deck_kind=armor.deck.kind,
            wgt_deck=deck_weight(
                armor.deck, d, lwl, b, fb.fc_len, fb.qd_len, hull.wp, cwp,
                wgt_engine, guns.wgt_mag,
            ),
            wgt_ct_fwd=ct_weight(armor.ct_fwd, d),
            wgt_ct_aft=ct_weight(armor.ct_aft, d),
            wgt_guns=guns.wgt_armor,
            wgt_engine=wgt_engine,
            belt_coverage=belt_coverage(armor.main.len, lwl),
            max_belt_hgt=max_belt_hgt(hull.t, fb.freeboard_dist, armor.incline),
            budget=d - (guns.wgt_guns + guns.wgt_mounts),
        )

        if diagnostics is not None:
            self._validate(design, hull, fb, derived, diagnostics)

        logger.debug(
            f"Armour stage: belts={derived.wgt_belts:.1f} deck={derived.wgt_deck:.1f} "
            f"total={derived.wgt_total:.1f} budget={derived.budget:.1f}"
        )
        return derived

    def _validate(
        self,
        design: DesignInput,
        hull: DerivedHull,
        fb: DerivedFreeboard,
        derived: DerivedArmor,
        diagnostics: StageDiagnostics,
    ) -> None:
        armor = design.armor
        side = hull.t + fb.freeboard_dist

        if armor.main.len + armor.end.len > hull.lwl:
            diagnostics.error("armor.main.len", "Main + End armor belts too long")
        if armor.upper.len > hull.lwl:
            diagnostics.error("armor.upper.len", "Upper belt too long")

        for name in ("main", "end", "upper"):
            if getattr(armor, name).hgt > derived.max_belt_hgt:
                diagnostics.error(f"armor.{name}.hgt", f"{name.capitalize()} belt too high")

        if armor.bulkhead.len > hull.lwl:
            diagnostics.error("armor.bulkhead.len", "Torpedo bulkhead too long")
        if armor.bulge.hgt > side:
            diagnostics.error("armor.bulge.hgt", "Torpedo bulge too high")
        if armor.bulkhead.hgt > side:
            diagnostics.error("armor.bulkhead.hgt", "Torpedo bulkhead too high")

        max_fraction = self.tables.bulkhead(armor.bh_kind).max_beam_fraction
        if armor.bulkhead.thick > 0 and armor.bh_beam > hull.b * max_fraction:
            diagnostics.error("armor.bh_beam", "Beam between torpedo bulkheads too wide")

        if derived.wgt_total > derived.budget:
            diagnostics.error("armor", "Design Failure: Reduce armour or increase Displacement")
