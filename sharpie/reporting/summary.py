"""
SHARPIE Design Report

Plain-text design summary in the traditional warship data-sheet layout.
Values come from the Imperial engine; metric display converts them at
format time only.
"""

from __future__ import annotations
from typing import List, Optional, Sequence

from sharpie.core.enums import Units
from sharpie.core.units import UnitType, convert, label
from sharpie.core.utils import safe_divide
from sharpie.design.inputs import Belt, DesignInput
from sharpie.pipeline.engine import DesignResult
from sharpie.validators.taxonomy import Diagnostic

INDENT = "   "


class DesignReport:
    """
    Report for one computed design.

    Usage:
        result, diagnostics = compute(design)
        print(DesignReport(design, result, diagnostics).render())
    """

    def __init__(
        self,
        design: DesignInput,
        result: DesignResult,
        diagnostics: Sequence[Diagnostic] = (),
        units: Units = Units.IMPERIAL,
        show_internals: bool = False,
    ):
        self.design = design
        self.result = result
        self.diagnostics = list(diagnostics)
        self.units = Units(units)
        self.show_internals = show_internals

    # =========================================================================
    # FORMATTING
    # =========================================================================

    def _fmt(self, value: float, unit_type: UnitType, places: int = 2) -> str:
        shown = convert(value, unit_type, self.units)
        return f"{shown:,.{places}f} {label(unit_type, self.units)}"

    def _ft(self, value: float) -> str:
        return self._fmt(value, UnitType.LENGTH_LONG)

    def _inch(self, value: float) -> str:
        if self.units == Units.METRIC:
            return self._fmt(value, UnitType.LENGTH_SMALL, 0)
        return f'{value:.2f}"'

    def _tons(self, value: float) -> str:
        return self._fmt(value, UnitType.DISPLACEMENT, 0)

    def _lb(self, value: float) -> str:
        return self._fmt(value, UnitType.WEIGHT, 0)

    def _hp(self, value: float) -> str:
        if self.units == Units.METRIC:
            return self._fmt(value, UnitType.POWER, 0)
        return f"{value:,.0f} {self.result.engine.hp_type}"

    def _pct(self, weight: float) -> str:
        return f"{safe_divide(weight, self.result.hull.d) * 100.0:.1f} %"

    # =========================================================================
    # SECTIONS
    # =========================================================================

    def heading(self) -> List[str]:
        d = self.design
        title = ", ".join(p for p in (d.name, f"{d.country} {d.kind}".strip()) if p)
        return [f"{title or 'Unnamed design'} laid down {d.year}"]

    def displacements(self) -> List[str]:
        e = self.result.engine
        return [
            "Displacement:",
            f"{INDENT}{self._tons(e.d_lite)} light; {self._tons(e.d_std)} standard; "
            f"{self._tons(e.d)} normal; {self._tons(e.d_max)} full load",
        ]

    def dimensions(self) -> List[str]:
        h = self.result.hull
        return [
            "Dimensions: Length (overall / waterline) x beam x draught (normal / deep)",
            f"{INDENT}({self._ft(h.loa)} / {self._ft(h.lwl)}) x {self._ft(h.b)} "
            f"x ({self._ft(h.t)} / {self._ft(self.result.engine.t_max)})",
        ]

    def armament(self) -> List[str]:
        guns = self.result.guns
        lines = ["Armament:"]
        for battery in guns.batteries:
            if battery.num == 0:
                continue
            lines.append(f"{INDENT}{battery.description}")
            for layout, position in zip(battery.layout_phrases, battery.position_phrases):
                lines.append(f"{INDENT}{INDENT}{layout} {position}")
        lines.append(f"{INDENT}Weight of broadside {self._lb(guns.broadside)}")

        for torp in self.design.torpedoes:
            if torp.num > 0:
                lines.append(
                    f'{INDENT}{torp.num} - {torp.diam:g}" torpedoes, '
                    f"{torp.kind.value.replace('_', ' ')}, {torp.year} Model"
                )
        mines = self.design.mines
        if mines.num > 0:
            lines.append(
                f"{INDENT}{mines.num} mines, {mines.reload} reloads, "
                f"{mines.kind.value.replace('_', ' ')}, {mines.year} Model"
            )
        for asw in self.design.asw:
            if asw.num > 0:
                lines.append(
                    f"{INDENT}{asw.num} {asw.kind.value.replace('_', ' ')}, "
                    f"{asw.reload} reloads, {asw.year} Model"
                )
        return lines

    def _belt(self, name: str, belt: Belt) -> str:
        return (
            f"{INDENT}{name}:\t{self._inch(belt.thick)}\t"
            f"{self._ft(belt.len)}\t{self._ft(belt.hgt)}"
        )

    def armour(self) -> List[str]:
        armor = self.design.armor
        derived = self.result.armor
        lines = [
            "Armour:",
            " - Belts:\tWidth (max)\tLength (avg)\tHeight (avg)",
            self._belt("Main", armor.main),
            self._belt("Ends", armor.end),
            self._belt("Upper", armor.upper),
            f"{INDENT}Main belt covers {derived.belt_coverage * 100.0:.0f} % of normal length",
        ]
        if armor.bulkhead.thick > 0:
            lines.append(f" - Torpedo bulkhead - {armor.bh_kind.value} bulkheads:")
            lines.append(self._belt("", armor.bulkhead))
            lines.append(f"{INDENT}Beam between torpedo bulkheads {self._ft(armor.bh_beam)}")
        if armor.bulge.thick > 0 or armor.bulge.len > 0:
            lines.append(" - Torpedo bulge:")
            lines.append(self._belt("", armor.bulge))

        deck = armor.deck
        lines.append(
            f" - {deck.kind.description}: forecastle {self._inch(deck.fc)}, "
            f"main {self._inch(deck.md)}, quarterdeck {self._inch(deck.qd)}"
        )
        lines.append(
            f" - Conning towers: Forward {self._inch(armor.ct_fwd)}, Aft {self._inch(armor.ct_aft)}"
        )
        return lines

    def machinery(self) -> List[str]:
        engine = self.design.engine
        e = self.result.engine
        plants = e.fuel_description
        if engine.fuel.is_steam:
            plants = f"{plants}, {e.boiler_description}"
        shafts = "shaft" if engine.shafts == 1 else "shafts"
        return [
            "Machinery:",
            f"{INDENT}{plants},",
            f"{INDENT}{e.drive_description}, {engine.shafts} {shafts}, "
            f"{self._hp(e.hp_max)} = {engine.vmax:.2f} kts",
            f"{INDENT}Range {engine.range:,.0f} nm at {engine.vcruise:.2f} kts",
            f"{INDENT}Bunker at max displacement = {self._tons(e.bunker_max)}"
            + (f" ({engine.pct_coal:.0f} % coal)" if engine.fuel.is_steam else ""),
        ]

    def complement(self) -> List[str]:
        e = self.result.engine
        return ["Complement:", f"{INDENT}{e.crew_min:,} - {e.crew_max:,}"]

    def cost(self) -> List[str]:
        p = self.result.performance
        return ["Cost:", f"{INDENT}£{p.cost_gbp:.3f} million / ${p.cost_usd:.3f} million"]

    def weights(self) -> List[str]:
        e = self.result.engine
        a = self.result.armor
        rows = [
            ("Armament", e.wgt_guns + e.wgt_mounts + e.wgt_weapons),
            ("Armour", e.wgt_armor),
            ("   - Belts", a.wgt_belts),
            ("   - Torpedo bulkhead", a.wgt_torpedo),
            ("   - Armoured deck", a.wgt_deck),
            ("   - Conning towers", a.wgt_ct),
            ("   - Armament", a.wgt_guns),
            ("Machinery", e.wgt_engine),
            ("Hull, fittings & equipment", e.wgt_hull),
            ("Fuel, ammunition & stores", e.wgt_load),
            ("Miscellaneous weights", e.wgt_misc),
        ]
        lines = ["Distribution of weights at normal displacement:"]
        for name, weight in rows:
            lines.append(f"{INDENT}{name}: {self._tons(weight)}, {self._pct(weight)}")
        return lines

    def survivability(self) -> List[str]:
        p = self.result.performance
        return [
            "Overall survivability and seakeeping ability:",
            f"{INDENT}Survivability (Non-critical penetrating hits needed to sink ship):",
            f"{INDENT}{INDENT}{self._tons(p.flotation)} - {p.shell_damage:.1f} shells of main battery, "
            f"{p.torpedo_damage:.1f} torpedoes",
            f"{INDENT}Stability (Unstable if below 1.00): {p.stability_adj:.2f}",
            f"{INDENT}Metacentric height {self._ft(p.gm)}",
            f"{INDENT}Roll period: {p.roll_period:.1f} seconds",
            f"{INDENT}Steadiness - As gun platform (Average = 50 %): {p.steadiness:.0f} %",
            f"{INDENT}{INDENT}- Recoil effect (Restricted arc if above 1.00): {p.recoil:.2f}",
            f"{INDENT}Seaboat quality (Average = 1.00): {p.seakeeping:.2f}",
        ]

    def hull_form(self) -> List[str]:
        h = self.result.hull
        fb = self.result.freeboard
        hull = self.design.hull
        deck = hull.deck
        rows = (
            ("Forecastle", fb.fc_len, "fc_fwd", "fc_aft"),
            ("Forward deck", fb.fd_len, "fd_fwd", "fd_aft"),
            ("Aft deck", fb.ad_len, "ad_fwd", "ad_aft"),
            ("Quarter deck", fb.qd_len, "qd_fwd", "qd_aft"),
        )
        lines = [
            "Hull form characteristics:",
            f"{INDENT}Hull has {fb.deck_description}",
            f"{INDENT}Block coefficient (normal / deep): {h.cb:.3f} / {self.result.engine.cb_max:.3f}",
            f"{INDENT}Length to Beam Ratio: {h.len2beam:.2f} : 1",
            f"{INDENT}'Natural speed' for length: {h.vn:.2f} kts",
            f"{INDENT}Power going to wave formation at top speed: {self.result.engine.pw_max * 100.0:.0f} %",
            f"{INDENT}Bow angle (Positive = bow angles forward): {hull.bow_angle:.2f} degrees",
            f"{INDENT}Stern overhang: {self._ft(hull.stern_overhang)}",
            f"{INDENT}Freeboard % = length of deck as a percentage of waterline length",
            f"{INDENT}{INDENT}{INDENT}Fore end, Aft end",
        ]
        for name, fraction, fwd, aft in rows:
            lines.append(
                f"{INDENT}- {name}:\t{fraction * 100.0:.2f} %, "
                f"{self._ft(deck.height(fwd))}, {self._ft(deck.height(aft))}"
            )
        lines.append(f"{INDENT}- Average freeboard:\t{self._ft(fb.freeboard)}")
        return lines

    def space(self) -> List[str]:
        h = self.result.hull
        p = self.result.performance
        lines = [
            "Ship space, strength and comments:",
            f"{INDENT}Space - Hull below water (magazines/engines, low = better): {p.hull_room * 100.0:.1f} %",
            f"{INDENT}{INDENT}- Above water (accommodation/working, high = better): {p.deck_room * 100.0:.1f} %",
            f"{INDENT}Waterplane Area: {self._fmt(h.wp, UnitType.AREA, 0)}",
            f"{INDENT}Structure weight / hull surface area: "
            f"{self._fmt(safe_divide(self.result.engine.wgt_hull * 2240.0, h.ws), UnitType.WEIGHT_PER_AREA, 0)}",
            f"{INDENT}Hull strength (Relative):",
            f"{INDENT}{INDENT}- Cross-sectional: {p.str_cross:.2f}",
            f"{INDENT}{INDENT}- Longitudinal: {p.str_long:.2f}",
            f"{INDENT}{INDENT}- Overall: {p.str_comp:.2f}",
        ]
        lines.extend(f"{INDENT}{phrase}" for phrase in p.phrases)
        return lines

    def diagnostic_lines(self) -> List[str]:
        if not self.diagnostics:
            return ["Diagnostics:", f"{INDENT}None"]
        return ["Diagnostics:"] + [f"{INDENT}{d}" for d in self.diagnostics]

    def internals(self) -> List[str]:
        h = self.result.hull
        e = self.result.engine
        return [
            "Internals:",
            f"{INDENT}Cs = {h.cs:.4f}",
            f"{INDENT}Cm = {h.cm:.4f}",
            f"{INDENT}Cp = {h.cp:.4f}",
            f"{INDENT}Cwp = {h.cwp:.4f}",
            f"{INDENT}WP = {h.wp:.2f}",
            f"{INDENT}WS = {h.ws:.2f}",
            f"{INDENT}Ts = {h.ts:.4f}",
            f"{INDENT}Stem length = {h.stem_len:.4f}",
            f"{INDENT}Freeboard dist = {self.result.freeboard.freeboard_dist:.4f}",
            f"{INDENT}Leff = {h.leff:.4f}",
            f"{INDENT}Rf max = {e.rf_max:.2f}",
            f"{INDENT}Rf cruise = {e.rf_cruise:.2f}",
            f"{INDENT}Rw max = {e.rw_max:.2f}",
            f"{INDENT}Rw cruise = {e.rw_cruise:.2f}",
            f"{INDENT}Pw max = {e.pw_max:.4f}",
            f"{INDENT}Pw cruise = {e.pw_cruise:.4f}",
            f"{INDENT}hp max = {e.hp_max:.2f}",
            f"{INDENT}hp cruise = {e.hp_cruise:.2f}",
            f"{INDENT}num_engines = {e.num_engines}",
        ]

    # =========================================================================
    # OUTPUT
    # =========================================================================

    def lines(self) -> List[str]:
        sections = [
            self.heading(),
            self.displacements(),
            self.dimensions(),
            self.armament(),
            self.armour(),
            self.machinery(),
            self.complement(),
            self.cost(),
            self.weights(),
            self.survivability(),
            self.hull_form(),
            self.space(),
            self.diagnostic_lines(),
        ]
        if self.show_internals:
            sections.append(self.internals())

        out: List[str] = []
        for section in sections:
            out.extend(section)
            out.append("")
        return out

    def render(self) -> str:
        return "\n".join(self.lines()).rstrip() + "\n"


def render_report(
    design: DesignInput,
    result: DesignResult,
    diagnostics: Sequence[Diagnostic] = (),
    units: Units = Units.IMPERIAL,
    show_internals: Optional[bool] = False,
) -> str:
    return DesignReport(design, result, diagnostics, units, bool(show_internals)).render()
