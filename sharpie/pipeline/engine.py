"""
SHARPIE Design Calculation Engine

compute() runs the six stages in fixed order over an immutable design:

    Hull -> Freeboard -> Guns -> Armor -> Engine -> Performance

Each stage sees only the design, the lookup tables and the records of the
stages before it. Design problems become Diagnostics; the only exception
that can escape is UnknownKeyError for a table key outside its domain.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple
import logging

from sharpie.armor.results import DerivedArmor
from sharpie.armor.stage import ArmorStage
from sharpie.core.enums import Stage
from sharpie.design.inputs import DesignInput
from sharpie.hull.freeboard import FreeboardStage
from sharpie.hull.geometry import HullGeometryStage
from sharpie.hull.results import DerivedFreeboard, DerivedHull
from sharpie.machinery.results import DerivedEngine
from sharpie.machinery.stage import EngineStage
from sharpie.performance.results import DerivedPerformance
from sharpie.performance.stage import PerformanceStage
from sharpie.tables.lookup import DEFAULT_TABLES, LookupTables
from sharpie.validators.aggregator import ValidationEngine
from sharpie.validators.taxonomy import Diagnostic
from sharpie.weapons.guns import GunBatteryStage
from sharpie.weapons.results import DerivedGuns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DesignResult:
    """All derived records of one compute() call."""
    hull: DerivedHull
    freeboard: DerivedFreeboard
    guns: DerivedGuns
    armor: DerivedArmor
    engine: DerivedEngine
    performance: DerivedPerformance

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hull": self.hull.to_dict(),
            "freeboard": self.freeboard.to_dict(),
            "guns": self.guns.to_dict(),
            "armor": self.armor.to_dict(),
            "engine": self.engine.to_dict(),
            "performance": self.performance.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DesignResult":
        return cls(
            hull=DerivedHull.from_dict(data["hull"]),
            freeboard=DerivedFreeboard.from_dict(data["freeboard"]),
            guns=DerivedGuns.from_dict(data["guns"]),
            armor=DerivedArmor.from_dict(data["armor"]),
            engine=DerivedEngine.from_dict(data["engine"]),
            performance=DerivedPerformance.from_dict(data["performance"]),
        )


def compute(
    design: DesignInput,
    tables: LookupTables = DEFAULT_TABLES,
) -> Tuple[DesignResult, List[Diagnostic]]:
    """
    Derive every quantity of a design.

    Args:
        design: Design snapshot; never modified
        tables: Lookup tables for guns, mounts, layouts, distributions
            and bulkheads

    Returns:
        (DesignResult, diagnostics in emission order)

    Raises:
        UnknownKeyError: a design key is missing from the tables
    """
    validation = ValidationEngine()

    hull = HullGeometryStage().calculate(design, validation.for_stage(Stage.HULL))
    fb = FreeboardStage().calculate(design, validation.for_stage(Stage.FREEBOARD))
    guns = GunBatteryStage(tables).calculate(design, hull, fb, validation.for_stage(Stage.GUNS))
    armor = ArmorStage(tables).calculate(design, hull, fb, guns, validation.for_stage(Stage.ARMOR))
    engine = EngineStage().calculate(design, hull, guns, armor, validation.for_stage(Stage.ENGINE))
    performance = PerformanceStage().calculate(
        design, hull, fb, guns, armor, engine, validation.for_stage(Stage.PERFORMANCE),
    )

    result = DesignResult(
        hull=hull,
        freeboard=fb,
        guns=guns,
        armor=armor,
        engine=engine,
        performance=performance,
    )

    logger.info(
        f"Computed '{design.name or 'unnamed'}': d={hull.d:.0f}t "
        f"hull={engine.wgt_hull:.0f}t errors={len(validation.errors)} "
        f"warnings={len(validation.warnings)}"
    )
    return result, validation.diagnostics
