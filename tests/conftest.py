"""
SHARPIE Test Configuration and Fixtures

Provides reference designs and the stage records derived from them.
"""

import pytest

from sharpie.core.enums import (
    BoilerType,
    DriveType,
    FuelType,
    GunDistribution,
    GunLayout,
    GunType,
    MountType,
    SternType,
    TorpedoType,
)
from sharpie.design.inputs import (
    Battery,
    DeckLayout,
    DesignInput,
    EngineInput,
    GunGroup,
    HullInput,
    MiscWeights,
    Torpedoes,
)
from sharpie.design.templates import template_design
from sharpie.hull.freeboard import FreeboardStage
from sharpie.hull.geometry import HullGeometryStage
from sharpie.tables.lookup import DEFAULT_TABLES, LookupTables


def make_destroyer(**overrides) -> DesignInput:
    """A 1915 oil-fired turbine destroyer."""
    values = dict(
        name="Test destroyer",
        country="Testland",
        kind="Destroyer",
        year=1915,
        hull=HullInput(
            lwl=300.0,
            b=30.0,
            t=10.0,
            d=1100.0,
            stern_type=SternType.CRUISER,
            deck=DeckLayout(
                fc_len=0.25, fd_len=0.30, qd_len=0.15,
                fc_fwd=18.0, fc_aft=14.0,
                fd_fwd=12.0, fd_aft=11.0,
                ad_fwd=11.0, ad_aft=10.0,
                qd_fwd=10.0, qd_aft=10.0,
            ),
        ),
        batteries=(
            Battery(
                gun_type=GunType.QUICK_FIRING,
                mount_type=MountType.DECK,
                diameter=4.0,
                caliber=45.0,
                shells=120,
                groups=(
                    GunGroup(layout=GunLayout.SINGLE, distribution=GunDistribution.CENTRE_EVEN, deck=3),
                    GunGroup(),
                ),
            ),
        ),
        torpedoes=(
            Torpedoes(
                year=1915, num=4, mounts=2, diam=21.0, length=22.0,
                kind=TorpedoType.DECK_SIDE_TUBES,
            ),
        ),
        engine=EngineInput(
            fuel=FuelType.OIL,
            boiler=BoilerType.TURBINE,
            drive=DriveType.GEARED,
            vmax=34.0,
            vcruise=15.0,
            range=2500.0,
            shafts=2,
            pct_coal=0.0,
        ),
        misc=MiscWeights(vital=5.0),
    )
    values.update(overrides)
    return DesignInput(**values)


@pytest.fixture
def tables() -> LookupTables:
    """The default lookup tables."""
    return DEFAULT_TABLES


@pytest.fixture
def battleship() -> DesignInput:
    """The template battleship."""
    return template_design("Test battleship")


@pytest.fixture
def destroyer() -> DesignInput:
    """A small, fast, lightly armed design."""
    return make_destroyer()


@pytest.fixture
def destroyer_factory():
    """Builds destroyer variants from keyword overrides."""
    return make_destroyer


@pytest.fixture
def empty_design() -> DesignInput:
    """A design with every value left at its default."""
    return DesignInput()


@pytest.fixture
def battleship_hull(battleship):
    """Hull and freeboard records of the template battleship."""
    hull = HullGeometryStage().calculate(battleship)
    fb = FreeboardStage().calculate(battleship)
    return hull, fb
