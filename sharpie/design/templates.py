"""
SHARPIE Design Templates

Starting-point design written by `sharpie new`: a 1906 battleship with a
main battery in twin turrets at the ends and a casemate secondary battery.
"""

from __future__ import annotations

from sharpie.core.enums import (
    BoilerType,
    DeckType,
    DriveType,
    FuelType,
    GunDistribution,
    GunLayout,
    GunType,
    MountType,
    SternType,
    TorpedoType,
)
from .inputs import (
    ArmorInput,
    Battery,
    Belt,
    DeckArmor,
    DeckLayout,
    DesignInput,
    EngineInput,
    GunGroup,
    HullInput,
    MiscWeights,
    Torpedoes,
)


def template_design(name: str = "New design") -> DesignInput:
    """A complete, balanced design to edit from."""
    return DesignInput(
        name=name,
        country="",
        kind="Battleship",
        year=1906,
        hull=HullInput(
            lwl=500.0,
            b=82.0,
            t=27.0,
            d=18000.0,
            stern_type=SternType.CRUISER,
            stern_overhang=5.0,
            deck=DeckLayout(
                fc_len=0.25, fd_len=0.30, qd_len=0.15,
                fc_fwd=28.0, fc_aft=24.0,
                fd_fwd=24.0, fd_aft=20.0,
                ad_fwd=20.0, ad_aft=18.0,
                qd_fwd=18.0, qd_aft=18.0,
            ),
        ),
        batteries=(
            Battery(
                gun_type=GunType.BREECH_LOADING,
                mount_type=MountType.TURRET,
                diameter=12.0,
                caliber=45.0,
                shells=80,
                armor_face=11.0,
                armor_back=8.0,
                armor_barb=11.0,
                groups=(
                    GunGroup(layout=GunLayout.TWIN, distribution=GunDistribution.CENTRE_ENDS, deck=2),
                    GunGroup(),
                ),
            ),
            Battery(
                gun_type=GunType.QUICK_FIRING,
                mount_type=MountType.CASEMATE,
                diameter=6.0,
                caliber=50.0,
                shells=150,
                armor_face=6.0,
                groups=(
                    GunGroup(distribution=GunDistribution.SIDE_EVEN, deck=10),
                    GunGroup(),
                ),
            ),
        ),
        torpedoes=(
            Torpedoes(
                year=1906, num=4, mounts=4, diam=18.0, length=17.0,
                kind=TorpedoType.SUBMERGED_SIDE_TUBES,
            ),
        ),
        armor=ArmorInput(
            main=Belt(thick=11.0, len=280.0, hgt=8.0),
            end=Belt(thick=4.0, len=150.0, hgt=8.0),
            upper=Belt(thick=7.0, len=250.0, hgt=8.0),
            deck=DeckArmor(md=2.5, kind=DeckType.MULTIPLE_PROTECTED),
            ct_fwd=11.0,
            ct_aft=6.0,
        ),
        engine=EngineInput(
            fuel=FuelType.COAL | FuelType.OIL,
            boiler=BoilerType.COMPLEX,
            drive=DriveType.DIRECT,
            vmax=18.0,
            vcruise=10.0,
            range=5000.0,
            shafts=2,
            pct_coal=85.0,
        ),
        misc=MiscWeights(vital=50.0, hull=100.0),
    )
