"""
SHARPIE Gun Layout

Resolves where a gun group sits along the hull: how many mounts are forward
and aft of amidships and the effective freeboard at the guns.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any

from sharpie.core.enums import Placement
from sharpie.core.utils import safe_divide
from sharpie.hull.results import DerivedFreeboard
from sharpie.tables.records import GunDistributionRecord, GunLayoutRecord

# Placements that share mounts between both ends
SPLIT_PLACEMENTS = (Placement.EVEN, Placement.ENDS, Placement.AMIDSHIPS)


@dataclass(frozen=True)
class GroupPosition:
    """Fore and aft split of one gun group."""
    mounts_fwd: float
    mounts_aft: float
    fwd_free: float
    aft_free: float
    free: float  # effective freeboard at the guns

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mounts_fwd": round(self.mounts_fwd, 4),
            "mounts_aft": round(self.mounts_aft, 4),
            "fwd_free": round(self.fwd_free, 4),
            "aft_free": round(self.aft_free, 4),
            "free": round(self.free, 4),
        }


EMPTY_POSITION = GroupPosition(0.0, 0.0, 0.0, 0.0, 0.0)


def _split_sides(placement: Placement, fb: DerivedFreeboard):
    """Lengths compared when a single mount must go wholly to one end."""
    if placement == Placement.EVEN:
        return fb.fc_len + fb.fd_len, fb.ad_len + fb.qd_len
    if placement == Placement.ENDS:
        return fb.fc_len, fb.qd_len
    return fb.fd_len, fb.ad_len


def _frees(placement: Placement, fb: DerivedFreeboard):
    if placement == Placement.EVEN:
        fwd = safe_divide(fb.fc * fb.fc_len + fb.fd * fb.fd_len, fb.fc_len + fb.fd_len)
        aft = safe_divide(fb.ad * fb.ad_len + fb.qd * fb.qd_len, fb.ad_len + fb.qd_len)
        return fwd, aft
    if placement == Placement.ENDS:
        return fb.fc, fb.qd
    if placement in (Placement.FWD_BIAS, Placement.AFT_BIAS):
        return fb.fd, fb.ad
    if placement == Placement.FORWARD:
        return fb.fd, fb.fd
    if placement == Placement.AFT:
        return fb.ad, fb.ad
    if placement == Placement.FD_AFT:
        return fb.fd_aft, fb.fd_aft
    if placement == Placement.AD_FWD:
        return fb.ad_fwd, fb.ad_fwd
    # AMIDSHIPS
    return fb.fd_aft, fb.ad_fwd


def _mounts_forward(placement: Placement, n: int, fb: DerivedFreeboard) -> float:
    if placement in SPLIT_PLACEMENTS and n == 1:
        fwd_side, aft_side = _split_sides(placement, fb)
        return 1.0 if fwd_side >= aft_side else 0.0

    majority = float(min(n // 2 + 1, n))
    if placement == Placement.EVEN:
        return n * (fb.fc_len + fb.fd_len)
    if placement in (Placement.ENDS, Placement.AMIDSHIPS):
        return n / 2.0
    if placement == Placement.FWD_BIAS:
        return majority
    if placement == Placement.AFT_BIAS:
        return n - majority
    if placement in (Placement.FORWARD, Placement.FD_AFT):
        return float(n)
    # AFT, AD_FWD
    return 0.0


def resolve_distribution(
    distribution: GunDistributionRecord,
    num_mounts: int,
    fb: DerivedFreeboard,
    broadside: bool = False,
) -> GroupPosition:
    """
    Fore and aft split and effective freeboard of a gun group.

    A single mount in a split placement goes wholly to the proportionally
    longer end, ties forward. Side-mounted groups are capped by the
    freeboard cap for the mount type.
    """
    if num_mounts <= 0:
        return EMPTY_POSITION

    placement = distribution.placement
    mounts_fwd = _mounts_forward(placement, num_mounts, fb)
    mounts_aft = num_mounts - mounts_fwd
    fwd_free, aft_free = _frees(placement, fb)

    free = (fwd_free * mounts_fwd + aft_free * mounts_aft) / num_mounts
    if distribution.side:
        free = min(free, fb.free_cap(broadside))

    return GroupPosition(mounts_fwd, mounts_aft, fwd_free, aft_free, free)


def mount_phrase(num_mounts: int, layout: GunLayoutRecord) -> str:
    """e.g. "2 twin mounts"."""
    plural = "" if num_mounts == 1 else "s"
    return f"{num_mounts} {layout.description} mount{plural}"
