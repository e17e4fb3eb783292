"""
SHARPIE Performance Phrases

Maps performance figures to the report phrases. Cutoffs are exact.
"""

from __future__ import annotations
from typing import List, Optional


def stability_phrase(stability_adj: float) -> str:
    if stability_adj < 1.0:
        return "Caution: Poor stability - excessive risk of capsizing"
    if stability_adj < 1.15:
        return "Stability is marginal"
    return "Stability is adequate"


def hull_room_phrase(hull_room: float) -> str:
    if hull_room >= 1.2:
        return "Excellent machinery, storage, compartmentation space"
    if hull_room >= 0.9:
        return "Adequate machinery, storage, compartmentation space"
    return "Cramped machinery, storage, compartmentation space"


def deck_room_phrase(deck_room: float) -> str:
    if deck_room >= 0.7:
        return "Excellent accommodation and workspace room"
    if deck_room >= 0.5:
        return "Adequate accommodation and workspace room"
    return "Cramped accommodation and workspace room"


def strength_phrase(str_comp: float) -> str:
    if str_comp < 0.5:
        return "DESIGN FAILURE: Hull structure insufficient for design"
    if str_comp < 0.88:
        return "Hull subject to strain in open-sea"
    return "Hull structure adequate"


def steadiness_phrase(steadiness: float) -> Optional[str]:
    if steadiness >= 70.0:
        return "Ship has slow, easy roll, a good, steady gun platform"
    if steadiness <= 30.0:
        return "Ship has quick, lively roll, not a steady gun platform"
    return None


def seakeeping_phrase(seakeeping: float) -> Optional[str]:
    if seakeeping >= 1.5:
        return "Excellent seaboat, comfortable, can fire her guns in the heaviest weather"
    if seakeeping >= 1.2:
        return "Good seaboat, rides out heavy weather easily"
    if seakeeping < 0.6:
        return "Bad seaboat, wet and uncomfortable, guns useless in heavy weather"
    if seakeeping < 0.8:
        return "Poor seaboat, wet and uncomfortable, reduced performance in heavy weather"
    return None


WET_FORWARD = "Caution: Lacks freeboard forward, wet forward"
RECOIL_RESTRICTS = "Caution: Recoil effect restricts arcs of fire"


def comments(
    stability_adj: float,
    hull_room: float,
    deck_room: float,
    str_comp: float,
    steadiness: float,
    seakeeping: float,
    is_wet_fwd: bool,
    recoil: float,
) -> List[str]:
    """All phrases for a design, in report order."""
    phrases = [
        stability_phrase(stability_adj),
        hull_room_phrase(hull_room),
        deck_room_phrase(deck_room),
        strength_phrase(str_comp),
    ]
    for optional in (steadiness_phrase(steadiness), seakeeping_phrase(seakeeping)):
        if optional is not None:
            phrases.append(optional)
    if is_wet_fwd:
        phrases.append(WET_FORWARD)
    if recoil > 1.0:
        phrases.append(RECOIL_RESTRICTS)
    return phrases
