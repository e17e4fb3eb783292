"""
SHARPIE Freeboard Stage

Deck segment layout, average freeboards and the deck profile.

Segment heights are compared with exact float equality: a flush deck is
one whose adjoining segment ends are identical.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
import math
import logging

from sharpie.core.constants import year_adj
from sharpie.core.utils import safe_divide
from sharpie.design.inputs import DeckLayout, DesignInput
from sharpie.validators.aggregator import StageDiagnostics
from .results import DerivedFreeboard

logger = logging.getLogger(__name__)


def deck_profile(deck: DeckLayout) -> Tuple[str, ...]:
    """Phrases describing the breaks between deck segments."""
    fc_aft = deck.height("fc_aft")
    fd_fwd = deck.height("fd_fwd")
    fd_aft = deck.height("fd_aft")
    ad_fwd = deck.height("ad_fwd")
    ad_aft = deck.height("ad_aft")
    qd_fwd = deck.height("qd_fwd")

    if fc_aft == fd_fwd and fd_aft == ad_fwd and ad_aft == qd_fwd:
        return ("flush deck",)

    phrases: List[str] = []
    if fc_aft > fd_fwd:
        phrases.append("raised forecastle")
    elif fc_aft < fd_fwd:
        phrases.append("low forecastle")

    if fd_aft > ad_fwd:
        phrases.append("rise forward of midbreak")
    elif fd_aft < ad_fwd:
        phrases.append("rise aft of midbreak")

    if ad_aft > qd_fwd:
        phrases.append("low quarterdeck")
    elif ad_aft < qd_fwd:
        phrases.append("raised quarterdeck")

    return tuple(phrases)


class FreeboardStage:
    """Second calculation stage."""

    def calculate(
        self,
        design: DesignInput,
        diagnostics: Optional[StageDiagnostics] = None,
    ) -> DerivedFreeboard:
        hull = design.hull
        deck = hull.deck
        h = deck.height

        fc_len, fd_len, qd_len = deck.fc, deck.fd, deck.qd
        ad_len = deck.ad

        # Forecastle average is weighted toward the bow
        fc = h("fc_aft") + (h("fc_fwd") - h("fc_aft")) * 0.4
        fd = (h("fd_fwd") + h("fd_aft")) * 0.5
        ad = (h("ad_fwd") + h("ad_aft")) * 0.5
        qd = (h("qd_fwd") + h("qd_aft")) * 0.5

        freeboard = fc * fc_len + fd * fd_len + ad * ad_len + qd * qd_len
        freeboard_dist = safe_divide(fd * fd_len + ad * ad_len, fd_len + ad_len)

        lwl_root = math.sqrt(hull.lwl) if hull.lwl > 0.0 else 0.0

        derived = DerivedFreeboard(
            fc_len=fc_len,
            fd_len=fd_len,
            ad_len=ad_len,
            qd_len=qd_len,
            fc_fwd=h("fc_fwd"),
            fd_aft=h("fd_aft"),
            ad_fwd=h("ad_fwd"),
            fc=fc,
            fd=fd,
            ad=ad,
            qd=qd,
            freeboard=freeboard,
            freeboard_dist=freeboard_dist,
            b=hull.b,
            is_wet_fwd=h("fc_fwd") < 1.1 * lwl_root,
            year_adj=year_adj(design.year),
            deck_profile=deck_profile(deck),
        )

        if diagnostics is not None:
            self._validate(design, derived, diagnostics)

        logger.debug(
            f"Freeboard stage: freeboard={freeboard:.2f} dist={freeboard_dist:.2f} "
            f"profile={derived.deck_description!r}"
        )
        return derived

    def _validate(self, design: DesignInput, fb: DerivedFreeboard, diagnostics: StageDiagnostics) -> None:
        if fb.fc_len > 1.0:
            diagnostics.error("hull.deck.fc_len", "Forecastle too long")
        if fb.fd_len > 1.0:
            diagnostics.error("hull.deck.fd_len", "Forward deck too long")
        if fb.qd_len > 1.0:
            diagnostics.error("hull.deck.qd_len", "Quarterdeck too long")
        if fb.fc_len + fb.fd_len > 1.0:
            diagnostics.error("hull.deck", "Forecastle and forward deck too long")
        if fb.fc_len + fb.fd_len + fb.qd_len > 1.0:
            diagnostics.error("hull.deck", "Forecastle, forward deck and quarterdeck too long")
        if abs(design.hull.bow_angle) >= 90.0:
            diagnostics.error("hull.bow_angle", "Bow angle cannot be 90 degrees or more")
