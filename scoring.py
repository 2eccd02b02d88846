"""
scoring.py
==========
Deterministic, side-effect-free verdict rules.

Extracted from the game engine so they can be unit-tested independently and
adjusted through GameConfig in config.py without touching game logic.
"""

from __future__ import annotations

from typing import List, Optional

from config import GAME_CONFIG
from models import Verdict


def is_sufficient_evidence(tally: int, threshold: Optional[int] = None) -> bool:
    """
    Return True when `tally` corroborating clues meet the threshold.

    Args:
        tally:     Number of collected clues pointing to the accused.
        threshold: Minimum required; defaults to GAME_CONFIG.min_clues (2).

    Examples:
        >>> is_sufficient_evidence(2)
        True
        >>> is_sufficient_evidence(1)
        False
    """
    if threshold is None:
        threshold = GAME_CONFIG.min_clues
    return tally >= threshold


def build_verdict(accused: str, corroborating: List[str], threshold: int) -> Verdict:
    """Assemble the Verdict for `accused` from the clues that matched."""
    tally = len(corroborating)
    return Verdict(
        accused=accused,
        tally=tally,
        threshold=threshold,
        corroborating_clues=list(corroborating),
        success=is_sufficient_evidence(tally, threshold),
    )
