"""Net score and Stableford points for a single hole."""

from __future__ import annotations

from typing import Optional

from models.hole_score import HoleScore

from .handicap import (
    DEFAULT_COURSE_RATING,
    DEFAULT_REFERENCE_PAR,
    HOLES_PER_ROUND,
    USGA_NEUTRAL_SLOPE,
    hole_strokes,
)


def net_score(gross: int, strokes: int) -> int:
    """Gross minus handicap strokes, never below zero."""
    return max(0, gross - strokes)


def stableford_points(net: int, par: int) -> int:
    """Points for a net score against par. Double bogey or worse earns nothing."""
    to_par = net - par
    if to_par <= -3:
        return 5  # albatross or better
    if to_par == -2:
        return 4
    if to_par == -1:
        return 3
    if to_par == 0:
        return 2
    if to_par == 1:
        return 1
    return 0


def score_hole(
    gross: Optional[int],
    handicap_index: float,
    par: int,
    stroke_index: int,
    course_rating: float = DEFAULT_COURSE_RATING,
    slope_rating: float = USGA_NEUTRAL_SLOPE,
    reference_par: float = DEFAULT_REFERENCE_PAR,
    hole_count: int = HOLES_PER_ROUND,
) -> HoleScore:
    """Derive the full score cell for a gross entry; None clears the cell."""
    if gross is None:
        return HoleScore()
    strokes = hole_strokes(
        handicap_index,
        stroke_index,
        slope_rating=slope_rating,
        course_rating=course_rating,
        reference_par=reference_par,
        hole_count=hole_count,
    )
    net = net_score(gross, strokes)
    return HoleScore(gross=gross, net=net, stableford=stableford_points(net, par))
