"""Handicap index -> course handicap -> strokes received per hole."""

from __future__ import annotations

import math
from typing import Dict, Iterable, Optional

from models.course import Course
from models.player import Player
from models.tee import TeeBox

USGA_NEUTRAL_SLOPE = 113
DEFAULT_COURSE_RATING = 72.0
DEFAULT_REFERENCE_PAR = 72
HOLES_PER_ROUND = 18


def round_half_up(value: float) -> int:
    """Round .5 upward (12.5 -> 13, -12.5 -> -12), unlike Python's round()."""
    return math.floor(value + 0.5)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def course_handicap(
    handicap_index: float,
    slope_rating: float = USGA_NEUTRAL_SLOPE,
    course_rating: float = DEFAULT_COURSE_RATING,
    reference_par: float = DEFAULT_REFERENCE_PAR,
) -> int:
    """
    Course Handicap = Handicap Index x Slope / 113 + (Course Rating - Par).

    Negative for plus-handicappers.
    """
    return round_half_up(
        handicap_index * slope_rating / USGA_NEUTRAL_SLOPE + (course_rating - reference_par)
    )


def strokes_received(
    course_handicap: int, stroke_index: int, hole_count: int = HOLES_PER_ROUND
) -> int:
    """
    Strokes given (positive) or taken back (negative) on one hole.

    One stroke on every hole ranked within the handicap, a second on holes
    ranked within the amount the handicap exceeds the number of holes.
    """
    magnitude = abs(course_handicap)
    direction = _sign(course_handicap)
    strokes = direction if stroke_index <= magnitude else 0
    extra = direction if magnitude > hole_count and stroke_index <= magnitude - hole_count else 0
    return strokes + extra


def hole_strokes(
    handicap_index: float,
    stroke_index: int,
    *,
    slope_rating: float = USGA_NEUTRAL_SLOPE,
    course_rating: float = DEFAULT_COURSE_RATING,
    reference_par: float = DEFAULT_REFERENCE_PAR,
    hole_count: int = HOLES_PER_ROUND,
) -> int:
    ch = course_handicap(handicap_index, slope_rating, course_rating, reference_par)
    return strokes_received(ch, stroke_index, hole_count)


def stroke_holes(
    course_handicap: int, stroke_indexes: Iterable[int], hole_count: int = HOLES_PER_ROUND
) -> int:
    """Number of holes on which any stroke changes hands."""
    return sum(
        1 for index in stroke_indexes if strokes_received(course_handicap, index, hole_count) != 0
    )


def tee_ratings(
    tee: Optional[TeeBox],
    default_course_rating: float = DEFAULT_COURSE_RATING,
    default_slope_rating: int = USGA_NEUTRAL_SLOPE,
) -> tuple[float, int]:
    """(course rating, slope rating) for a tee, neutral ratings when the tee is unknown."""
    if tee is None:
        return default_course_rating, default_slope_rating
    return tee.course_rating, tee.slope_rating


def playing_handicaps(
    players: Iterable[Player],
    course: Course,
    reference_par: Optional[int] = None,
) -> Dict[str, int]:
    """
    Course handicap of each player from their own tee.

    With ``reference_par`` None the par of the course from that tee is used
    (what the pre-round summary shows); pass 72 for the fixed baseline.
    """
    results: Dict[str, int] = {}
    for player in players:
        rating, slope = tee_ratings(course.get_tee(player.tee_color))
        par = reference_par
        if par is None:
            par = course.get_par(player.tee_color) or DEFAULT_REFERENCE_PAR
        results[player.name] = course_handicap(player.handicap_index, slope, rating, par)
    return results
