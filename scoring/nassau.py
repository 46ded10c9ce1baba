from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Tuple

from models.player import Player
from models.results import NassauPoints, NassauResult
from models.round_state import RoundState

logger = logging.getLogger(__name__)

# (points field, first hole, last hole)
SEGMENTS = (
    ("front9", 1, 9),
    ("back9", 10, 18),
    ("overall", 1, 18),
)


def _segment_totals(
    players: Sequence[Player], state: RoundState, first: int, last: int
) -> Dict[str, int]:
    """Gross total per player over the segment, counting only entered holes."""
    totals: Dict[str, int] = {}
    for player in players:
        holes = (state.gross(player.name, n) for n in range(first, last + 1))
        totals[player.name] = sum(g for g in holes if g is not None)
    return totals


def _segment_winner(totals: Dict[str, int]) -> Optional[str]:
    """Strictly lowest total; a tie for low halves the segment."""
    if len(totals) < 2:
        return None
    low = min(totals.values())
    leaders = [name for name, total in totals.items() if total == low]
    return leaders[0] if len(leaders) == 1 else None


def _segment_bounds(state: RoundState, first: int, last: int) -> Optional[Tuple[int, int]]:
    if first > state.hole_count:
        return None
    return first, min(last, state.hole_count)


def calculate_nassau(players: Sequence[Player], state: RoundState) -> NassauResult:
    """
    Front nine, back nine and overall, one point each to the low gross total.

    A segment is settled once its last hole is behind the group: the front
    nine when the tenth hole begins, the back nine and overall when the
    round is done. A nine-hole round has only the front segment, so overall
    is never scored separately. Totals only include holes that have been
    entered, so a player missing a hole is not held back.
    """
    result = NassauResult(points={p.name: NassauPoints() for p in players})

    for field_name, first, last in SEGMENTS:
        bounds = _segment_bounds(state, first, last)
        if bounds is None or state.completed_holes < bounds[1]:
            continue

        if field_name == "overall" and state.hole_count <= 9:
            result.back_decided = True
            continue

        totals = _segment_totals(players, state, *bounds)
        winner = _segment_winner(totals)
        result.segment_totals[field_name] = totals
        if winner:
            setattr(result.points[winner], field_name, 1)

        if field_name == "front9":
            result.front_decided = True
            result.front_winner = winner
        elif field_name == "back9":
            result.back_winner = winner
        else:
            result.back_decided = True
            result.overall_winner = winner

    logger.debug("Nassau through hole %d: %s", state.completed_holes, result.segment_totals)
    return result
