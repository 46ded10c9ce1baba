from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from models.player import Player
from models.results import MatchPlayResult
from models.round_state import RoundState


def find_closeout(
    running_leads: Iterable[Tuple[int, int]], hole_count: int
) -> Optional[Tuple[int, int]]:
    """
    First (hole_number, lead) at which the lead exceeds the holes left.

    ``running_leads`` holds the first side's holes-up after each decided or
    halved hole; a negative lead belongs to the second side.
    """
    for hole_number, lead in running_leads:
        if abs(lead) > hole_count - hole_number:
            return hole_number, lead
    return None


def calculate_match_play(players: Sequence[Player], state: RoundState) -> Optional[MatchPlayResult]:
    """Singles match play on gross scores; None unless exactly two players."""
    if len(players) != 2:
        return None

    first, second = (p.name for p in players)
    holes_won = {first: 0, second: 0}
    running = []
    for hole_number in range(1, state.holes_in_play + 1):
        a = state.gross(first, hole_number)
        b = state.gross(second, hole_number)
        if a is None or b is None:
            continue
        if a < b:
            holes_won[first] += 1
        elif b < a:
            holes_won[second] += 1
        running.append((hole_number, holes_won[first] - holes_won[second]))

    through = state.holes_through([first, second])
    result = MatchPlayResult(
        holes_won=holes_won,
        holes_through=through,
        holes_remaining=state.hole_count - through,
    )
    closeout = find_closeout(running, state.hole_count)
    if closeout:
        hole_number, lead = closeout
        result.clinched_by = first if lead > 0 else second
        result.clinched_margin = abs(lead)
        result.clinched_remaining = state.hole_count - hole_number
    return result
