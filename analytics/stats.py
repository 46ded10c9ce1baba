from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from models.hole_score import HoleScore
from models.player import Player
from models.results import PlayerScorecard, PlayerTotals, SegmentTotals
from models.round_state import RoundState

METRICS = ("gross", "net", "stableford")


def cumulative_scores(
    players: Sequence[Player],
    state: RoundState,
    six_point: Optional[Dict[str, int]] = None,
) -> List[PlayerTotals]:
    """Totals for each player over the holes in play (current hole included once scored)."""
    six_point = six_point or {}
    results: List[PlayerTotals] = []
    for player in players:
        entered = [
            state.score(player.name, n)
            for n in range(1, state.holes_in_play + 1)
            if state.score(player.name, n).is_entered
        ]
        results.append(
            PlayerTotals(
                name=player.name,
                gross_total=sum(s.gross for s in entered),
                stableford_total=sum(s.stableford for s in entered),
                holes_completed=len(entered),
                six_point_total=six_point.get(player.name, 0),
            )
        )
    return results


def _segment(hole_scores: Iterable[HoleScore]) -> SegmentTotals:
    totals = SegmentTotals()
    for score in hole_scores:
        if not score.is_entered:
            continue
        totals.gross += score.gross
        # A cell without a net counts its gross
        totals.net += score.net if score.net is not None else score.gross
        totals.stableford += score.stableford
    return totals


def player_totals(name: str, hole_scores: Sequence[HoleScore]) -> PlayerScorecard:
    """Front nine, back nine and total for one player's card."""
    return PlayerScorecard(
        name=name,
        front9=_segment(hole_scores[:9]),
        back9=_segment(hole_scores[9:18]),
        total=_segment(hole_scores),
    )


def running_totals(
    players: Sequence[Player], state: RoundState, metric: str = "stableford"
) -> Dict[str, List[Optional[int]]]:
    """
    Cumulative metric per player after each hole in play.

    A hole the player has not scored repeats the previous running value;
    entries stay None until the player's first score.
    """
    if metric not in METRICS:
        raise ValueError(f"Unknown metric '{metric}'. Expected one of: {', '.join(METRICS)}")

    series: Dict[str, List[Optional[int]]] = {}
    for player in players:
        running: Optional[int] = None
        values: List[Optional[int]] = []
        for hole_number in range(1, state.holes_in_play + 1):
            score = state.score(player.name, hole_number)
            value = getattr(score, metric)
            if score.is_entered and value is not None:
                running = (running or 0) + value
            values.append(running)
        series[player.name] = values
    return series
