"""Team formats for a four-player group split into two sides."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from models.player import Player
from models.results import ScrambleResult, TeamMatchResult, TeamStanding
from models.round_state import RoundState, Teams

from .match_play import find_closeout

TEAM_A = "Team A"
TEAM_B = "Team B"


def _applicable(players: Sequence[Player], teams: Optional[Teams]) -> bool:
    return len(players) == 4 and teams is not None and teams.covers(players)


def _standings(teams: Teams):
    return (
        TeamStanding(name=TEAM_A, players=list(teams.team_a)),
        TeamStanding(name=TEAM_B, players=list(teams.team_b)),
    )


def _entered(values) -> List[int]:
    return [v for v in values if v is not None]


def _match_result(
    state: RoundState,
    teams: Teams,
    team_a: TeamStanding,
    team_b: TeamStanding,
    running: List[Tuple[int, int]],
) -> TeamMatchResult:
    through = state.holes_through(teams.team_a_names + teams.team_b_names)
    result = TeamMatchResult(
        team_a=team_a,
        team_b=team_b,
        holes_through=through,
        holes_remaining=state.hole_count - through,
    )
    closeout = find_closeout(running, state.hole_count)
    if closeout:
        hole_number, lead = closeout
        result.clinched_by = team_a.name if lead > 0 else team_b.name
        result.clinched_margin = abs(lead)
        result.clinched_remaining = state.hole_count - hole_number
    return result


def calculate_fourball(
    players: Sequence[Player], state: RoundState, teams: Optional[Teams]
) -> Optional[TeamMatchResult]:
    """Better-ball match play: each side's lower net score decides the hole."""
    if not _applicable(players, teams):
        return None

    team_a, team_b = _standings(teams)
    running: List[Tuple[int, int]] = []
    for hole_number in range(1, state.holes_in_play + 1):
        a_scores = _entered(state.net(name, hole_number) for name in teams.team_a_names)
        b_scores = _entered(state.net(name, hole_number) for name in teams.team_b_names)
        if not a_scores or not b_scores:
            continue

        a_best, b_best = min(a_scores), min(b_scores)
        if a_best < b_best:
            team_a.holes_won += 1
        elif b_best < a_best:
            team_b.holes_won += 1
        running.append((hole_number, team_a.holes_won - team_b.holes_won))

    return _match_result(state, teams, team_a, team_b, running)


def calculate_foursomes(
    players: Sequence[Player], state: RoundState, teams: Optional[Teams]
) -> Optional[TeamMatchResult]:
    """
    Alternate-shot match play.

    The side's ball is scored on its first-listed player; the partner's
    card is not read.
    """
    if not _applicable(players, teams):
        return None

    team_a, team_b = _standings(teams)
    a_ball, b_ball = teams.team_a[0].name, teams.team_b[0].name
    running: List[Tuple[int, int]] = []
    for hole_number in range(1, state.holes_in_play + 1):
        a_net, b_net = state.net(a_ball, hole_number), state.net(b_ball, hole_number)
        if a_net is None or b_net is None:
            continue

        if a_net < b_net:
            team_a.holes_won += 1
        elif b_net < a_net:
            team_b.holes_won += 1
        running.append((hole_number, team_a.holes_won - team_b.holes_won))

    return _match_result(state, teams, team_a, team_b, running)


def calculate_scramble(
    players: Sequence[Player], state: RoundState, teams: Optional[Teams]
) -> Optional[ScrambleResult]:
    """Stroke play on each side's best gross per hole."""
    if not _applicable(players, teams):
        return None

    team_a, team_b = _standings(teams)
    holes_counted = 0
    for hole_number in range(1, state.holes_in_play + 1):
        a_scores = _entered(state.gross(name, hole_number) for name in teams.team_a_names)
        b_scores = _entered(state.gross(name, hole_number) for name in teams.team_b_names)
        if not a_scores or not b_scores:
            continue

        team_a.total_score += min(a_scores)
        team_b.total_score += min(b_scores)
        holes_counted += 1

    return ScrambleResult(team_a=team_a, team_b=team_b, holes_counted=holes_counted)
