"""Human-readable match status, one line per active format."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Union

from analytics.stats import cumulative_scores
from models.player import Player
from models.results import (
    MatchPlayResult,
    NassauResult,
    ScrambleResult,
    SixPointResult,
    SkinsResult,
    TeamMatchResult,
)
from models.round_state import RoundState, Teams

from .formats import GameFormat, parse_format
from .match_play import calculate_match_play
from .nassau import calculate_nassau
from .six_point import calculate_six_point
from .skins import calculate_skins
from .teams import calculate_fourball, calculate_foursomes, calculate_scramble


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def match_status(leader: Optional[str], margin: int, holes_remaining: int) -> str:
    """
    Match play wording, with closeout once the trailing side cannot catch up.

    "All Square", "A is 2-Up", "A wins 4&3"; a match decided on the last
    hole reads "A wins 1-Up".
    """
    if leader is None or margin == 0:
        return "All Square"
    if margin > holes_remaining:
        if holes_remaining == 0:
            return f"{leader} wins {margin}-Up"
        return f"{leader} wins {margin}&{holes_remaining}"
    return f"{leader} is {margin}-Up"


# ================================================================
# Per-format lines
# ================================================================

def match_play_line(result: MatchPlayResult) -> str:
    if result.clinched_by:
        return match_status(result.clinched_by, result.clinched_margin, result.clinched_remaining)
    return match_status(result.leader, result.margin, result.holes_remaining)


def skins_line(result: SkinsResult) -> str:
    leaders = result.leaders()
    if not leaders:
        return "No skins yet"
    count = result.skins[leaders[0]]
    if len(leaders) == 1:
        return f"{leaders[0]} has {_plural(count, 'skin')}"
    return f"Tied with {_plural(count, 'skin')} each"


def nassau_lines(result: NassauResult) -> List[str]:
    lines: List[str] = []
    if result.front_decided and result.front_winner:
        lines.append(f"{result.front_winner} won Front 9")
    if result.back_decided:
        totals = sorted((p.total for p in result.points.values()), reverse=True)
        if totals and totals[0] > 0:
            runner_up = totals[1] if len(totals) > 1 else 0
            lines.append(f"Nassau: {totals[0]}-{runner_up}")
    return lines


def six_point_line(result: SixPointResult) -> str:
    ordered = sorted(result.points.values(), reverse=True)
    if not ordered or ordered[0] == 0:
        return "Six Point: All tied at 0"
    leaders = result.leaders()
    if len(leaders) == 1:
        leader = leaders[0]
        others = sorted((v for n, v in result.points.items() if n != leader), reverse=True)
        return f"Six Point: {leader} leads {result.points[leader]}-" + "-".join(str(v) for v in others)
    return "Six Point: Tied " + "-".join(str(v) for v in ordered)


def team_match_line(label: str, result: TeamMatchResult) -> str:
    if result.clinched_by:
        return f"{label}: " + match_status(
            result.clinched_by, result.clinched_margin, result.clinched_remaining
        )
    leader = result.leader
    return f"{label}: " + match_status(
        leader.name if leader else None, result.margin, result.holes_remaining
    )


def scramble_line(result: ScrambleResult) -> str:
    if result.holes_counted == 0:
        return "Scramble: No scores yet"
    leader = result.leader
    if leader is None:
        return "Scramble: Teams tied"
    return f"Scramble: {leader.name} leads by {result.differential}"


def stroke_play_line(players: Sequence[Player], state: RoundState) -> str:
    """Fallback when no format has anything to say: the aggregate gross leader."""
    totals = cumulative_scores(players, state)
    if not totals:
        return "Tied"
    ranked = sorted(totals, key=lambda t: t.gross_total)
    if len(ranked) == 1:
        return f"{ranked[0].name} has {_plural(ranked[0].gross_total, 'stroke')}"

    gap = ranked[1].gross_total - ranked[0].gross_total
    if gap == 0:
        return "Tied" if len(ranked) == 2 else "Tied for the lead"
    return f"{ranked[0].name} leads by {_plural(gap, 'stroke')}"


# ================================================================
# Summary
# ================================================================

def summarize(
    active_formats: Iterable[Union[str, GameFormat]],
    state: RoundState,
    players: Sequence[Player],
    teams: Optional[Teams] = None,
) -> List[str]:
    """Status lines for the active formats, recomputed from the grid."""
    active = {parse_format(f) for f in active_formats}
    lines: List[str] = []

    if GameFormat.MATCH_PLAY in active:
        result = calculate_match_play(players, state)
        if result:
            lines.append(match_play_line(result))

    if GameFormat.SKINS in active:
        lines.append(skins_line(calculate_skins(players, state)))

    if GameFormat.NASSAU in active:
        lines.extend(nassau_lines(calculate_nassau(players, state)))

    if GameFormat.SIX_POINT in active:
        result = calculate_six_point(players, state)
        if result:
            lines.append(six_point_line(result))

    if GameFormat.FOURBALL in active:
        result = calculate_fourball(players, state, teams)
        if result:
            lines.append(team_match_line("Fourball", result))

    if GameFormat.FOURSOMES in active:
        result = calculate_foursomes(players, state, teams)
        if result:
            lines.append(team_match_line("Foursomes", result))

    if GameFormat.SCRAMBLE in active:
        result = calculate_scramble(players, state, teams)
        if result:
            lines.append(scramble_line(result))

    if not lines:
        lines.append(stroke_play_line(players, state))
    return lines


def format_winners(
    match_play: Optional[MatchPlayResult] = None,
    skins: Optional[SkinsResult] = None,
    nassau: Optional[NassauResult] = None,
    six_point: Optional[SixPointResult] = None,
    fourball: Optional[TeamMatchResult] = None,
    foursomes: Optional[TeamMatchResult] = None,
    scramble: Optional[ScrambleResult] = None,
) -> List[str]:
    """Final winners board for the results screen."""
    winners: List[str] = []

    if match_play:
        winners.append(f"Match Play: {match_play_line(match_play)}")

    if skins:
        leaders = skins.leaders()
        if len(leaders) == 1:
            winners.append(f"Skins: {leaders[0]} ({_plural(skins.skins[leaders[0]], 'skin')})")
        elif leaders:
            tied = ", ".join(f"{n} ({_plural(skins.skins[n], 'skin')})" for n in leaders)
            winners.append(f"Skins: Tied - {tied}")

    if nassau:
        totals = sorted((p.total for p in nassau.points.values()), reverse=True)
        if totals and totals[0] > 0:
            runner_up = totals[1] if len(totals) > 1 else 0
            winners.append(f"Nassau: {totals[0]}-{runner_up}")

    if six_point:
        leaders = six_point.leaders()
        best = six_point.points[leaders[0]] if leaders else 0
        if len(leaders) == 1 and best > 0:
            others = sorted((v for n, v in six_point.points.items() if n != leaders[0]), reverse=True)
            winners.append(
                f"Six Point: {leaders[0]} ({best} pts) - " + "-".join(str(v) for v in others)
            )
        elif best > 0:
            winners.append(f"Six Point: Tied at {best} points")

    if fourball:
        winners.append(team_match_line("Fourball", fourball))
    if foursomes:
        winners.append(team_match_line("Foursomes", foursomes))
    if scramble and scramble.holes_counted:
        winners.append(scramble_line(scramble))

    return winners or ["All tied!"]
