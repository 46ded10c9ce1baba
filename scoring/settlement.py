from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from analytics.stats import player_totals
from models.player import Player
from models.round_state import RoundState, Teams
from models.settlement import Settlement

from .formats import GameFormat, compute_format, parse_format, refresh_formats
from .status import format_winners, summarize


def build_settlement(
    players: Sequence[Player],
    state: RoundState,
    formats: Iterable[Union[str, GameFormat]],
    teams: Optional[Teams] = None,
) -> Settlement:
    """
    Close out a round: every hole counts, every active format is replayed
    one last time and bundled with the full card.
    """
    active = [parse_format(f) for f in formats]
    final_state = refresh_formats(players, state.revised(finished=True), teams)

    results = {
        game_format: compute_format(game_format, players, final_state, teams)
        for game_format in active
    }

    return Settlement(
        players=list(players),
        teams=teams,
        formats=[f.value for f in active],
        state=final_state,
        scorecards=[player_totals(p.name, final_state.scores[p.name]) for p in players],
        match_play=results.get(GameFormat.MATCH_PLAY),
        skins=results.get(GameFormat.SKINS),
        nassau=results.get(GameFormat.NASSAU),
        six_point=results.get(GameFormat.SIX_POINT),
        fourball=results.get(GameFormat.FOURBALL),
        foursomes=results.get(GameFormat.FOURSOMES),
        scramble=results.get(GameFormat.SCRAMBLE),
        status=summarize(active, final_state, players, teams),
        winners=format_winners(
            match_play=results.get(GameFormat.MATCH_PLAY),
            skins=results.get(GameFormat.SKINS),
            nassau=results.get(GameFormat.NASSAU),
            six_point=results.get(GameFormat.SIX_POINT),
            fourball=results.get(GameFormat.FOURBALL),
            foursomes=results.get(GameFormat.FOURSOMES),
            scramble=results.get(GameFormat.SCRAMBLE),
        ),
    )
