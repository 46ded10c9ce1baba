from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Union

from models.player import Player
from models.round_state import RoundState, Teams

from .exceptions import UnknownFormatError
from .match_play import calculate_match_play
from .nassau import calculate_nassau
from .six_point import calculate_six_point
from .skins import calculate_skins
from .teams import calculate_fourball, calculate_foursomes, calculate_scramble


class GameFormat(str, Enum):
    """Competitive formats that can run side by side in one round."""
    MATCH_PLAY = "matchplay"
    SKINS = "skins"
    NASSAU = "nassau"
    SIX_POINT = "sixpoint"
    FOURBALL = "fourball"
    FOURSOMES = "foursomes"
    SCRAMBLE = "scramble"


TEAM_FORMATS = (GameFormat.FOURBALL, GameFormat.FOURSOMES, GameFormat.SCRAMBLE)

# Formats offered at setup, by group size
FORMATS_BY_GROUP_SIZE = {
    2: [GameFormat.MATCH_PLAY, GameFormat.NASSAU, GameFormat.SKINS],
    3: [GameFormat.SIX_POINT, GameFormat.NASSAU, GameFormat.SKINS],
    4: [
        GameFormat.FOURBALL,
        GameFormat.FOURSOMES,
        GameFormat.SCRAMBLE,
        GameFormat.NASSAU,
        GameFormat.SKINS,
    ],
}


def available_formats(player_count: int) -> List[GameFormat]:
    return list(FORMATS_BY_GROUP_SIZE.get(player_count, [GameFormat.NASSAU, GameFormat.SKINS]))


def parse_format(format_name: Union[str, GameFormat]) -> GameFormat:
    """Normalize a format name ("Skins", "six-point", GameFormat.SKINS ...)."""
    if isinstance(format_name, GameFormat):
        return format_name
    key = format_name.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
    try:
        return GameFormat(key)
    except ValueError:
        raise UnknownFormatError(f"Unknown format: {format_name!r}") from None


def compute_format(
    format_name: Union[str, GameFormat],
    players: Sequence[Player],
    state: RoundState,
    teams: Optional[Teams] = None,
):
    """
    Replay one format from the first hole.

    Returns the format's result model, or None when the format does not
    apply to this group (e.g. Six-Point without exactly three players).
    """
    game_format = parse_format(format_name)
    if game_format is GameFormat.MATCH_PLAY:
        return calculate_match_play(players, state)
    if game_format is GameFormat.SKINS:
        return calculate_skins(players, state)
    if game_format is GameFormat.NASSAU:
        return calculate_nassau(players, state)
    if game_format is GameFormat.SIX_POINT:
        return calculate_six_point(players, state)
    if game_format is GameFormat.FOURBALL:
        return calculate_fourball(players, state, teams)
    if game_format is GameFormat.FOURSOMES:
        return calculate_foursomes(players, state, teams)
    return calculate_scramble(players, state, teams)


def refresh_formats(
    players: Sequence[Player], state: RoundState, teams: Optional[Teams] = None
) -> RoundState:
    """Copy of the state with every cached standing recomputed from its grid."""
    skins = calculate_skins(players, state)
    nassau = calculate_nassau(players, state)
    six_point = calculate_six_point(players, state)
    return state.revised(
        skins=skins.skins,
        skins_carryover=skins.carryover,
        nassau_points=nassau.points,
        six_point=six_point.points if six_point else {p.name: 0 for p in players},
        fourball=calculate_fourball(players, state, teams),
        foursomes=calculate_foursomes(players, state, teams),
        scramble=calculate_scramble(players, state, teams),
    )
