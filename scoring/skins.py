from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from models.player import Player
from models.results import SkinAward, SkinsResult
from models.round_state import RoundState

logger = logging.getLogger(__name__)


def calculate_skins(players: Sequence[Player], state: RoundState) -> SkinsResult:
    """
    Replay skins over every completed hole.

    The outright low gross wins all skins riding on the hole and the pot
    resets to 1; a shared low score carries the pot to the next hole.
    Holes nobody has scored are skipped without touching the pot.
    """
    skins: Dict[str, int] = {p.name: 0 for p in players}
    awards: List[SkinAward] = []
    carryover = 1

    for hole_number in range(1, state.completed_holes + 1):
        entered = {
            p.name: state.gross(p.name, hole_number)
            for p in players
            if state.gross(p.name, hole_number) is not None
        }
        if not entered:
            continue

        low = min(entered.values())
        winners = [name for name, gross in entered.items() if gross == low]
        if len(winners) == 1:
            skins[winners[0]] += carryover
            awards.append(SkinAward(hole_number=hole_number, value=carryover, winner=winners[0]))
            carryover = 1
        else:
            awards.append(SkinAward(hole_number=hole_number, value=carryover))
            carryover += 1

    logger.debug("Skins through hole %d: %s (carryover %d)", state.completed_holes, skins, carryover)
    return SkinsResult(skins=skins, carryover=carryover, awards=awards)
