"""Six-Point system for threesomes.

Six points are shared on every hole by net score, then the running totals
are shifted so the trailing player sits on zero. The shift does not add
across holes, so totals are always rebuilt from the first hole.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from models.player import Player
from models.results import SixPointResult
from models.round_state import RoundState

logger = logging.getLogger(__name__)

ALL_TIED = (2, 2, 2)
TIED_FOR_FIRST = (3, 3, 0)
TIED_FOR_SECOND = (3, 1, 1)
ALL_DIFFERENT = (4, 2, 0)


def allocate_hole(net_scores: Dict[str, int]) -> Dict[str, int]:
    """Split a hole's points among three players by their net scores."""
    ranked: List[Tuple[str, int]] = sorted(net_scores.items(), key=lambda item: item[1])
    (first, low), (second, middle), (third, high) = ranked

    if low == middle == high:
        allocation = ALL_TIED
    elif low == middle:
        allocation = TIED_FOR_FIRST
    elif middle == high:
        allocation = TIED_FOR_SECOND
    else:
        allocation = ALL_DIFFERENT
    return dict(zip((first, second, third), allocation))


def normalize(points: Dict[str, int]) -> Dict[str, int]:
    """Take the lowest total off everyone, keeping the gaps between players."""
    if not points:
        return {}
    floor = min(points.values())
    return {name: total - floor for name, total in points.items()}


def calculate_six_point(players: Sequence[Player], state: RoundState) -> Optional[SixPointResult]:
    """Six-Point standings for exactly three players; None for any other group."""
    if len(players) != 3:
        return None

    raw = {p.name: 0 for p in players}
    holes_counted = 0
    for hole_number in range(1, state.holes_in_play + 1):
        nets = {p.name: state.net(p.name, hole_number) for p in players}
        if any(net is None for net in nets.values()):
            continue

        hole_points = allocate_hole(nets)
        for name, value in hole_points.items():
            raw[name] += value
        holes_counted += 1
        logger.debug("Six Point hole %d: nets=%s points=%s running=%s",
                     hole_number, nets, hole_points, raw)

    points = normalize(raw)
    logger.debug("Six Point through hole %d: raw=%s normalized=%s",
                 state.holes_in_play, raw, points)
    return SixPointResult(points=points, raw_points=raw, holes_counted=holes_counted)
