from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel
from .player import Player
from .results import (
    MatchPlayResult,
    NassauResult,
    PlayerScorecard,
    ScrambleResult,
    SixPointResult,
    SkinsResult,
    TeamMatchResult,
)
from .round_state import RoundState, Teams


class Settlement(BaseGolfModel):
    """Final results of a finished round, bundled for display."""
    players: List[Player]
    teams: Optional[Teams] = None
    formats: List[str] = Field(default_factory=list)
    state: RoundState
    scorecards: List[PlayerScorecard] = Field(default_factory=list)

    match_play: Optional[MatchPlayResult] = None
    skins: Optional[SkinsResult] = None
    nassau: Optional[NassauResult] = None
    six_point: Optional[SixPointResult] = None
    fourball: Optional[TeamMatchResult] = None
    foursomes: Optional[TeamMatchResult] = None
    scramble: Optional[ScrambleResult] = None

    status: List[str] = Field(default_factory=list)
    winners: List[str] = Field(default_factory=list)

    def scorecard(self, name: str) -> Optional[PlayerScorecard]:
        for card in self.scorecards:
            if card.name == name:
                return card
        return None
