"""Result models produced by the format engines.

Every result is a projection of a RoundState at call time; nothing here
is updated in place between calls.
"""

from pydantic import Field
from typing import Dict, List, Optional

from .base import BaseGolfModel
from .player import Player


# ================================================================
# Skins
# ================================================================

class SkinAward(BaseGolfModel):
    """Outcome of one hole in the skins replay."""
    hole_number: int = Field(..., ge=1, le=18)
    value: int = Field(..., ge=1)  # skins riding on the hole
    winner: Optional[str] = None  # None when the low score was tied


class SkinsResult(BaseGolfModel):
    skins: Dict[str, int] = Field(default_factory=dict)
    carryover: int = Field(1, ge=1)  # value of the next unplayed hole
    awards: List[SkinAward] = Field(default_factory=list)

    @property
    def unclaimed(self) -> int:
        """Skins carried past the last replayed hole and not yet won."""
        return self.carryover - 1

    @property
    def total_awarded(self) -> int:
        return sum(self.skins.values())

    def leaders(self) -> List[str]:
        """Players holding the most skins; empty until a skin is won."""
        best = max(self.skins.values(), default=0)
        if best == 0:
            return []
        return [name for name, count in self.skins.items() if count == best]


# ================================================================
# Nassau
# ================================================================

class NassauPoints(BaseGolfModel):
    front9: int = Field(0, ge=0, le=1)
    back9: int = Field(0, ge=0, le=1)
    overall: int = Field(0, ge=0, le=1)

    @property
    def total(self) -> int:
        return self.front9 + self.back9 + self.overall


class NassauResult(BaseGolfModel):
    points: Dict[str, NassauPoints] = Field(default_factory=dict)
    front_winner: Optional[str] = None
    back_winner: Optional[str] = None
    overall_winner: Optional[str] = None
    front_decided: bool = False
    back_decided: bool = False  # back nine and overall settle together
    segment_totals: Dict[str, Dict[str, int]] = Field(default_factory=dict)


# ================================================================
# Six-Point
# ================================================================

class SixPointResult(BaseGolfModel):
    points: Dict[str, int] = Field(default_factory=dict)  # after normalization
    raw_points: Dict[str, int] = Field(default_factory=dict)
    holes_counted: int = 0

    def leaders(self) -> List[str]:
        best = max(self.points.values(), default=0)
        return [name for name, value in self.points.items() if value == best]


# ================================================================
# Match play and team formats
# ================================================================

class MatchPlayResult(BaseGolfModel):
    holes_won: Dict[str, int] = Field(default_factory=dict)
    holes_through: int = 0
    holes_remaining: int = 0
    # Set once the leader is more holes up than remain
    clinched_by: Optional[str] = None
    clinched_margin: int = 0
    clinched_remaining: int = 0

    @property
    def leader(self) -> Optional[str]:
        (first, first_won), (second, second_won) = self.holes_won.items()
        if first_won == second_won:
            return None
        return first if first_won > second_won else second

    @property
    def margin(self) -> int:
        first_won, second_won = self.holes_won.values()
        return abs(first_won - second_won)


class TeamStanding(BaseGolfModel):
    name: str
    players: List[Player] = Field(default_factory=list)
    holes_won: int = 0
    total_score: int = 0


class TeamMatchResult(BaseGolfModel):
    """Fourball / Foursomes: holes won per side."""
    team_a: TeamStanding
    team_b: TeamStanding
    holes_through: int = 0
    holes_remaining: int = 0
    clinched_by: Optional[str] = None  # team name
    clinched_margin: int = 0
    clinched_remaining: int = 0

    @property
    def leader(self) -> Optional[TeamStanding]:
        if self.team_a.holes_won == self.team_b.holes_won:
            return None
        return self.team_a if self.team_a.holes_won > self.team_b.holes_won else self.team_b

    @property
    def margin(self) -> int:
        return abs(self.team_a.holes_won - self.team_b.holes_won)


class ScrambleResult(BaseGolfModel):
    """Scramble: cumulative best-gross per side, lower leads."""
    team_a: TeamStanding
    team_b: TeamStanding
    holes_counted: int = 0

    @property
    def leader(self) -> Optional[TeamStanding]:
        if self.team_a.total_score == self.team_b.total_score:
            return None
        return self.team_a if self.team_a.total_score < self.team_b.total_score else self.team_b

    @property
    def differential(self) -> int:
        return abs(self.team_a.total_score - self.team_b.total_score)


# ================================================================
# Player aggregates
# ================================================================

class PlayerTotals(BaseGolfModel):
    """Running totals shown alongside match status."""
    name: str
    gross_total: int = 0
    stableford_total: int = 0
    holes_completed: int = 0
    six_point_total: int = 0


class SegmentTotals(BaseGolfModel):
    gross: int = 0
    net: int = 0
    stableford: int = 0


class PlayerScorecard(BaseGolfModel):
    name: str
    front9: SegmentTotals = Field(default_factory=SegmentTotals)
    back9: SegmentTotals = Field(default_factory=SegmentTotals)
    total: SegmentTotals = Field(default_factory=SegmentTotals)
