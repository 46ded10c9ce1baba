from pydantic import Field, field_validator, model_validator
from typing import Dict, Iterable, List, Optional

from .base import BaseGolfModel
from .hole_score import HoleScore
from .player import Player
from .results import NassauPoints, ScrambleResult, TeamMatchResult


class Teams(BaseGolfModel):
    """A fixed 2-v-2 split of a four-player round."""
    team_a: List[Player]
    team_b: List[Player]

    @field_validator('team_a', 'team_b')
    @classmethod
    def validate_team_size(cls, v):
        if len(v) != 2:
            raise ValueError(f"A team has exactly 2 players, got {len(v)}")
        return v

    @model_validator(mode='after')
    def validate_partition(self):
        overlap = set(self.team_a_names) & set(self.team_b_names)
        if overlap:
            raise ValueError(f"Players on both teams: {', '.join(sorted(overlap))}")
        if len(set(self.team_a_names)) != 2 or len(set(self.team_b_names)) != 2:
            raise ValueError("Team members must be distinct players")
        return self

    @property
    def team_a_names(self) -> List[str]:
        return [p.name for p in self.team_a]

    @property
    def team_b_names(self) -> List[str]:
        return [p.name for p in self.team_b]

    def covers(self, players: Iterable[Player]) -> bool:
        """True when the two teams are exactly the given roster."""
        return sorted(self.team_a_names + self.team_b_names) == sorted(p.name for p in players)


class RoundState(BaseGolfModel):
    """The score grid of one round plus the last computed format standings.

    The grid is the source of truth; the format fields are caches refreshed
    on hole advance and are never read back by the engines.
    """
    current_hole: int = Field(1, ge=1, le=18)
    hole_count: int = Field(18, ge=1, le=18)
    finished: bool = False
    scores: Dict[str, List[HoleScore]] = Field(default_factory=dict)

    skins: Dict[str, int] = Field(default_factory=dict)
    skins_carryover: int = Field(1, ge=1)
    nassau_points: Dict[str, NassauPoints] = Field(default_factory=dict)
    six_point: Dict[str, int] = Field(default_factory=dict)
    fourball: Optional[TeamMatchResult] = None
    foursomes: Optional[TeamMatchResult] = None
    scramble: Optional[ScrambleResult] = None

    @model_validator(mode='after')
    def validate_grid(self):
        if self.current_hole > self.hole_count:
            raise ValueError(f"Current hole {self.current_hole} beyond last hole {self.hole_count}")
        for name, holes in self.scores.items():
            if len(holes) != self.hole_count:
                raise ValueError(f"Scores for '{name}' cover {len(holes)} holes, expected {self.hole_count}")
        return self

    @classmethod
    def new(cls, players: Iterable[Player], hole_count: int = 18) -> "RoundState":
        """Start a round with every score empty."""
        players = list(players)
        return cls(
            hole_count=hole_count,
            scores={p.name: [HoleScore() for _ in range(hole_count)] for p in players},
            skins={p.name: 0 for p in players},
            nassau_points={p.name: NassauPoints() for p in players},
            six_point={p.name: 0 for p in players},
        )

    # --- Windows over the grid ---

    @property
    def completed_holes(self) -> int:
        """Holes behind the player; the current hole is still open."""
        return self.hole_count if self.finished else self.current_hole - 1

    @property
    def holes_in_play(self) -> int:
        """Holes up to and including the current one."""
        return self.hole_count if self.finished else self.current_hole

    def holes_through(self, names: Iterable[str]) -> int:
        """Last hole reached by everyone named; the current hole counts once all have scored it."""
        if self.finished:
            return self.hole_count
        if all(self.score(name, self.current_hole).gross is not None for name in names):
            return self.current_hole
        return self.current_hole - 1

    # --- Grid access ---

    def score(self, name: str, hole_number: int) -> HoleScore:
        """Score cell for a player on a hole (1-based)."""
        return self.scores[name][hole_number - 1]

    def gross(self, name: str, hole_number: int) -> Optional[int]:
        return self.score(name, hole_number).gross

    def net(self, name: str, hole_number: int) -> Optional[int]:
        return self.score(name, hole_number).net

    def with_score(self, name: str, hole_number: int, hole_score: HoleScore) -> "RoundState":
        """Copy of this state with one cell replaced."""
        holes = list(self.scores[name])
        holes[hole_number - 1] = hole_score
        return self.revised(scores={**self.scores, name: holes})
