"""API request/response models. Every request carries the full round it scores."""

from pydantic import BaseModel, Field, model_validator
from typing import Dict, List, Optional

from models import Course, Player, RoundState, Teams


class HoleScoreRequest(BaseModel):
    """Inputs for scoring one cell of the grid."""
    gross: Optional[int] = Field(None, ge=1, le=15)
    handicap_index: float = Field(0.0, ge=-10, le=54)
    par: int = Field(4, ge=3, le=6)
    stroke_index: int = Field(..., ge=1, le=18)
    course_rating: Optional[float] = Field(None, ge=55.0, le=85.0)
    slope_rating: Optional[int] = Field(None, ge=55, le=155)
    reference_par: Optional[int] = Field(None, ge=27, le=80)
    hole_count: int = Field(18, ge=1, le=18)


class HandicapsRequest(BaseModel):
    course: Course
    players: List[Player]
    reference_par: Optional[int] = Field(None, ge=27, le=80)


class HandicapsResponse(BaseModel):
    course_handicaps: Dict[str, int]


class RoundRequest(BaseModel):
    """A round snapshot: roster, grid and (for status/settlement) active formats."""
    players: List[Player]
    state: RoundState
    teams: Optional[Teams] = None
    formats: List[str] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_roster(self):
        names = [p.name for p in self.players]
        if len(set(names)) != len(names):
            raise ValueError("Player names must be unique within a round")
        missing = [n for n in names if n not in self.state.scores]
        if missing:
            raise ValueError(f"No scores for: {', '.join(missing)}")
        return self


class FormatsResponse(BaseModel):
    player_count: int
    formats: List[str]


class StatusResponse(BaseModel):
    current_hole: int
    lines: List[str]
