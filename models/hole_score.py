from pydantic import Field, model_validator
from typing import Optional

from .base import BaseGolfModel


class HoleScore(BaseGolfModel):
    """One player's result on one hole. Net and Stableford are derived from gross."""
    gross: Optional[int] = Field(None, ge=1, le=15)
    net: Optional[int] = Field(None, ge=0)
    stableford: int = Field(0, ge=0, le=5)

    @model_validator(mode='after')
    def validate_score_consistency(self):
        # Net exists exactly when a gross score was entered
        if (self.gross is None) != (self.net is None):
            raise ValueError("Net score must be set if and only if gross score is set")
        if self.gross is None and self.stableford:
            raise ValueError("Stableford points require a gross score")
        return self

    @property
    def is_entered(self) -> bool:
        return self.gross is not None

    def to_par(self, par: int, use_net: bool = False) -> Optional[int]:
        """Score relative to par (+2, -1, etc.)."""
        strokes = self.net if use_net else self.gross
        if strokes is None:
            return None
        return strokes - par
