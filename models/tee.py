from pydantic import Field, field_validator
from typing import Optional

from .base import BaseGolfModel


class TeeBox(BaseGolfModel):
    """Represents a tee box option with its ratings."""
    color: str  # "white", "blue", "black", "red", "gold"
    name: Optional[str] = None
    course_rating: float = Field(72.0, ge=55.0, le=85.0)
    slope_rating: int = Field(113, ge=55, le=155)
    total_yardage: Optional[int] = Field(None, ge=0)
    par: Optional[int] = Field(None, ge=27, le=80)

    @field_validator('color')
    @classmethod
    def validate_color(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Tee color cannot be blank")
        return v

    def matches(self, color: Optional[str]) -> bool:
        """Case-insensitive comparison against a player's tee color."""
        return color is not None and self.color.lower() == color.lower()
