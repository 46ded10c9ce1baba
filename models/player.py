from pydantic import Field, field_validator

from .base import BaseGolfModel


class Player(BaseGolfModel):
    """A golfer entered in a round, with the handicap and tee chosen at setup."""
    name: str = Field(..., min_length=1)
    handicap_index: float = Field(0.0, ge=-10, le=54)
    tee_color: str = "white"

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Player name cannot be blank")
        return v
