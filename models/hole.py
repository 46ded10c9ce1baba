from pydantic import BaseModel, Field, field_validator
from typing import Annotated, Dict, Literal, Optional, Union

from .base import BaseGolfModel

DEFAULT_TEE = "white"
DEFAULT_PAR = 4


class Uniform(BaseModel):
    """A value shared by every tee."""
    kind: Literal["uniform"] = "uniform"
    value: int

    def resolve(self, tee_color: Optional[str] = None) -> Optional[int]:
        return self.value

    def values_in_use(self):
        return [self.value]


class PerTee(BaseModel):
    """A value that differs by tee color, e.g. {"white": 4, "red": 5}."""
    kind: Literal["per_tee"] = "per_tee"
    values: Dict[str, int] = Field(default_factory=dict)
    fallback_tee: str = DEFAULT_TEE

    def resolve(self, tee_color: Optional[str] = None) -> Optional[int]:
        """Look up a tee (case-insensitive), falling back to the fallback tee."""
        lowered = {color.lower(): value for color, value in self.values.items()}
        if tee_color and tee_color.lower() in lowered:
            return lowered[tee_color.lower()]
        return lowered.get(self.fallback_tee.lower())

    def values_in_use(self):
        return list(self.values.values())


TeeValue = Annotated[Union[Uniform, PerTee], Field(discriminator="kind")]


def _coerce_tee_value(v):
    """Accept a bare int or a plain {color: value} mapping as shorthand."""
    if isinstance(v, bool):
        return v
    if isinstance(v, int):
        return Uniform(value=v)
    if isinstance(v, dict) and "kind" not in v:
        return PerTee(values=v)
    return v


class Hole(BaseGolfModel):
    """Represents a single hole on a golf course."""
    number: int = Field(..., ge=1, le=18)
    par: TeeValue = Field(default_factory=lambda: Uniform(value=DEFAULT_PAR))
    stroke_index: Optional[TeeValue] = None
    name: Optional[str] = None
    yardages: Dict[str, int] = Field(default_factory=dict)  # {"white": 385, "red": 320}

    @field_validator('par', 'stroke_index', mode='before')
    @classmethod
    def coerce_shorthand(cls, v):
        return _coerce_tee_value(v)

    @field_validator('par')
    @classmethod
    def validate_par_values(cls, v):
        for par in v.values_in_use():
            if not 3 <= par <= 6:
                raise ValueError(f"Par {par} must be 3-6")
        return v

    @field_validator('stroke_index')
    @classmethod
    def validate_stroke_index_values(cls, v):
        if v is None:
            return v
        for index in v.values_in_use():
            if not 1 <= index <= 18:
                raise ValueError(f"Stroke index {index} must be 1-18")
        return v

    @field_validator('yardages')
    @classmethod
    def validate_yardages(cls, v):
        for tee_color, yardage in v.items():
            if yardage < 0:
                raise ValueError(f"Yardage for '{tee_color}' cannot be negative")
        return v

    def par_for(self, tee_color: Optional[str] = None) -> int:
        """Par played from a tee."""
        par = self.par.resolve(tee_color)
        return par if par is not None else DEFAULT_PAR

    def stroke_index_for(self, tee_color: Optional[str] = None) -> int:
        """Difficulty ranking from a tee; unranked holes rank by their number."""
        if self.stroke_index is None:
            return self.number
        index = self.stroke_index.resolve(tee_color)
        return index if index is not None else self.number

    def yardage_for(self, tee_color: Optional[str] = None) -> Optional[int]:
        lowered = {color.lower(): yards for color, yards in self.yardages.items()}
        if tee_color and tee_color.lower() in lowered:
            return lowered[tee_color.lower()]
        return lowered.get(DEFAULT_TEE)
