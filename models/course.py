from pydantic import Field, model_validator
from typing import List, Optional

from .base import BaseGolfModel
from .hole import Hole
from .tee import TeeBox


class Course(BaseGolfModel):
    """Golf course with its holes and tee options."""
    id: Optional[str] = None
    name: Optional[str] = None
    location: Optional[str] = None
    holes: List[Hole] = Field(default_factory=list)
    tee_boxes: List[TeeBox] = Field(default_factory=list)
    total_par: Optional[int] = Field(None, ge=27, le=80)

    @model_validator(mode='after')
    def validate_holes(self):
        numbers = [h.number for h in self.holes]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Hole numbers must be unique")
        return self

    @model_validator(mode='after')
    def validate_stroke_index_ranking(self):
        """Stroke indices rank difficulty, so no two holes share one from the same tee."""
        if not self.holes or any(h.stroke_index is None for h in self.holes):
            return self
        for tee_color in self._ranked_tees():
            ranking = [h.stroke_index_for(tee_color) for h in self.holes]
            if len(ranking) != len(set(ranking)):
                raise ValueError(f"Duplicate stroke index for tee '{tee_color}'")
            if len(ranking) == 18 and sorted(ranking) != list(range(1, 19)):
                raise ValueError(f"Stroke indices for tee '{tee_color}' must rank holes 1-18")
        return self

    def _ranked_tees(self) -> List[Optional[str]]:
        """Tee colors a player can be ranked from: the tee boxes plus any per-tee keys."""
        colors = [tee.color for tee in self.tee_boxes]
        for hole in self.holes:
            if hole.stroke_index is not None and hole.stroke_index.kind == "per_tee":
                colors.extend(hole.stroke_index.values)

        tees: List[Optional[str]] = []
        for color in colors:
            if color.lower() not in (t.lower() for t in tees):
                tees.append(color)
        # Uniform rankings read the same from any tee
        return tees or [None]

    @property
    def hole_count(self) -> int:
        return len(self.holes)

    def get_tee(self, color: Optional[str]) -> Optional[TeeBox]:
        """Get a tee by its color."""
        for tee in self.tee_boxes:
            if tee.matches(color):
                return tee
        return None

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number (1-18)."""
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None

    def get_par(self, tee_color: Optional[str] = None) -> Optional[int]:
        """Course par: explicit total, then the tee's own par, then summed hole pars."""
        if self.total_par is not None:
            return self.total_par
        tee = self.get_tee(tee_color)
        if tee and tee.par is not None:
            return tee.par
        if not self.holes:
            return None
        return sum(h.par_for(tee_color) for h in self.holes)

    @property
    def front_nine_par(self) -> Optional[int]:
        """Calculate par for holes 1-9."""
        front = [h for h in self.holes if 1 <= h.number <= 9]
        if not front:
            return None
        return sum(h.par_for() for h in front)

    @property
    def back_nine_par(self) -> Optional[int]:
        """Calculate par for holes 10-18."""
        back = [h for h in self.holes if 10 <= h.number <= 18]
        if not back:
            return None
        return sum(h.par_for() for h in back)
