from pydantic import Field, field_validator
from typing import List, Optional

from .base import BaseGolfModel


class Tee(BaseGolfModel):
    """A set of tees: ratings plus yardages listed in hole order."""
    name: Optional[str] = None  # "Black", "Gold", "Combo White/Gold", ...
    slope_rating: Optional[float] = Field(None, ge=55, le=155)
    course_rating: Optional[float] = Field(None, ge=55.0, le=85.0)
    yardages: List[int] = Field(default_factory=list, max_length=18)

    @field_validator('yardages')
    @classmethod
    def validate_yardages(cls, v):
        bad = [number for number, yards in enumerate(v, start=1) if yards <= 0]
        if bad:
            raise ValueError(f"Yardages must be positive, check hole(s) {bad}")
        return v

    @property
    def total_yardage(self) -> Optional[int]:
        return sum(self.yardages) if self.yardages else None

    def hole_yardage(self, hole_number: int) -> Optional[int]:
        if 1 <= hole_number <= len(self.yardages):
            return self.yardages[hole_number - 1]
        return None
