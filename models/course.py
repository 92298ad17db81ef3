from pydantic import Field, field_validator
from typing import Dict, List, Optional

from .base import BaseGolfModel
from .tee import Tee

NINE_HOLE_SIDES = {"front": range(0, 9), "back": range(9, 18)}


class CourseProfile(BaseGolfModel):
    """Static course data used for handicap stroke allocation.

    ``handicap_ranks`` maps a category ("men", "ladies") to the difficulty
    rank of each hole in hole order. Rank 1 is the hardest hole.
    """
    name: Optional[str] = None
    par: List[int] = Field(default_factory=list)
    handicap_ranks: Dict[str, List[int]] = Field(default_factory=dict)
    default_category: str = "men"
    tees: List[Tee] = Field(default_factory=list)

    @field_validator('par')
    @classmethod
    def validate_par_values(cls, v):
        for number, par in enumerate(v, start=1):
            if not 3 <= par <= 6:
                raise ValueError(f"Par {par} for hole {number} must be 3-6")
        return v

    @property
    def holes(self) -> int:
        return len(self.par)

    @property
    def total_par(self) -> Optional[int]:
        return sum(self.par) if self.par else None

    @property
    def categories(self) -> List[str]:
        return list(self.handicap_ranks)

    def get_tee(self, name: str) -> Optional[Tee]:
        """Get a tee by name, case-insensitive."""
        for tee in self.tees:
            if tee.name and tee.name.lower() == name.lower():
                return tee
        return None

    def get_hole_par(self, hole_number: int) -> Optional[int]:
        if 1 <= hole_number <= self.holes:
            return self.par[hole_number - 1]
        return None

    def get_hole_rank(self, hole_number: int, category: Optional[str] = None) -> Optional[int]:
        """Difficulty rank of a hole, or None for an unknown category or hole."""
        ranks = self.handicap_ranks.get(category or self.default_category)
        if ranks is None or not 1 <= hole_number <= len(ranks):
            return None
        return ranks[hole_number - 1]

    def rank_table_errors(self) -> List[str]:
        """List every structural problem with the course data. Empty when usable."""
        errors = []
        if not 1 <= self.holes <= 18:
            errors.append(f"Course must have 1 to 18 holes of par data, got {self.holes}")
        if not self.handicap_ranks:
            errors.append("Course has no handicap rank tables")
        elif self.default_category not in self.handicap_ranks:
            errors.append(f"Default category '{self.default_category}' has no rank table")

        expected = list(range(1, self.holes + 1))
        for category, ranks in self.handicap_ranks.items():
            if sorted(ranks) != expected:
                errors.append(
                    f"Rank table '{category}' must be a permutation of 1..{self.holes}"
                )
        return errors

    def nine_hole_profile(self, side: str = "front") -> "CourseProfile":
        """Nine-hole profile cut from an 18-hole course.

        The nine holes keep their relative difficulty and are re-ranked 1..9.
        """
        if self.holes != 18:
            raise ValueError(f"Only 18-hole courses can be split, this one has {self.holes}")
        if side not in NINE_HOLE_SIDES:
            raise ValueError(f"Side must be 'front' or 'back', got '{side}'")

        indexes = NINE_HOLE_SIDES[side]
        ranks: Dict[str, List[int]] = {}
        for category, table in self.handicap_ranks.items():
            nine = [table[i] for i in indexes]
            by_difficulty = sorted(range(9), key=lambda i: nine[i])
            reranked = [0] * 9
            for position, i in enumerate(by_difficulty, start=1):
                reranked[i] = position
            ranks[category] = reranked

        # 18-hole slope and rating do not carry over to a nine
        tees = [
            Tee(name=tee.name, yardages=tee.yardages[indexes.start:indexes.stop])
            for tee in self.tees
        ]
        return CourseProfile(
            name=f"{self.name} ({side.title()} 9)" if self.name else None,
            par=[self.par[i] for i in indexes],
            handicap_ranks=ranks,
            default_category=self.default_category,
            tees=tees,
        )
