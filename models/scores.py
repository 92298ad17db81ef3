from pydantic import Field, field_validator
from typing import Dict, Optional

from .base import BaseGolfModel


class ScoreSheet(BaseGolfModel):
    """Gross strokes per player per hole: ``{player_id: {hole: strokes}}``.

    A hole missing from a player's map has not been recorded yet.
    """
    raw: Dict[str, Dict[int, int]] = Field(default_factory=dict)

    @field_validator('raw')
    @classmethod
    def validate_scores(cls, v):
        for player_id, holes in v.items():
            for hole_number, strokes in holes.items():
                if hole_number < 1:
                    raise ValueError(f"Hole number {hole_number} for '{player_id}' must be at least 1")
                if strokes < 1:
                    raise ValueError(
                        f"Strokes {strokes} for '{player_id}' on hole {hole_number} must be positive"
                    )
        return v

    def gross(self, player_id: str, hole_number: int) -> Optional[int]:
        """Recorded gross score, or None if not entered."""
        return self.raw.get(player_id, {}).get(hole_number)

    def holes_recorded(self, player_id: str) -> int:
        return len(self.raw.get(player_id, {}))

    def with_score(self, player_id: str, hole_number: int, strokes: int) -> "ScoreSheet":
        """Copy of the sheet with one score entered or corrected.

        Raises ValidationError for a bad hole number or stroke count.
        """
        player_scores = {**self.raw.get(player_id, {}), hole_number: strokes}
        return ScoreSheet(raw={**self.raw, player_id: player_scores})
