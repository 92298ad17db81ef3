from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class Player(BaseGolfModel):
    """A friend on the roster. No handicap index means they play scratch."""
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    handicap_index: Optional[float] = Field(None, ge=0, le=54)
    category: Optional[str] = None  # "men", "ladies"; None uses the course default

    @property
    def display_name(self) -> str:
        return self.name or self.id


class Participant(BaseGolfModel):
    """A player signed up for a game."""
    player: Player
    wolf: bool = False  # side pool, not part of skins

    @property
    def player_id(self) -> str:
        return self.player.id
