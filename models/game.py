from datetime import datetime
from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel
from .player import Participant


class Game(BaseGolfModel):
    """A completed skins game: format, entry fee and who signed up.

    Cross-field checks (CTP hole in range, positive entry fee, hole count
    matching the course) belong to the engine, which reports them as
    configuration errors.
    """
    id: Optional[str] = None
    course_name: Optional[str] = None
    date: Optional[datetime] = None
    holes: int = Field(18, ge=1, le=18)  # 9 or 18 in practice; short playoffs allowed
    ctp_hole: int = 2
    entry_fee: int = 10
    participants: List[Participant] = Field(default_factory=list)

    @property
    def participant_count(self) -> int:
        return len(self.participants)

    @property
    def pot(self) -> int:
        return self.entry_fee * self.participant_count

    @property
    def player_ids(self) -> List[str]:
        return [p.player_id for p in self.participants]

    @property
    def wolf_player_ids(self) -> List[str]:
        return [p.player_id for p in self.participants if p.wolf]

    def get_participant(self, player_id: str) -> Optional[Participant]:
        for participant in self.participants:
            if participant.player_id == player_id:
                return participant
        return None
