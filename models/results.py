from pydantic import Field, model_validator
from typing import List, Optional

from .base import ResultModel


class NetScore(ResultModel):
    """One player's score on one hole after handicap strokes."""
    player_id: str
    gross: int
    strokes: float = 0.0
    net: float


class HoleResult(ResultModel):
    """Every recorded score on a hole, in roster order."""
    hole: int = Field(..., ge=1, le=18)
    par: Optional[int] = None
    entries: List[NetScore] = Field(default_factory=list)
    competitive: bool = False  # at least two scores to compare


class SkinAward(ResultModel):
    """A skin won on a hole. Closest-to-pin awards carry no scores."""
    hole: int = Field(..., ge=1, le=18)
    player_id: str
    net_score: Optional[float] = None
    gross_score: Optional[int] = None
    score_type: Optional[str] = None  # "birdie", "par", ... when the hole par is known
    is_ctp: bool = False

    @model_validator(mode='after')
    def validate_scores_match_kind(self):
        scores = (self.net_score, self.gross_score, self.score_type)
        if self.is_ctp and any(value is not None for value in scores):
            raise ValueError("Closest-to-pin awards carry no scores")
        if not self.is_ctp and (self.net_score is None or self.gross_score is None):
            raise ValueError("Regular skins need both gross and net scores")
        return self


class PayoutEntry(ResultModel):
    player_id: str
    skins: int = Field(..., ge=1)
    amount: int = Field(..., ge=0)


class PlayerStanding(ResultModel):
    """Per-player summary row for the results table."""
    player_id: str
    name: Optional[str] = None
    holes_played: int = 0
    gross_total: Optional[int] = None
    net_total: Optional[float] = None
    to_par: Optional[int] = None  # gross over par across holes played
    birdies_or_better: int = 0
    eagles: int = 0  # eagle or better
    pars: int = 0
    skins: int = 0
    amount: int = 0
    is_ctp: bool = False


class SkinsResult(ResultModel):
    """Everything computed for one game."""
    pot: int
    total_skins: int
    skin_value_display: int
    undistributed: int  # the whole pot when nobody won a skin, else 0
    skins: List[SkinAward] = Field(default_factory=list)
    payouts: List[PayoutEntry] = Field(default_factory=list)
    hole_results: List[HoleResult] = Field(default_factory=list)
    standings: List[PlayerStanding] = Field(default_factory=list)

    def get_payout(self, player_id: str) -> Optional[PayoutEntry]:
        for payout in self.payouts:
            if payout.player_id == player_id:
                return payout
        return None

    def skins_for_hole(self, hole_number: int) -> List[SkinAward]:
        return [s for s in self.skins if s.hole == hole_number]

    @property
    def ctp_award(self) -> Optional[SkinAward]:
        for skin in self.skins:
            if skin.is_ctp:
                return skin
        return None
