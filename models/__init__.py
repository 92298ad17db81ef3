from .base import BaseGolfModel, ResultModel
from .course import CourseProfile
from .game import Game
from .player import Participant, Player
from .results import HoleResult, NetScore, PayoutEntry, PlayerStanding, SkinAward, SkinsResult
from .scores import ScoreSheet
from .tee import Tee

__all__ = [
    "BaseGolfModel",
    "ResultModel",
    "CourseProfile",
    "Game",
    "Participant",
    "Player",
    "HoleResult",
    "NetScore",
    "PayoutEntry",
    "PlayerStanding",
    "SkinAward",
    "SkinsResult",
    "ScoreSheet",
    "Tee",
]
