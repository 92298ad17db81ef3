from .config import StrokePolicy
from .courses import MONARCH_DUNES, get_course
from .engine import compute_skins, configuration_errors
from .exceptions import InvalidConfigurationError, InvalidInputError, SkinsError
from .net_scores import net_scores_by_hole
from .payouts import allocate_payouts, display_skin_value, raw_skin_value
from .resolver import resolve_hole, resolve_skins, sort_for_display
from .score_names import score_type
from .standings import player_standings
from .strokes import handicap_stroke

__all__ = [
    "compute_skins",
    "configuration_errors",
    "handicap_stroke",
    "net_scores_by_hole",
    "resolve_hole",
    "resolve_skins",
    "sort_for_display",
    "allocate_payouts",
    "display_skin_value",
    "raw_skin_value",
    "score_type",
    "player_standings",
    "get_course",
    "MONARCH_DUNES",
    "StrokePolicy",
    "SkinsError",
    "InvalidConfigurationError",
    "InvalidInputError",
]
