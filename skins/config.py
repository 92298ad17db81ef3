"""Engine settings and the scoring policies they select.

Environment:
    SKINS_STROKE_POLICY   strict | lenient (default strict)
    SKINS_DEFAULT_COURSE  catalog course used when a game names none
"""

import os
from enum import Enum

from dotenv import load_dotenv

from skins.exceptions import InvalidConfigurationError

load_dotenv()


class StrokePolicy(str, Enum):
    """What a stroke lookup does for an unknown category or hole."""
    STRICT = "strict"    # raise InvalidInputError
    LENIENT = "lenient"  # log a warning and allocate no stroke


# --- Scoring constants ---

HALF_POP = 0.5
MIN_COMPETITIVE_SCORES = 2

# Rule for showing the skin value as a whole unit: "half_up" (2.5 -> 3) or
# "half_even". See skins.payouts.ROUNDING_MODES.
DISPLAY_ROUNDING = "half_up"

# Sort keys, most significant first, for handing out leftover units:
# "skins_desc" (most skins first) and "first_award" (earliest first award in
# display order). See skins.payouts.PRIORITY_KEYS.
PAYOUT_PRIORITY = ("skins_desc", "first_award")

DEFAULT_COURSE_NAME = "Monarch Dunes"


def get_stroke_policy() -> StrokePolicy:
    value = os.environ.get("SKINS_STROKE_POLICY", StrokePolicy.STRICT.value)
    try:
        return StrokePolicy(value.strip().lower())
    except ValueError as exc:
        raise InvalidConfigurationError(
            f"SKINS_STROKE_POLICY must be one of "
            f"{', '.join(p.value for p in StrokePolicy)}, got '{value}'"
        ) from exc


def get_default_course_name() -> str:
    return os.environ.get("SKINS_DEFAULT_COURSE", DEFAULT_COURSE_NAME)
