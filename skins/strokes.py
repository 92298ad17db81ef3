import logging
import math
from typing import Optional

from models import CourseProfile
from skins.config import HALF_POP, StrokePolicy, get_stroke_policy
from skins.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def handicap_stroke(
    course: CourseProfile,
    handicap_index: Optional[float],
    hole_number: int,
    category: Optional[str] = None,
    policy: Optional[StrokePolicy] = None,
) -> float:
    """Strokes a player receives on a hole under the half-pop rule.

    A player gets half a stroke on every hole whose difficulty rank is at
    or below the whole part of their handicap index, and nothing elsewhere.
    This is a single pass: a handicap above the number of holes still gets
    at most half a stroke per hole. No handicap index means no strokes.
    """
    if handicap_index is None:
        return 0.0

    category = category or course.default_category
    rank = course.get_hole_rank(hole_number, category)
    if rank is None:
        policy = StrokePolicy(policy) if policy else get_stroke_policy()
        message = (
            f"No handicap rank for hole {hole_number} in category '{category}'"
            f" on {course.name or 'course'}"
        )
        if policy is StrokePolicy.STRICT:
            raise InvalidInputError(message)
        logger.warning("%s; allocating no stroke", message)
        return 0.0

    if rank <= math.floor(handicap_index):
        return HALF_POP
    return 0.0
