"""Catalog of the courses the group plays."""

from typing import Dict, Optional

from models import CourseProfile, Tee
from skins.config import get_default_course_name
from skins.exceptions import InvalidConfigurationError

MONARCH_DUNES = CourseProfile(
    name="Monarch Dunes",
    par=[4, 3, 5, 4, 4, 3, 4, 5, 4, 4, 4, 3, 5, 3, 5, 4, 3, 4],
    handicap_ranks={
        "men": [1, 15, 9, 3, 7, 11, 13, 5, 17, 2, 14, 16, 4, 18, 8, 12, 10, 6],
        "ladies": [1, 17, 7, 5, 11, 15, 9, 3, 13, 6, 12, 16, 2, 18, 4, 10, 14, 8],
    },
    default_category="men",
    tees=[
        Tee(
            name="Black",
            yardages=[437, 200, 567, 423, 400, 255, 440, 490, 397, 453, 367, 141, 540, 140, 560, 350, 200, 470],
            slope_rating=136, course_rating=73.3,
        ),
        Tee(
            name="Gold",
            yardages=[407, 180, 550, 377, 370, 199, 350, 480, 387, 423, 357, 115, 530, 125, 550, 337, 177, 423],
            slope_rating=130, course_rating=71.0,
        ),
        Tee(
            name="Combo White/Gold",
            yardages=[373, 180, 477, 377, 337, 199, 350, 460, 387, 360, 357, 115, 515, 125, 523, 337, 148, 423],
            slope_rating=126, course_rating=69.7,
        ),
        Tee(
            name="White",
            yardages=[373, 140, 477, 347, 337, 184, 333, 460, 373, 360, 337, 103, 515, 117, 523, 307, 148, 387],
            slope_rating=123, course_rating=68.7,
        ),
        Tee(
            name="Bronze",
            yardages=[343, 127, 457, 317, 300, 159, 303, 427, 327, 343, 303, 83, 467, 100, 477, 287, 137, 363],
            slope_rating=117, course_rating=66.5,
        ),
        Tee(
            name="Combo Bronze/Green",
            yardages=[310, 127, 400, 297, 300, 115, 303, 387, 327, 303, 303, 83, 420, 100, 443, 287, 87, 363],
            slope_rating=113, course_rating=64.5,
        ),
        Tee(
            name="Green",
            yardages=[310, 120, 400, 297, 273, 115, 270, 387, 290, 303, 256, 61, 420, 83, 443, 260, 87, 327],
            slope_rating=110, course_rating=63.1,
        ),
    ],
)

COURSES: Dict[str, CourseProfile] = {
    MONARCH_DUNES.name.lower(): MONARCH_DUNES,
}


def get_course(name: Optional[str] = None, nine: Optional[str] = None) -> CourseProfile:
    """Look up a catalog course by name (case-insensitive).

    ``nine`` ("front" or "back") cuts a nine-hole profile from an 18-hole
    course. With no name the configured default course is used.
    """
    key = (name or get_default_course_name()).strip().lower()
    course = COURSES.get(key)
    if course is None:
        raise InvalidConfigurationError(
            f"Unknown course '{name}'. Known courses: "
            f"{', '.join(c.name for c in COURSES.values())}"
        )
    if nine is None:
        return course
    try:
        return course.nine_hole_profile(nine)
    except ValueError as exc:
        raise InvalidConfigurationError(str(exc)) from exc
