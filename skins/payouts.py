"""
Splitting the pot across skins in whole currency units.

The pot is divided by the number of skins as an exact fraction. Each winner
first gets the floor of their share; the few units lost to flooring are then
handed out one at a time, round-robin, in payout priority order. The amounts
always add up to the pot exactly.

Two policies from ``skins.config`` drive the details:

- ``DISPLAY_ROUNDING`` names the rule used to show the skin value as a whole
  unit (``ROUNDING_MODES``).
- ``PAYOUT_PRIORITY`` lists the sort keys, most significant first, that
  decide who receives leftover units (``PRIORITY_KEYS``). Display position is
  always the final tie-break, so the order never depends on the order the
  awards were passed in.
"""

import math
from fractions import Fraction
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from models import PayoutEntry, SkinAward
from skins import config
from skins.exceptions import InvalidInputError
from skins.resolver import sort_for_display


def raw_skin_value(pot: int, total_skins: int) -> Optional[Fraction]:
    """Exact value of one skin, or None when no skins were won."""
    if total_skins <= 0:
        return None
    return Fraction(pot, total_skins)


def round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def round_half_even(value: Fraction) -> int:
    return round(value)


ROUNDING_MODES: Dict[str, Callable[[Fraction], int]] = {
    "half_up": round_half_up,
    "half_even": round_half_even,
}

# Each key takes (skin count, display position of the player's first award).
PRIORITY_KEYS: Dict[str, Callable[[int, int], int]] = {
    "skins_desc": lambda count, first: -count,
    "first_award": lambda count, first: first,
}


def get_rounding(mode: Optional[str] = None) -> Callable[[Fraction], int]:
    mode = mode or config.DISPLAY_ROUNDING
    if mode not in ROUNDING_MODES:
        raise InvalidInputError(
            f"Unknown display rounding '{mode}', expected one of {sorted(ROUNDING_MODES)}"
        )
    return ROUNDING_MODES[mode]


def display_skin_value(pot: int, total_skins: int, rounding: Optional[str] = None) -> int:
    """Skin value rounded to a whole unit for display. 0 when no skins."""
    round_value = get_rounding(rounding)
    value = raw_skin_value(pot, total_skins)
    if value is None:
        return 0
    return round_value(value)


def payout_order(
    awards: Sequence[SkinAward],
    priority: Optional[Sequence[str]] = None,
) -> List[Tuple[str, int]]:
    """(player_id, skin count) pairs in payout priority order."""
    priority = config.PAYOUT_PRIORITY if priority is None else priority
    unknown = [name for name in priority if name not in PRIORITY_KEYS]
    if unknown:
        raise InvalidInputError(
            f"Unknown payout priority {unknown}, expected names from {sorted(PRIORITY_KEYS)}"
        )

    counts: Dict[str, int] = {}
    first_position: Dict[str, int] = {}
    for position, award in enumerate(sort_for_display(awards)):
        counts[award.player_id] = counts.get(award.player_id, 0) + 1
        first_position.setdefault(award.player_id, position)

    def sort_key(player_id: str) -> Tuple[int, ...]:
        count, first = counts[player_id], first_position[player_id]
        return tuple(PRIORITY_KEYS[name](count, first) for name in priority) + (first,)

    return [(player_id, counts[player_id]) for player_id in sorted(counts, key=sort_key)]


def allocate_payouts(
    pot: int,
    awards: Sequence[SkinAward],
    priority: Optional[Sequence[str]] = None,
) -> List[PayoutEntry]:
    """Payout per winner, in payout priority order.

    Returns an empty list when there are no skins; the pot then stays
    undistributed.
    """
    if isinstance(pot, bool) or not isinstance(pot, int):
        raise InvalidInputError(f"Pot must be a whole number, got {pot!r}")
    if pot < 0:
        raise InvalidInputError(f"Pot cannot be negative, got {pot}")

    value = raw_skin_value(pot, len(awards))
    if value is None:
        return []

    order = payout_order(awards, priority)
    amounts = {player_id: math.floor(count * value) for player_id, count in order}

    leftover = pot - sum(amounts.values())
    index = 0
    while leftover > 0:
        player_id = order[index % len(order)][0]
        amounts[player_id] += 1
        leftover -= 1
        index += 1

    return [
        PayoutEntry(player_id=player_id, skins=count, amount=amounts[player_id])
        for player_id, count in order
    ]
