import logging
from typing import List, Optional

from models import CourseProfile, Game, ScoreSheet, SkinsResult
from skins.config import StrokePolicy, get_stroke_policy
from skins.exceptions import InvalidConfigurationError
from skins.net_scores import net_scores_by_hole
from skins.payouts import allocate_payouts, display_skin_value
from skins.resolver import resolve_skins
from skins.standings import player_standings

logger = logging.getLogger(__name__)


def configuration_errors(
    course: CourseProfile,
    game: Game,
    ctp_winner: Optional[str] = None,
) -> List[str]:
    """Every reason the course and game cannot be scored together."""
    errors = course.rank_table_errors()

    if game.holes != course.holes:
        errors.append(f"Game is {game.holes} holes but the course profile has {course.holes}")
    if not 1 <= game.ctp_hole <= game.holes:
        errors.append(f"CTP hole must be between 1 and {game.holes}, got {game.ctp_hole}")
    if game.entry_fee <= 0:
        errors.append(f"Entry fee must be positive, got {game.entry_fee}")

    seen = set()
    for player_id in game.player_ids:
        if player_id in seen:
            errors.append(f"Player '{player_id}' is signed up more than once")
        seen.add(player_id)

    if ctp_winner and ctp_winner not in seen:
        errors.append(f"CTP winner '{ctp_winner}' is not signed up for this game")
    return errors


def compute_skins(
    course: CourseProfile,
    game: Game,
    scores: ScoreSheet,
    ctp_winner: Optional[str] = None,
    *,
    policy: Optional[StrokePolicy] = None,
) -> SkinsResult:
    """
    Score a completed skins game.

    Net scores are computed per hole, skins awarded for a unique low net,
    the closest-to-pin skin added, and the pot split across all skins in
    whole units. Raises InvalidConfigurationError before doing any work if
    the course or game is malformed. The same inputs always give the same
    result.
    """
    errors = configuration_errors(course, game, ctp_winner)
    if errors:
        raise InvalidConfigurationError("; ".join(errors), errors)

    policy = StrokePolicy(policy) if policy else get_stroke_policy()

    hole_results = net_scores_by_hole(course, game, scores, policy)
    awards = resolve_skins(hole_results, game.ctp_hole, ctp_winner)

    pot = game.pot
    payouts = allocate_payouts(pot, awards)
    total_skins = len(awards)
    undistributed = pot if total_skins == 0 else 0

    logger.info(
        "Game %s: %d skin(s) from a pot of %d, %d undistributed",
        game.id, total_skins, pot, undistributed,
    )

    return SkinsResult(
        pot=pot,
        total_skins=total_skins,
        skin_value_display=display_skin_value(pot, total_skins),
        undistributed=undistributed,
        skins=awards,
        payouts=payouts,
        hole_results=[hole_results[hole] for hole in sorted(hole_results)],
        standings=player_standings(game, hole_results, awards, payouts),
    )
