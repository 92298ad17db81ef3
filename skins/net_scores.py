import logging
from typing import Dict, Optional

from models import CourseProfile, Game, HoleResult, NetScore, ScoreSheet
from skins.config import MIN_COMPETITIVE_SCORES, StrokePolicy, get_stroke_policy
from skins.strokes import handicap_stroke

logger = logging.getLogger(__name__)


def net_scores_by_hole(
    course: CourseProfile,
    game: Game,
    scores: ScoreSheet,
    policy: Optional[StrokePolicy] = None,
) -> Dict[int, HoleResult]:
    """
    Net score for every recorded gross score, grouped by hole.

    Every hole 1..game.holes is present. Entries follow the roster order
    of ``game.participants`` and include only players with a score on that
    hole. A hole with fewer than two scores is marked not competitive.
    Scores for players who did not sign up are ignored.
    """
    policy = StrokePolicy(policy) if policy else get_stroke_policy()

    roster = set(game.player_ids)
    for player_id in scores.raw:
        if player_id not in roster:
            logger.warning("Ignoring scores for '%s': not signed up for game %s", player_id, game.id)

    results: Dict[int, HoleResult] = {}
    for hole in range(1, game.holes + 1):
        entries = []
        for participant in game.participants:
            player = participant.player
            gross = scores.gross(player.id, hole)
            if gross is None:
                continue

            strokes = handicap_stroke(course, player.handicap_index, hole, player.category, policy)
            entries.append(
                NetScore(player_id=player.id, gross=gross, strokes=strokes, net=gross - strokes)
            )

        results[hole] = HoleResult(
            hole=hole,
            par=course.get_hole_par(hole),
            entries=entries,
            competitive=len(entries) >= MIN_COMPETITIVE_SCORES,
        )
    return results
