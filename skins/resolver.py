import logging
from typing import Dict, Iterable, List, Optional

from models import HoleResult, SkinAward
from skins.score_names import score_type

logger = logging.getLogger(__name__)


def resolve_hole(result: HoleResult) -> Optional[SkinAward]:
    """Skin for the single lowest net score on a hole, if there is one.

    A tie for the lowest net withholds the skin; it does not carry over.
    """
    if not result.competitive:
        logger.debug("Hole %d: %d score(s) recorded, no skin", result.hole, len(result.entries))
        return None

    # sorted() is stable, so equal nets keep roster order
    ranked = sorted(result.entries, key=lambda e: e.net)
    best, runner_up = ranked[0], ranked[1]
    if best.net < runner_up.net:
        return SkinAward(
            hole=result.hole,
            player_id=best.player_id,
            net_score=best.net,
            gross_score=best.gross,
            score_type=score_type(best.gross, result.par),
        )

    logger.debug("Hole %d: tied at %.1f net, no skin", result.hole, best.net)
    return None


def sort_for_display(awards: Iterable[SkinAward]) -> List[SkinAward]:
    """Ascending by hole, closest-to-pin after every numbered hole."""
    return sorted(awards, key=lambda a: (a.is_ctp, a.hole))


def resolve_skins(
    hole_results: Dict[int, HoleResult],
    ctp_hole: int,
    ctp_winner: Optional[str] = None,
) -> List[SkinAward]:
    """All skins for a game in display order.

    The closest-to-pin winner gets one extra skin on ``ctp_hole`` whether
    or not a regular skin was also won there.
    """
    awards = []
    for hole in sorted(hole_results):
        award = resolve_hole(hole_results[hole])
        if award is not None:
            awards.append(award)

    if ctp_winner:
        awards.append(SkinAward(hole=ctp_hole, player_id=ctp_winner, is_ctp=True))

    return sort_for_display(awards)
