"""Score a skins game from a JSON file.

    python -m skins.cli data/sample_game.json
    python -m skins.cli data/sample_game.json --json

The file holds the game, the raw scores and the closest-to-pin winner:

    {
      "course": "Monarch Dunes",
      "nine": null,
      "game": {"id": "...", "holes": 18, "ctp_hole": 2, "entry_fee": 10,
               "participants": [{"player": {"id": "ann", "handicap_index": 8.4}}]},
      "scores": {"ann": {"1": 4, "2": 3}},
      "ctp_winner": "ann"
    }
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from pydantic import ValidationError

from models import CourseProfile, Game, ScoreSheet, SkinsResult
from skins.config import StrokePolicy
from skins.courses import get_course
from skins.engine import compute_skins
from skins.exceptions import SkinsError


def load_game_document(path: str) -> Tuple[CourseProfile, Game, ScoreSheet, Optional[str]]:
    with open(path) as f:
        document = json.load(f)

    game = Game(**document["game"])
    course = get_course(document.get("course") or game.course_name, nine=document.get("nine"))
    scores = ScoreSheet(raw=document.get("scores", {}))
    return course, game, scores, document.get("ctp_winner")


def format_report(game: Game, result: SkinsResult) -> str:
    """Hole-by-hole skins followed by the payouts."""
    names = {p.player_id: p.player.display_name for p in game.participants}
    lines = [
        f"Total pot: ${result.pot}  Skins: {result.total_skins}  "
        f"Skin value: ${result.skin_value_display}",
        "",
    ]

    if result.total_skins == 0:
        lines.append("No skins were awarded.")
        if result.undistributed:
            lines.append(f"Undistributed pot: ${result.undistributed}")
        return "\n".join(lines)

    for hole in range(1, game.holes + 1):
        skin = next((s for s in result.skins_for_hole(hole) if not s.is_ctp), None)
        if skin:
            detail = f"{skin.gross_score} gross, {skin.net_score:.1f} net"
            if skin.score_type:
                detail += f", {skin.score_type}"
            lines.append(f"Hole {hole}: {names[skin.player_id]} ({detail})")
        else:
            lines.append(f"Hole {hole}: No skin awarded")

    ctp = result.ctp_award
    if ctp:
        lines.append(f"Closest to Pin (Hole {ctp.hole}): {names[ctp.player_id]}")

    lines.append("")
    lines.append("Payouts:")
    for payout in result.payouts:
        label = "skin" if payout.skins == 1 else "skins"
        lines.append(f"  {names[payout.player_id]}: {payout.skins} {label}, ${payout.amount}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compute skins and payouts for a completed game.")
    parser.add_argument("game_file", help="JSON file with game, scores and ctp_winner")
    parser.add_argument("--json", action="store_true", help="print the full result as JSON")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="allocate no stroke for unknown categories instead of failing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log each hole decision")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        course, game, scores, ctp_winner = load_game_document(args.game_file)
        policy = StrokePolicy.LENIENT if args.lenient else None
        result = compute_skins(course, game, scores, ctp_winner, policy=policy)
    except (OSError, json.JSONDecodeError, KeyError, ValidationError, SkinsError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(format_report(game, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
