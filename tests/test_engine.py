import random

import pytest

from models import CourseProfile, Game, Participant, Player, ScoreSheet
from skins.config import StrokePolicy
from skins.courses import MONARCH_DUNES
from skins.engine import compute_skins, configuration_errors
from skins.exceptions import InvalidConfigurationError, InvalidInputError


def _short_course() -> CourseProfile:
    return CourseProfile(name="Three", par=[4, 4, 3], handicap_ranks={"men": [1, 2, 3]})


def _game(*players, holes=3, entry_fee=10, ctp_hole=2) -> Game:
    return Game(
        id="g1",
        holes=holes,
        entry_fee=entry_fee,
        ctp_hole=ctp_hole,
        participants=[Participant(player=p) for p in players],
    )


def _sheet(**scores) -> ScoreSheet:
    """Keyword per player: list of gross scores by hole, None for unrecorded."""
    return ScoreSheet(raw={
        pid: {hole: s for hole, s in enumerate(holes, start=1) if s is not None}
        for pid, holes in scores.items()
    })


# ================================================================
# Scenarios
# ================================================================

def test_scenario_half_pops_and_leftover_unit():
    game = _game(Player(id="X"), Player(id="Y", handicap_index=10))
    scores = _sheet(X=[4, 5, 3], Y=[5, 4, 3])

    result = compute_skins(_short_course(), game, scores, policy=StrokePolicy.STRICT)

    assert [(s.hole, s.player_id, s.gross_score, s.net_score) for s in result.skins] == [
        (1, "X", 4, 4.0),
        (2, "Y", 4, 3.5),
        (3, "Y", 3, 2.5),
    ]
    assert result.pot == 20
    assert result.total_skins == 3
    assert result.skin_value_display == 7          # 6.67 rounded
    assert [(p.player_id, p.skins, p.amount) for p in result.payouts] == [("Y", 2, 14), ("X", 1, 6)]
    assert sum(p.amount for p in result.payouts) == 20
    assert result.undistributed == 0


def test_scenario_tie_withholds_skin():
    game = _game(Player(id="X"), Player(id="Y"))
    scores = _sheet(X=[4, 4, 3], Y=[5, 4, 4])

    result = compute_skins(_short_course(), game, scores)

    assert result.skins_for_hole(2) == []
    assert [s.hole for s in result.skins] == [1, 3]
    assert all(p.player_id == "X" for p in result.payouts)
    assert result.get_payout("X").amount == 20


def test_scenario_ctp_without_regular_skin():
    game = _game(Player(id="X"), Player(id="Y"), Player(id="Z"))
    scores = _sheet(X=[3, 5, 3], Y=[4, 4, 3], Z=[5, 5, 4])

    result = compute_skins(_short_course(), game, scores, ctp_winner="Z")

    assert result.total_skins == 3
    assert result.ctp_award.hole == 2
    assert result.ctp_award.net_score is None
    assert result.get_payout("Z").skins == 1
    assert result.get_payout("Z").amount == 10     # one skin of 30 / 3
    assert sum(p.amount for p in result.payouts) == 30


def test_scenario_no_skins_leaves_pot_undistributed():
    game = _game(Player(id="X"), Player(id="Y"), Player(id="Z"))
    # hole 1 tied, hole 2 only X scored, hole 3 nobody scored
    scores = _sheet(X=[4, 4, None], Y=[4, None, None], Z=[5, None, None])

    result = compute_skins(_short_course(), game, scores)

    assert result.skins == []
    assert result.payouts == []
    assert result.total_skins == 0
    assert result.pot == 30
    assert result.undistributed == 30
    assert result.skin_value_display == 0
    assert [h.competitive for h in result.hole_results] == [True, False, False]


def test_ctp_and_regular_skin_on_same_hole():
    game = _game(Player(id="X"), Player(id="Y"))
    scores = _sheet(X=[4, 2, 4], Y=[4, 3, 4])

    result = compute_skins(_short_course(), game, scores, ctp_winner="X")

    assert [(s.hole, s.is_ctp) for s in result.skins] == [(2, False), (2, True)]
    assert result.get_payout("X").skins == 2
    assert result.get_payout("X").amount == 20


# ================================================================
# Properties
# ================================================================

def _random_game(seed):
    rng = random.Random(seed)
    holes = rng.choice([9, 18])
    course = MONARCH_DUNES if holes == 18 else MONARCH_DUNES.nine_hole_profile(rng.choice(["front", "back"]))
    players = [
        Player(
            id=f"p{i}",
            handicap_index=rng.choice([None, 0, 3.2, 9.9, 14, 22.5, 36]),
            category=rng.choice([None, "men", "ladies"]),
        )
        for i in range(rng.randint(2, 12))
    ]
    game = Game(
        id=f"seed-{seed}",
        holes=holes,
        ctp_hole=rng.randint(1, holes),
        entry_fee=rng.choice([5, 10, 20, 25]),
        participants=[Participant(player=p, wolf=rng.random() < 0.5) for p in players],
    )
    scores = ScoreSheet(raw={
        p.id: {h: rng.randint(2, 8) for h in range(1, holes + 1) if rng.random() < 0.9}
        for p in players
    })
    ctp_winner = rng.choice([None] + [p.id for p in players])
    return course, game, scores, ctp_winner


@pytest.mark.parametrize("seed", range(40))
def test_payout_invariants_hold(seed):
    course, game, scores, ctp_winner = _random_game(seed)

    result = compute_skins(course, game, scores, ctp_winner)

    assert result.pot == game.entry_fee * game.participant_count
    assert all(1 <= s.hole <= game.holes for s in result.skins)
    assert all(p.amount >= 0 for p in result.payouts)
    if result.total_skins:
        assert sum(p.amount for p in result.payouts) == result.pot
        assert result.undistributed == 0
    else:
        assert result.undistributed == result.pot

    regular_holes = [s.hole for s in result.skins if not s.is_ctp]
    assert len(regular_holes) == len(set(regular_holes))     # one regular skin per hole
    assert len([s for s in result.skins if s.is_ctp]) == (1 if ctp_winner else 0)


@pytest.mark.parametrize("seed", range(5))
def test_result_is_deterministic(seed):
    first = compute_skins(*_random_game(seed))
    second = compute_skins(*_random_game(seed))
    assert first.model_dump_json() == second.model_dump_json()


# ================================================================
# Standings
# ================================================================

def test_standings_summarize_each_player():
    game = _game(Player(id="X", name="Xavier"), Player(id="Y", handicap_index=10), Player(id="Z"))
    scores = _sheet(X=[4, 5, 3], Y=[5, 4, 3])

    result = compute_skins(_short_course(), game, scores, ctp_winner="X")

    by_id = {row.player_id: row for row in result.standings}
    # X and Y both win 15; Y has the lower net total
    assert [row.player_id for row in result.standings] == ["Y", "X", "Z"]
    assert by_id["X"].name == "Xavier"
    assert by_id["X"].gross_total == 12
    assert by_id["X"].skins == 2                 # hole 1 plus CTP
    assert by_id["X"].is_ctp
    assert by_id["X"].to_par == 1
    assert by_id["X"].pars == 2
    assert by_id["Y"].net_total == 10.5
    assert by_id["Y"].holes_played == 3
    assert by_id["Z"].gross_total is None
    assert by_id["Z"].net_total is None
    assert by_id["Z"].to_par is None
    assert by_id["Z"].amount == 0
    assert sum(row.amount for row in result.standings) == result.pot


def test_standings_count_scores_against_par():
    game = _game(Player(id="X"), Player(id="Y"))
    scores = _sheet(X=[2, 3, 3], Y=[4, 4, 3])

    result = compute_skins(_short_course(), game, scores)

    assert [(s.hole, s.score_type) for s in result.skins] == [(1, "eagle"), (2, "birdie")]
    assert [h.par for h in result.hole_results] == [4, 4, 3]
    x, y = result.standings
    assert (x.player_id, x.to_par, x.eagles, x.birdies_or_better, x.pars) == ("X", -3, 1, 2, 1)
    assert (y.player_id, y.to_par, y.eagles, y.birdies_or_better, y.pars) == ("Y", 0, 0, 0, 3)


def test_standings_ordered_by_winnings_then_net():
    game = _game(Player(id="a"), Player(id="b"), Player(id="c"), Player(id="d"))
    scores = _sheet(a=[6, 3, 4], b=[5, 5, 2], c=[3, 5, 4], d=[6, 6, 5])

    result = compute_skins(_short_course(), game, scores)

    # 40 / 3 skins: 13 each, the leftover unit goes to c for hole 1
    assert [(row.player_id, row.amount) for row in result.standings] == [
        ("c", 14),
        ("b", 13),     # net 12
        ("a", 13),     # net 13
        ("d", 0),
    ]


# ================================================================
# Configuration errors
# ================================================================

def test_configuration_errors_are_collected():
    course = CourseProfile(par=[4, 4, 3], handicap_ranks={"men": [1, 1, 3]})
    game = _game(Player(id="X"), Player(id="X"), holes=9, entry_fee=0, ctp_hole=10)

    errors = configuration_errors(course, game, ctp_winner="nobody")

    assert len(errors) == 6
    with pytest.raises(InvalidConfigurationError) as exc_info:
        compute_skins(course, game, ScoreSheet(), "nobody")
    assert exc_info.value.errors == errors


@pytest.mark.parametrize(
    "game_kwargs, ctp_winner, message",
    [
        ({"holes": 9}, None, "course profile has 3"),
        ({"ctp_hole": 4}, None, "CTP hole"),
        ({"entry_fee": 0}, None, "Entry fee"),
        ({"entry_fee": -5}, None, "Entry fee"),
        ({}, "Q", "not signed up"),
    ],
)
def test_each_configuration_error_aborts(game_kwargs, ctp_winner, message):
    game = _game(Player(id="X"), Player(id="Y"), **game_kwargs)
    scores = _sheet(X=[4, 4, 4], Y=[5, 5, 5])

    with pytest.raises(InvalidConfigurationError, match=message):
        compute_skins(_short_course(), game, scores, ctp_winner)


def test_unknown_category_is_an_input_error_when_strict():
    game = _game(Player(id="X", handicap_index=5, category="juniors"), Player(id="Y"))
    scores = _sheet(X=[4, 4, 4], Y=[5, 5, 5])

    with pytest.raises(InvalidInputError):
        compute_skins(_short_course(), game, scores, policy=StrokePolicy.STRICT)

    result = compute_skins(_short_course(), game, scores, policy=StrokePolicy.LENIENT)
    assert result.total_skins == 3
