import pytest

from models import Course, Hole, Player, TeeBox
from scoring.handicap import (
    course_handicap,
    hole_strokes,
    playing_handicaps,
    round_half_up,
    stroke_holes,
    strokes_received,
    tee_ratings,
)
from scoring.stableford import net_score, score_hole, stableford_points


# ================================================================
# Course handicap
# ================================================================

def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(13.5) == 14
    assert round_half_up(12.49) == 12
    assert round_half_up(-12.5) == -12
    assert round_half_up(-0.4) == 0


def test_course_handicap_neutral_course():
    assert course_handicap(18) == 18
    assert course_handicap(0) == 0
    assert course_handicap(10.4) == 10
    assert course_handicap(10.5) == 11


def test_course_handicap_slope_and_rating():
    # 14.2 * 131 / 113 + (71.3 - 72) = 15.76 -> 16
    assert course_handicap(14.2, 131, 71.3, 72) == 16
    # Course par below 72 adds strokes when rated against its own par
    assert course_handicap(10, 113, 72.0, 70) == 12


def test_course_handicap_plus_player():
    assert course_handicap(-2.5) == -2
    assert course_handicap(-3.0, 130) == -3


def test_course_handicap_is_monotonic_in_index():
    values = [course_handicap(i / 2, 125, 70.5, 72) for i in range(-20, 109)]
    assert values == sorted(values)


# ================================================================
# Strokes per hole
# ================================================================

def test_strokes_received_single_stroke():
    assert strokes_received(10, 10) == 1
    assert strokes_received(10, 11) == 0
    assert strokes_received(0, 1) == 0


def test_strokes_received_second_stroke():
    # 22 strokes: one everywhere, a second on the four hardest holes
    assert strokes_received(22, 4) == 2
    assert strokes_received(22, 5) == 1
    assert sum(strokes_received(22, si) for si in range(1, 19)) == 22


def test_strokes_received_plus_handicap():
    assert strokes_received(-2, 1) == -1
    assert strokes_received(-2, 2) == -1
    assert strokes_received(-2, 3) == 0


def test_strokes_received_nine_holes():
    # On 9 holes the second stroke kicks in past 9
    assert strokes_received(11, 2, hole_count=9) == 2
    assert strokes_received(11, 3, hole_count=9) == 1


def test_strokes_total_matches_handicap():
    for ch in range(0, 37):
        assert sum(strokes_received(ch, si) for si in range(1, 19)) == ch


def test_stroke_holes():
    assert stroke_holes(5, range(1, 19)) == 5
    assert stroke_holes(24, range(1, 19)) == 18
    assert stroke_holes(-3, range(1, 19)) == 3


def test_hole_strokes_scenario():
    assert hole_strokes(18, 10) == 1
    assert hole_strokes(18, 10, slope_rating=55) == 0   # CH 9 on an easy course


# ================================================================
# Tee ratings and playing handicaps
# ================================================================

def test_tee_ratings():
    assert tee_ratings(None) == (72.0, 113)
    assert tee_ratings(None, 70.0, 120) == (70.0, 120)
    assert tee_ratings(TeeBox(color="blue", course_rating=73.1, slope_rating=135)) == (73.1, 135)


def _build_course(**kwargs) -> Course:
    return Course(
        name="Test",
        holes=[Hole(number=i, par=4, stroke_index=i) for i in range(1, 19)],
        tee_boxes=[
            TeeBox(color="blue", course_rating=74.0, slope_rating=135),
            TeeBox(color="red", course_rating=69.0, slope_rating=113),
        ],
        **kwargs,
    )


def test_playing_handicaps_per_tee():
    players = [
        Player(name="Ann", handicap_index=10.0, tee_color="blue"),
        Player(name="Bob", handicap_index=10.0, tee_color="red"),
        Player(name="Cy", handicap_index=10.0, tee_color="gold"),
    ]
    handicaps = playing_handicaps(players, _build_course())
    assert handicaps == {
        "Ann": 14,   # 10 * 135 / 113 + 2 = 13.95
        "Bob": 7,    # 10 + (69 - 72)
        "Cy": 10,    # unknown tee, neutral ratings
    }


def test_playing_handicaps_reference_par():
    players = [Player(name="Bob", handicap_index=10.0, tee_color="red")]
    course = _build_course(total_par=70)
    assert playing_handicaps(players, course) == {"Bob": 9}           # 10 + (69 - 70)
    assert playing_handicaps(players, course, reference_par=72) == {"Bob": 7}


# ================================================================
# Net and Stableford
# ================================================================

def test_net_score_floor():
    assert net_score(5, 1) == 4
    assert net_score(1, 2) == 0
    assert net_score(4, -1) == 5              # plus handicap gives a stroke back


@pytest.mark.parametrize("net,points", [
    (1, 5), (2, 4), (3, 3), (4, 2), (5, 1), (6, 0), (9, 0),
])
def test_stableford_points_par_four(net, points):
    assert stableford_points(net, 4) == points


def test_score_hole_scenario():
    score = score_hole(5, 18, par=4, stroke_index=10)
    assert score.gross == 5
    assert score.net == 4
    assert score.stableford == 2


def test_score_hole_without_stroke():
    score = score_hole(5, 9, par=4, stroke_index=10)
    assert score.net == 5
    assert score.stableford == 1


def test_score_hole_clear():
    score = score_hole(None, 18, par=4, stroke_index=1)
    assert score.gross is None
    assert score.net is None
    assert score.stableford == 0
