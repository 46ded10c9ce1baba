import pytest

from models import Course, Hole, Player, Teams, TeeBox
from scoring.config import ScoringSettings
from scoring.exceptions import (
    HoleOutOfRangeError,
    InvalidRosterError,
    RoundClosedError,
    ScoringError,
    UnknownPlayerError,
)
from scoring.formats import GameFormat
from scoring.session import RoundSession


def _build_course(hole_count=18, **kwargs) -> Course:
    return Course(
        name="Test Course",
        holes=[Hole(number=i, par=4, stroke_index=i) for i in range(1, hole_count + 1)],
        tee_boxes=[TeeBox(color="white", course_rating=72.0, slope_rating=113)],
        **kwargs,
    )


def _build_session(players=None, formats=("matchplay", "skins", "nassau"), **kwargs) -> RoundSession:
    players = players or [Player(name="Ann", handicap_index=18), Player(name="Bob", handicap_index=0)]
    return RoundSession(
        kwargs.pop("course", _build_course()),
        players,
        formats=formats,
        settings=kwargs.pop("settings", ScoringSettings()),
        **kwargs,
    )


def _play_out(session, scores):
    """Enter the same gross for each player on every remaining hole."""
    settlement = None
    while settlement is None:
        for name, gross in scores.items():
            session.update_score(name, gross)
        settlement = session.next_hole()
    return settlement


# ================================================================
# Setup
# ================================================================

def test_roster_validation():
    course = _build_course()
    with pytest.raises(InvalidRosterError):
        RoundSession(course, [])

    with pytest.raises(InvalidRosterError):
        RoundSession(course, [Player(name=f"P{i}") for i in range(5)])

    with pytest.raises(InvalidRosterError):
        RoundSession(course, [Player(name="Ann"), Player(name="Ann")])

    with pytest.raises(ScoringError):
        RoundSession(Course(name="Empty"), [Player(name="Ann")])


def test_teams_must_match_roster():
    players = [Player(name=n) for n in "ABCD"]
    others = [Player(name=n) for n in "ABCE"]
    with pytest.raises(InvalidRosterError):
        RoundSession(_build_course(), players, teams=Teams(team_a=others[:2], team_b=others[2:]))


def test_teams_ignored_for_small_groups():
    players = [Player(name=n) for n in "ABCD"]
    teams = Teams(team_a=players[:2], team_b=players[2:])
    session = RoundSession(_build_course(), players[:2], teams=teams, settings=ScoringSettings())
    assert session.teams is None


def test_formats_are_normalized():
    session = _build_session(formats=["Match Play", "SKINS"])
    assert session.formats == [GameFormat.MATCH_PLAY, GameFormat.SKINS]


# ================================================================
# Score entry
# ================================================================

def test_update_score_derives_net_and_points():
    session = _build_session()
    score = session.update_score("Ann", 5)
    assert score.net == 4
    assert score.stableford == 2
    assert session.state.gross("Ann", 1) == 5
    assert session.state.current_hole == 1


def test_update_score_clears_cell():
    session = _build_session()
    session.update_score("Ann", 5)
    cleared = session.update_score("Ann", None)
    assert not cleared.is_entered
    assert session.state.gross("Ann", 1) is None


def test_update_score_errors():
    session = _build_session()
    with pytest.raises(UnknownPlayerError):
        session.update_score("Zed", 4)

    with pytest.raises(HoleOutOfRangeError):
        session.update_score("Ann", 4, hole_number=19)

    with pytest.raises(HoleOutOfRangeError):
        session.update_score("Ann", 4, hole_number=0)


def test_update_score_rejects_holes_not_reached():
    session = _build_session()
    with pytest.raises(HoleOutOfRangeError):
        session.update_score("Ann", 4, hole_number=2)
    assert session.state.gross("Ann", 2) is None

    session.next_hole()
    session.next_hole()
    session.update_score("Ann", 6, hole_number=2)
    assert session.state.gross("Ann", 2) == 6

    # Stepping back does not unlock the holes already visited ahead
    session.previous_hole()
    with pytest.raises(HoleOutOfRangeError):
        session.update_score("Ann", 5, hole_number=3)


def test_all_scores_entered_and_confirmation():
    session = _build_session()
    session.update_score("Ann", 5)
    assert not session.all_scores_entered()
    session.update_score("Bob", 4)
    assert session.all_scores_entered()

    assert session.toggle_confirmation() is True
    assert session.is_confirmed()
    assert session.toggle_confirmation() is False
    assert not session.is_confirmed(1)


# ================================================================
# Handicaps
# ================================================================

def test_course_handicaps_fixed_reference():
    session = _build_session(course=_build_course(total_par=70))
    assert session.course_handicaps() == {"Ann": 18, "Bob": 0}
    assert session.update_score("Bob", 4).net == 4


def test_course_handicaps_course_reference():
    settings = ScoringSettings(reference_par="course")
    session = _build_session(course=_build_course(total_par=70), settings=settings)
    assert session.course_handicaps() == {"Ann": 20, "Bob": 2}
    # Bob now gets a stroke on the two hardest holes
    assert session.update_score("Bob", 4).net == 3
    session.next_hole()
    session.next_hole()
    assert session.update_score("Bob", 4).net == 4


def test_unknown_tee_uses_default_ratings():
    settings = ScoringSettings(default_slope_rating=130)
    players = [Player(name="Ann", handicap_index=10, tee_color="gold")]
    session = _build_session(players=players, settings=settings)
    assert session.course_handicaps() == {"Ann": 12}   # 10 * 130 / 113 = 11.5


# ================================================================
# Navigation and standings
# ================================================================

def test_next_hole_refreshes_standings():
    session = _build_session()
    session.update_score("Ann", 4)
    session.update_score("Bob", 5)
    assert session.next_hole() is None
    assert session.state.current_hole == 2
    assert session.state.skins == {"Ann": 1, "Bob": 0}
    assert session.current_hole.number == 2


def test_previous_hole_stops_at_first():
    session = _build_session()
    session.previous_hole()
    assert session.state.current_hole == 1
    session.next_hole()
    session.previous_hole()
    assert session.state.current_hole == 1


def test_amending_earlier_hole_replays_formats():
    session = _build_session()
    session.update_score("Ann", 4)
    session.update_score("Bob", 5)
    session.next_hole()
    session.update_score("Ann", 4)
    session.update_score("Bob", 4)
    session.next_hole()
    assert session.compute("skins").skins == {"Ann": 1, "Bob": 0}

    session.update_score("Bob", 3, hole_number=1)
    skins = session.compute("skins")
    assert skins.skins == {"Ann": 0, "Bob": 1}
    assert session.status() == ["Bob is 1-Up", "Bob has 1 skin"]


def test_cumulative_scores_include_six_point():
    players = [Player(name=n) for n in ("A", "B", "C")]
    session = _build_session(players=players, formats=["sixpoint"])
    for name, gross in (("A", 4), ("B", 4), ("C", 5)):
        session.update_score(name, gross)

    totals = {t.name: t for t in session.cumulative_scores()}
    assert totals["A"].six_point_total == 3
    assert totals["C"].six_point_total == 0
    assert totals["C"].gross_total == 5
    assert totals["A"].holes_completed == 1


# ================================================================
# Settlement
# ================================================================

def test_full_round_settlement():
    session = _build_session()
    settlement = _play_out(session, {"Ann": 5, "Bob": 4})

    assert session.is_closed
    assert settlement.state.finished
    assert settlement.skins.skins == {"Ann": 0, "Bob": 18}
    assert settlement.nassau.overall_winner == "Bob"
    assert settlement.match_play.clinched_by == "Bob"

    # Gross formats go to Bob, but Ann's strokes level the Stableford cards
    ann, bob = settlement.scorecard("Ann"), settlement.scorecard("Bob")
    assert ann.total.net == 72
    assert ann.total.stableford == bob.total.stableford == 36


def test_settlement_closeout_and_cards():
    players = [Player(name="Ann"), Player(name="Bob")]
    session = _build_session(players=players)
    settlement = _play_out(session, {"Ann": 4, "Bob": 5})

    assert settlement.match_play.clinched_margin == 10
    assert settlement.match_play.clinched_remaining == 8
    assert settlement.winners == [
        "Match Play: Ann wins 10&8",
        "Skins: Ann (18 skins)",
        "Nassau: 3-0",
    ]
    card = settlement.scorecard("Ann")
    assert card.front9.gross == 36
    assert card.total.gross == 72
    assert card.total.stableford == 36
    assert settlement.scorecard("Zed") is None


def test_settled_round_is_closed():
    session = _build_session(course=_build_course(9))
    settlement = _play_out(session, {"Ann": 4, "Bob": 4})

    assert session.settle() is settlement
    with pytest.raises(RoundClosedError):
        session.update_score("Ann", 3, hole_number=1)
    with pytest.raises(RoundClosedError):
        session.next_hole()
    with pytest.raises(RoundClosedError):
        session.toggle_confirmation()


def test_settle_early_counts_every_hole():
    session = _build_session(players=[Player(name="Ann"), Player(name="Bob")])
    session.update_score("Ann", 3)
    session.update_score("Bob", 4)

    settlement = session.settle()
    assert settlement.skins.skins == {"Ann": 1, "Bob": 0}
    assert settlement.match_play.holes_through == 18
