import pytest

from analytics.stats import cumulative_scores, player_totals, running_totals
from models.hole_score import HoleScore
from models.player import Player
from models.round_state import RoundState


def _cell(gross, net, stableford) -> HoleScore:
    return HoleScore(gross=gross, net=net, stableford=stableford)


def _build_state(current_hole=3, finished=False):
    players = [Player(name="Ann"), Player(name="Bob")]
    state = RoundState.new(players).model_copy(update={"current_hole": current_hole, "finished": finished})
    state = state.with_score("Ann", 1, _cell(5, 4, 2))
    state = state.with_score("Ann", 2, _cell(3, 3, 3))
    state = state.with_score("Ann", 3, _cell(6, 5, 1))
    state = state.with_score("Bob", 2, _cell(4, 4, 2))
    return players, state


def test_cumulative_scores():
    players, state = _build_state()
    totals = {t.name: t for t in cumulative_scores(players, state, six_point={"Ann": 4})}

    assert totals["Ann"].gross_total == 14
    assert totals["Ann"].stableford_total == 6
    assert totals["Ann"].holes_completed == 3
    assert totals["Ann"].six_point_total == 4
    assert totals["Bob"].gross_total == 4
    assert totals["Bob"].holes_completed == 1
    assert totals["Bob"].six_point_total == 0


def test_cumulative_scores_ignore_holes_ahead():
    players, state = _build_state(current_hole=2)
    totals = {t.name: t for t in cumulative_scores(players, state)}
    assert totals["Ann"].gross_total == 8     # hole 3 is not in play yet
    assert totals["Ann"].holes_completed == 2


def test_player_totals_segments():
    cells = [_cell(4, 4, 2)] * 9 + [_cell(5, 4, 2)] * 8 + [HoleScore()]
    card = player_totals("Ann", cells)

    assert card.front9.gross == 36
    assert card.back9.gross == 40
    assert card.back9.net == 32
    assert card.total.gross == 76
    assert card.total.stableford == 34


def test_player_totals_nine_holes():
    card = player_totals("Ann", [_cell(4, 3, 3)] * 9)
    assert card.front9.gross == 36
    assert card.back9.gross == 0
    assert card.total.net == 27


def test_running_totals():
    players, state = _build_state()

    assert running_totals(players, state) == {
        "Ann": [2, 5, 6],
        "Bob": [None, 2, 2],
    }
    assert running_totals(players, state, "gross")["Ann"] == [5, 8, 14]
    assert running_totals(players, state, "net")["Bob"] == [None, 4, 4]


def test_running_totals_unknown_metric():
    players, state = _build_state()
    with pytest.raises(ValueError):
        running_totals(players, state, "putts")


def test_plot_running_totals():
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")

    from analytics.visualizations import plot_running_totals

    players, state = _build_state()
    fig, ax = plot_running_totals(players, state, "gross")
    assert ax.get_title() == "Running Gross Strokes"
    assert len(ax.get_lines()) == 2
    assert list(ax.get_xticks()) == [1, 2, 3]

    import matplotlib.pyplot as plt
    plt.close(fig)
