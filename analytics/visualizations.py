from __future__ import annotations

from typing import Dict, Optional, Sequence

from models.player import Player
from models.round_state import RoundState

from .stats import running_totals

METRIC_LABELS = {
    "gross": "Gross Strokes",
    "net": "Net Strokes",
    "stableford": "Stableford Points",
}


def _load_plt():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:
        raise RuntimeError(
            "matplotlib is required for visualizations. Install it with: pip install matplotlib"
        ) from exc
    return plt


def plot_running_totals(
    players: Sequence[Player],
    state: RoundState,
    metric: str = "stableford",
    title: Optional[str] = None,
):
    """Line chart: each player's cumulative metric hole by hole."""
    plt = _load_plt()
    series: Dict[str, list] = running_totals(players, state, metric)
    holes = list(range(1, state.holes_in_play + 1))

    fig, ax = plt.subplots(figsize=(10, 5))
    for name, values in series.items():
        # Unscored leading holes are left as gaps
        ax.plot(holes, [v if v is not None else float("nan") for v in values],
                marker="o", linewidth=1.5, label=name)

    ax.set_title(title or f"Running {METRIC_LABELS[metric]}")
    ax.set_xlabel("Hole")
    ax.set_ylabel(METRIC_LABELS[metric])
    ax.set_xticks(holes)
    ax.legend(loc="upper left")
    ax.grid(alpha=0.2)
    fig.tight_layout()
    return fig, ax
