from .stats import (
    cumulative_scores,
    player_totals,
    running_totals,
)
from .visualizations import plot_running_totals

__all__ = [
    "cumulative_scores",
    "player_totals",
    "running_totals",
    "plot_running_totals",
]
