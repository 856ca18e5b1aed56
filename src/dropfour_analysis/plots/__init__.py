from .chart import (
    plot_outcomes,
    plot_score_by_difficulty,
    plot_score_histogram,
)

__all__ = [
    "plot_outcomes",
    "plot_score_by_difficulty",
    "plot_score_histogram",
]
