from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, name: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / name
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_score_by_difficulty(breakdown: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if breakdown.empty or "avg_score" not in breakdown.columns:
        return None

    fig = plt.figure()
    plt.bar(breakdown["difficulty"].astype(str), breakdown["avg_score"].astype(float), label="avg")
    plt.scatter(breakdown["difficulty"].astype(str), breakdown["best_score"].astype(float), color="black", label="best", zorder=3)
    plt.title("Score by difficulty")
    plt.xlabel("difficulty")
    plt.ylabel("score")
    plt.legend()

    return _finish(fig, outdir, "score_by_difficulty.png", show=show)


def plot_outcomes(breakdown: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    cols = [c for c in ("wins", "losses", "draws") if c in breakdown.columns]
    if breakdown.empty or not cols:
        return None

    fig = plt.figure()
    bottom = pd.Series(0.0, index=breakdown.index)
    for c in cols:
        plt.bar(breakdown["difficulty"].astype(str), breakdown[c].astype(float), bottom=bottom.to_numpy(), label=c)
        bottom = bottom + breakdown[c].astype(float)
    plt.title("Outcomes by difficulty")
    plt.xlabel("difficulty")
    plt.ylabel("games")
    plt.legend()

    return _finish(fig, outdir, "outcomes_by_difficulty.png", show=show)


def plot_score_histogram(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if "score" not in df.columns or df["score"].dropna().empty:
        return None

    fig = plt.figure()
    plt.hist(df["score"].dropna(), bins=20)
    plt.title("Histogram: score")
    plt.xlabel("score")
    plt.ylabel("count")

    return _finish(fig, outdir, "hist_score.png", show=show)
