from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


DIFFICULTY_ORDER = ["easy", "medium", "hard"]

MetricKey = Literal[
    "best_score",
    "avg_score",
    "total_score",
    "games",
    "win_rate",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "best_score"
    player: str | None = None
    top_n: int = 10


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def _points_col(df: pd.DataFrame) -> str:
    # Older histories only carry the running session total
    return "earned" if "earned" in df.columns else "score"


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()
    if cfg.player is not None:
        _require_cols(out, ["player"])
        out = out[out["player"].astype(str) == cfg.player].copy()
    return out


def difficulty_breakdown(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per difficulty: games, W/L/D, win rate, best/avg/total points
    earned per game, average human moves and duration. Difficulties with no
    games are omitted.
    """
    _require_cols(df, ["difficulty", "outcome", "score"])

    if df.empty:
        return pd.DataFrame(columns=[
            "difficulty", "games", "wins", "losses", "draws", "win_rate",
            "best_score", "avg_score", "total_score",
        ])

    work = df.assign(
        win=(df["outcome"] == "human_win").astype(int),
        loss=(df["outcome"] == "computer_win").astype(int),
        draw=(df["outcome"] == "draw").astype(int),
    )

    pts = _points_col(df)
    agg = {
        "games": ("score", "count"),
        "wins": ("win", "sum"),
        "losses": ("loss", "sum"),
        "draws": ("draw", "sum"),
        "best_score": (pts, "max"),
        "avg_score": (pts, "mean"),
        "total_score": (pts, "sum"),
    }
    if "human_moves" in work.columns:
        agg["avg_human_moves"] = ("human_moves", "mean")
    if "duration_sec" in work.columns:
        agg["avg_duration_sec"] = ("duration_sec", "mean")

    out = work.groupby("difficulty").agg(**agg).reset_index()
    out["win_rate"] = out["wins"] / out["games"]

    rank = {d: i for i, d in enumerate(DIFFICULTY_ORDER)}
    out["_order"] = out["difficulty"].map(lambda d: rank.get(d, len(rank)))
    out = out.sort_values(["_order", "difficulty"]).drop(columns="_order").reset_index(drop=True)

    cols = [
        "difficulty", "games", "wins", "losses", "draws", "win_rate",
        "best_score", "avg_score", "total_score", "avg_human_moves", "avg_duration_sec",
    ]
    return out[[c for c in cols if c in out.columns]]


def overall_stats(df: pd.DataFrame) -> dict:
    """Totals and averages count points per game; best_score is the best running session total."""
    _require_cols(df, ["score"])
    n = len(df)
    pts = _points_col(df)
    return {
        "total_games": n,
        "total_score": float(df[pts].sum()) if n else 0.0,
        "average_score": float(df[pts].mean()) if n else 0.0,
        "best_score": float(df["score"].max()) if n else 0.0,
    }


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """Leaderboard by player, ranked on cfg.metric (higher is better)."""
    _require_cols(df, ["player", "score", "outcome"])

    out = filter_rows(df, cfg)
    if out.empty:
        return pd.DataFrame(columns=["rk", "player", cfg.metric])

    pts = _points_col(out)
    grouped = out.assign(win=(out["outcome"] == "human_win").astype(int)).groupby("player").agg(
        games=("score", "count"),
        best_score=("score", "max"),
        avg_score=(pts, "mean"),
        total_score=(pts, "sum"),
        wins=("win", "sum"),
    )
    grouped["win_rate"] = grouped["wins"] / grouped["games"]

    table = grouped.sort_values(cfg.metric, ascending=False).head(cfg.top_n).reset_index()
    table.insert(0, "rk", range(1, len(table) + 1))
    return table
