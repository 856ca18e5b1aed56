from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


DEFAULT_EXPECTED_COLS = [
    "player",
    "score", "earned",
    "difficulty",
    "outcome",
    "human_moves", "total_moves",
    "duration_sec",
    "games_played",
    "game_type",
    "timestamp",
]

NUMERIC_COLS = ["score", "earned", "human_moves", "total_moves", "duration_sec", "games_played"]


@dataclass(frozen=True)
class LoadOptions:
    csv_path: Path
    game_type: str | None = "connect4"
    expected_cols: tuple[str, ...] = tuple(DEFAULT_EXPECTED_COLS)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def load_results(opts: LoadOptions) -> pd.DataFrame:
    if not opts.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {opts.csv_path}")

    df = pd.read_csv(opts.csv_path)

    # Trim whitespace in column names just in case
    df.columns = [c.strip() for c in df.columns]

    required = ["score", "difficulty", "outcome"]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    df = _coerce_numeric(df, NUMERIC_COLS)
    df["difficulty"] = df["difficulty"].astype(str).str.strip().str.lower()
    df["outcome"] = df["outcome"].astype(str).str.strip().str.lower()

    if opts.game_type is not None and "game_type" in df.columns:
        df = df[df["game_type"].astype(str) == opts.game_type].copy()

    # Rows without a usable score are noise from interrupted writes
    df = df[df["score"].notna()].copy()

    if "timestamp" in df.columns:
        df["timestamp"] = pd.to_datetime(df["timestamp"], errors="coerce")

    return df.reset_index(drop=True)


def default_results_path(results_dir: Path, name: str = "connect4_scores.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    path = results_dir / name
    if not path.exists():
        raise FileNotFoundError(f"No {name} in {results_dir}")
    return path
