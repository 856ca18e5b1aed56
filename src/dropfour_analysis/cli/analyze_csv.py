from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadOptions, default_results_path, load_results
from ..metrics.summarize import SummaryConfig, difficulty_breakdown, overall_stats, top_table


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropfour_analysis summary", description="Summarize recorded Connect 4 scores.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a scores CSV. If omitted, uses connect4_scores.csv in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing connect4_scores.csv")
    ap.add_argument("--player", type=str, default=None, help="Only include this player's games")
    ap.add_argument("--metric", type=str, default="best_score", help="Leaderboard metric (best_score, avg_score, total_score, games, win_rate)")
    ap.add_argument("--top", type=int, default=10, help="Top N players in the leaderboard")
    return ap


def resolve_csv(args: argparse.Namespace) -> Path:
    if args.csv:
        return Path(args.csv)
    return default_results_path(Path(args.results_dir))


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = resolve_csv(args)
    df = load_results(LoadOptions(csv_path=csv_path))

    cfg = SummaryConfig(
        metric=args.metric,  # type: ignore[arg-type]
        player=args.player,
        top_n=args.top,
    )
    if cfg.player is not None and "player" in df.columns:
        df = df[df["player"].astype(str) == cfg.player].copy()

    print(f"\nLoaded: {csv_path}")
    print(f"Games: {len(df):,}")

    stats = overall_stats(df)
    print("\n=== Overall ===")
    for k, v in stats.items():
        print(f"{k:>14}: {v:,.1f}" if isinstance(v, float) else f"{k:>14}: {v:,}")

    breakdown = difficulty_breakdown(df)
    if not breakdown.empty:
        print("\n=== By difficulty ===")
        print(breakdown.to_string(index=False, float_format=lambda x: f"{x:.2f}"))

    if "player" in df.columns:
        table = top_table(df, cfg)
        if not table.empty:
            print(f"\n=== Top players ({cfg.metric}) ===")
            print(table.to_string(index=False, float_format=lambda x: f"{x:.2f}"))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
