# src/dropfour_analysis/cli/make_figures.py
from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadOptions, default_results_path, load_results
from ..metrics.summarize import difficulty_breakdown
from ..plots.chart import plot_outcomes, plot_score_by_difficulty, plot_score_histogram


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="dropfour_analysis figures",
        description="Draw charts from the recorded Connect 4 scores.",
    )
    ap.add_argument("--csv", type=str, default=None, help="Path to a scores CSV. If omitted, uses connect4_scores.csv in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing connect4_scores.csv")
    ap.add_argument("--figures-dir", type=str, default="data/figures", help="Where PNGs are written")
    ap.add_argument("--player", type=str, default=None, help="Only include this player's games")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = Path(args.csv) if args.csv else default_results_path(Path(args.results_dir))
    df = load_results(LoadOptions(csv_path=csv_path))
    if args.player is not None and "player" in df.columns:
        df = df[df["player"].astype(str) == args.player].copy()

    outdir = Path(args.figures_dir)
    breakdown = difficulty_breakdown(df)

    written = [
        plot_score_by_difficulty(breakdown, outdir, show=args.show),
        plot_outcomes(breakdown, outdir, show=args.show),
        plot_score_histogram(df, outdir, show=args.show),
    ]

    if not args.show:
        for p in written:
            if p is not None:
                print(f"Saved {p}")
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
