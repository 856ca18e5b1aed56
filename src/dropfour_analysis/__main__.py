from __future__ import annotations

import sys

from .cli.analyze_csv import main as summary_main
from .cli.make_figures import main as figures_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default behavior: print the summary if no subcommand
    if not argv:
        return summary_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"summary", "analyze", "stats"}:
        return summary_main(rest)

    if cmd in {"figures", "plots", "make-figures", "make_figures"}:
        return figures_main(rest)

    # Flags without a subcommand go to the summary
    if cmd.startswith("-"):
        return summary_main(argv)

    print("Usage:")
    print("  python -m dropfour_analysis summary [--csv ...] [--player ...]")
    print("  python -m dropfour_analysis figures [--csv ...] [--figures-dir data/figures]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
