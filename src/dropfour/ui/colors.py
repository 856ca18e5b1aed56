from __future__ import annotations
from dropfour import config
from dropfour.types import Disc

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # winning line highlight

FG_RED = "\033[31m"
FG_BLUE = "\033[34m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

# Red for the player, blue for the computer, as on the arcade board
DISC_STYLE = {
    Disc.EMPTY: ("·", FG_GRAY),
    Disc.HUMAN: ("X", FG_RED),
    Disc.COMPUTER: ("O", FG_BLUE),
}


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def disc(cell: Disc, highlight: bool = False) -> str:
    glyph, code = DISC_STYLE[cell]
    if highlight and config.USE_COLOR:
        return f"{REVERSE}{code}{glyph}{RESET}"
    return c(glyph, code)
