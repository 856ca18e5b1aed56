from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from dropfour import config

# The board owns the terminal while a game is running, so by default logs only
# go to a rotating file under logs/. `verbose` adds a stderr sink as well.
_file_sink_id: int | None = None


def log_dir() -> Path:
    base = Path(config.LOG_DIR)
    base.mkdir(parents=True, exist_ok=True)
    return base


def configure_logging(verbose: bool = False, level: str = "INFO") -> int:
    """
    Replace loguru's default stderr handler with the game's sinks. Returns the file sink id.
    """
    global _file_sink_id
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG")
    _file_sink_id = logger.add(log_dir() / "dropfour.log", rotation="1 MB", level="DEBUG" if verbose else level)
    return _file_sink_id
