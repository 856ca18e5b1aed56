from __future__ import annotations
import sys
import time
from typing import Optional

from dropfour import config

SPINNER = "|/-\\"


def ai_thinking(label: str = "AI", delay: Optional[float] = None) -> None:
    """
    Pause before the computer's disc drops so its move is visible as a move.
    Search itself is synchronous; this is presentation only.
    """
    delay = config.AI_THINK_DELAY_SEC if delay is None else delay
    if delay <= 0:
        return

    if not config.AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    text = f"{label} is thinking"
    deadline = time.monotonic() + delay
    i = 0
    while time.monotonic() < deadline:
        sys.stdout.write(f"\r{text}... {SPINNER[i % len(SPINNER)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + " " * (len(text) + 6) + "\r")
    sys.stdout.flush()
