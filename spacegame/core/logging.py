"""Root logger setup for the leaderboard app."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger once and set its level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    resolved = logging.getLevelName((level or "INFO").upper())
    # unknown names come back as "Level X" strings
    root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
