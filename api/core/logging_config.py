"""
Root logger setup, applied once when the app is built.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: str) -> int:
    """
    Map a level name to its numeric value; unknown names fall back to INFO.
    """
    value = getattr(logging, (level or "").strip().upper(), None)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO") -> None:
    numeric_level = resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        # uvicorn or a test runner already configured logging.
        root.setLevel(numeric_level)
        return
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
