"""
log.py.

Does: Topic-gated debug tracing for the palette pipeline, enabled through
      PALETTE_DEBUG_TOPICS (comma separated topic names, or 'all').
Topics used by the pipeline: dedup, classify, level, naming, styles, sources.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "enabled"]

TOPICS_ENV_VAR = "PALETTE_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(TOPICS_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Re-read PALETTE_DEBUG_TOPICS from the environment."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enabled(topic: str) -> bool:
    """True when traces for ``topic`` would be printed."""
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "palette",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Print a timestamped trace line when ``topic`` is enabled.

    Silent unless the topic (or 'all') is listed in PALETTE_DEBUG_TOPICS.
    """
    if not enabled(topic):
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(
        f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}",
        file=stream if stream is not None else sys.stderr,
    )
