from __future__ import annotations

from .agent import (
    PlayerAgent,
    chokudai_search_action,
    chokudai_search_action_with_time_threshold,
)

__all__ = [
    "PlayerAgent",
    "chokudai_search_action",
    "chokudai_search_action_with_time_threshold",
]
