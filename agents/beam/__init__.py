from __future__ import annotations

from .agent import (
    PlayerAgent,
    beam_search_action,
    beam_search_action_with_time_threshold,
)
from .state_queue import StateQueue

__all__ = [
    "PlayerAgent",
    "StateQueue",
    "beam_search_action",
    "beam_search_action_with_time_threshold",
]
