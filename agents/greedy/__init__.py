from __future__ import annotations

from .agent import PlayerAgent, greedy_action

__all__ = ["PlayerAgent", "greedy_action"]
