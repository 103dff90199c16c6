from __future__ import annotations

from .agent import PlayerAgent, random_action

__all__ = ["PlayerAgent", "random_action"]
