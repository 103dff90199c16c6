from __future__ import annotations

import importlib
from typing import Any, Dict, List

AGENTS: Dict[str, str] = {
    "random": "agents.random_walk",
    "greedy": "agents.greedy",
    "beam": "agents.beam",
    "chokudai": "agents.chokudai",
}


def agent_names() -> List[str]:
    return sorted(AGENTS)


def make_agent(name: str, **params: Any) -> Any:
    """Import the agent package lazily and build its ``PlayerAgent``."""
    try:
        module_name = AGENTS[name]
    except KeyError:
        raise KeyError(f"unknown agent {name!r}; expected one of {agent_names()}") from None
    module = importlib.import_module(module_name)
    return module.PlayerAgent(**params)


__all__ = ["AGENTS", "agent_names", "make_agent"]
