from __future__ import annotations

from dataclasses import dataclass

H = 30
W = 30
END_TURN = 100
INF = 1_000_000_000


@dataclass(frozen=True)
class MazeConfig:
    height: int = H
    width: int = W
    end_turn: int = END_TURN

    def __post_init__(self) -> None:
        if self.height < 2 or self.width < 2:
            raise ValueError(
                f"maze must be at least 2x2, got {self.height}x{self.width}"
            )
        if self.end_turn < 0:
            raise ValueError(f"end_turn must be non-negative, got {self.end_turn}")


DEFAULT_CONFIG = MazeConfig()
