"""Shared value types and errors for the unfold animation core."""

from __future__ import annotations

import enum
from dataclasses import dataclass

DrawPair = tuple[int, float]


@dataclass(frozen=True, slots=True)
class Completion:
    """A node finished animating and settled at ``scale`` (0.0 or 1.0)."""

    index: int
    scale: float


@dataclass(frozen=True, slots=True)
class Frame:
    tick_number: int
    nodes: tuple[DrawPair, ...]


class TickResult(enum.Enum):
    CONTINUE = "continue"
    STOPPED = "stopped"


class ConfigError(ValueError):
    """Raised when a FoldConfig cannot drive an animation."""
