"""Animation configuration dataclass."""
from __future__ import annotations

import re
from dataclasses import dataclass

from unfold.types import ConfigError

_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def parse_color(value: str) -> tuple[int, int, int]:
    """Convert ``#RRGGBB`` or ``#AARRGGBB`` to an ``(r, g, b)`` tuple.

    The alpha channel of the eight digit form is dropped.
    """
    if not _COLOR_RE.match(value):
        raise ConfigError(f"Unknown color {value!r}, expected #RRGGBB or #AARRGGBB")
    digits = value[-6:]
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


@dataclass(frozen=True)
class FoldConfig:
    """Immutable settings shared by every part of the animation.

    Attributes:
        nodes: Number of nodes stacked vertically.
        lines: Rotating segments drawn per node.
        steps: Sequential phases each node animates through.
        sc_gap: Base scale increment applied per tick.
        sc_div: Threshold dividing the slow and fast easing bands.
        stroke_factor: Stroke width is ``min(width, height) / stroke_factor``.
        size_factor: Node half-size is the node gap divided by this.
        fore_color: Line color.
        back_color: Background color.
        delay: Target delay between ticks, in milliseconds.
    """

    nodes: int = 1
    lines: int = 4
    steps: int = 2
    sc_gap: float = 0.05
    sc_div: float = 0.51
    stroke_factor: int = 90
    size_factor: float = 2.5
    fore_color: str = "#FF5722"
    back_color: str = "#BDBDBD"
    delay: int = 20

    def __post_init__(self) -> None:
        for name in ("nodes", "lines", "steps"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        for name in ("sc_gap", "sc_div", "stroke_factor", "size_factor"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        if self.delay < 0:
            raise ConfigError("delay must not be negative")
        parse_color(self.fore_color)
        parse_color(self.back_color)

    @classmethod
    def linked(cls, **overrides) -> FoldConfig:
        """The five node variant."""
        overrides.setdefault("nodes", 5)
        return cls(**overrides)

    @property
    def interval(self) -> float:
        return self.delay / 1000.0

    @property
    def fore_rgb(self) -> tuple[int, int, int]:
        return parse_color(self.fore_color)

    @property
    def back_rgb(self) -> tuple[int, int, int]:
        return parse_color(self.back_color)
