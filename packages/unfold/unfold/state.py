"""Per-node animation state."""
from __future__ import annotations

from dataclasses import dataclass, field

from unfold.config import FoldConfig
from unfold.scale import update_value


@dataclass
class AnimationState:
    """Progress of one node.

    ``prev_scale`` is the settled value (0.0 folded, 1.0 unfolded). ``dir`` is
    0.0 while idle and +1.0/-1.0 while an animation is in flight.
    """

    scale: float = 0.0
    prev_scale: float = 0.0
    dir: float = 0.0
    config: FoldConfig = field(default_factory=FoldConfig, repr=False, compare=False)

    @property
    def animating(self) -> bool:
        return self.dir != 0

    def advance(self) -> float | None:
        """Step the scale once. Returns the settled value on completion."""
        cfg = self.config
        self.scale += update_value(
            self.scale, self.dir, cfg.lines * 2, cfg.steps, cfg.sc_gap, cfg.sc_div,
        )
        if abs(self.scale - self.prev_scale) > 1:
            self.scale = self.prev_scale + self.dir
            self.dir = 0.0
            self.prev_scale = self.scale
            return self.prev_scale
        return None

    def trigger(self) -> bool:
        """Start animating toward the opposite settled value.

        Returns False, leaving the state untouched, if already animating.
        """
        if self.dir != 0:
            return False
        self.dir = 1.0 - 2 * self.prev_scale
        return True

    def reset(self) -> None:
        self.scale = 0.0
        self.prev_scale = 0.0
        self.dir = 0.0
