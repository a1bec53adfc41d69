"""Line geometry for drawing a frame.

Coordinates are screen space: origin top-left, y grows downward, positive
angles turn clockwise.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from unfold.config import FoldConfig
from unfold.scale import divide_scale
from unfold.types import Frame


@dataclass(frozen=True, slots=True)
class Viewport:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("viewport dimensions must be positive")


@dataclass(frozen=True, slots=True)
class Segment:
    x0: float
    y0: float
    x1: float
    y1: float


@dataclass(frozen=True, slots=True)
class NodeLayout:
    gap: float
    size: float
    x_gap: float
    stroke_width: float


@dataclass(frozen=True)
class Scene:
    background: tuple[int, int, int]
    color: tuple[int, int, int]
    stroke_width: float
    segments: list[Segment]


def node_layout(viewport: Viewport, config: FoldConfig) -> NodeLayout:
    gap = viewport.height / (config.nodes + 1)
    size = gap / config.size_factor
    return NodeLayout(
        gap=gap,
        size=size,
        x_gap=2 * size / config.lines,
        stroke_width=min(viewport.width, viewport.height) / config.stroke_factor,
    )


def _rotate_line(x: float, y: float, length: float, scale: float) -> Segment:
    # Folds down from -90 degrees to flat over the second half of ``scale``.
    angle = math.radians(-90.0 * (1 - divide_scale(scale, 1, 2)))
    reach = length * divide_scale(scale, 0, 2)
    return Segment(x, y, x + reach * math.cos(angle), y + reach * math.sin(angle))


def node_segments(
    index: int, scale: float, viewport: Viewport, config: FoldConfig,
) -> list[Segment]:
    """Segments for one node: guide lines first, then its rotating lines.

    The first half of ``scale`` swings the rotating lines open, the second
    half pulls the guide lines out to full height, one phase per step.
    """
    layout = node_layout(viewport, config)
    cx = viewport.width / 2
    cy = layout.gap * (index + 1)
    size = layout.size
    sc1 = divide_scale(scale, 0, 2)
    sc2 = divide_scale(scale, 1, 2)

    segments: list[Segment] = []
    for j in range(config.steps):
        y = size * (1 - 2 * j) * divide_scale(sc2, j, config.steps)
        for k in range(config.steps):
            sx = cx - size * (1 - 2 * k)
            segments.append(Segment(sx, cy, sx, cy + y))
        for k in range(config.lines):
            segments.append(
                _rotate_line(
                    cx - size + k * layout.x_gap,
                    cy + y,
                    layout.x_gap,
                    divide_scale(sc1, k, config.lines),
                )
            )
    return segments


def render_frame(frame: Frame, viewport: Viewport, config: FoldConfig) -> Scene:
    layout = node_layout(viewport, config)
    segments: list[Segment] = []
    for index, scale in frame.nodes:
        segments.extend(node_segments(index, scale, viewport, config))
    return Scene(
        background=config.back_rgb,
        color=config.fore_rgb,
        stroke_width=layout.stroke_width,
        segments=segments,
    )
