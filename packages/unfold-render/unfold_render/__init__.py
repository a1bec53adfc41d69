"""unfold-render - Frame geometry for hosts drawing the unfold animation."""
from __future__ import annotations

from unfold_render.geometry import (
    NodeLayout,
    Scene,
    Segment,
    Viewport,
    node_layout,
    node_segments,
    render_frame,
)

__all__ = [
    "NodeLayout",
    "Scene",
    "Segment",
    "Viewport",
    "node_layout",
    "node_segments",
    "render_frame",
]
