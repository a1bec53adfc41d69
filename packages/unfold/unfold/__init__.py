"""unfold - A tap-driven, tick-paced node folding animation core."""

from unfold.chain import Node, NodeChain
from unfold.clock import Clock
from unfold.config import FoldConfig, parse_color
from unfold.driver import Driver
from unfold.sequencer import Sequencer
from unfold.state import AnimationState
from unfold.types import Completion, ConfigError, Frame, TickResult

__all__ = [
    "AnimationState",
    "Clock",
    "Completion",
    "ConfigError",
    "Driver",
    "FoldConfig",
    "Frame",
    "Node",
    "NodeChain",
    "Sequencer",
    "TickResult",
    "parse_color",
]
