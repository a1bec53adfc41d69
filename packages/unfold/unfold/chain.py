"""Fixed-length chain of animated nodes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator

from unfold.config import FoldConfig
from unfold.state import AnimationState
from unfold.types import DrawPair


@dataclass(eq=False)
class Node:
    index: int
    state: AnimationState = field(default_factory=AnimationState)


class NodeChain:
    """Nodes ``0..N-1`` built up front. Neighbors are looked up by index."""

    def __init__(self, config: FoldConfig | None = None) -> None:
        if config is None:
            config = FoldConfig()
        self._config = config
        self._nodes = [
            Node(i, AnimationState(config=config)) for i in range(config.nodes)
        ]

    @property
    def config(self) -> FoldConfig:
        return self._config

    @property
    def first(self) -> Node:
        return self._nodes[0]

    @property
    def last(self) -> Node:
        return self._nodes[-1]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def next_of(self, node: Node) -> Node | None:
        i = node.index + 1
        return self._nodes[i] if i < len(self._nodes) else None

    def prev_of(self, node: Node) -> Node | None:
        i = node.index - 1
        return self._nodes[i] if i >= 0 else None

    def neighbor(
        self,
        node: Node,
        direction: int,
        on_exhausted: Callable[[], None] | None = None,
    ) -> Node:
        """Step one node in ``direction`` (+1 or -1).

        At either end of the chain ``on_exhausted`` is called and ``node``
        itself is returned.
        """
        found = self.next_of(node) if direction == 1 else self.prev_of(node)
        if found is not None:
            return found
        if on_exhausted is not None:
            on_exhausted()
        return node

    def draw_sequence(self, node: Node) -> list[DrawPair]:
        """``(index, scale)`` from ``node`` back to node 0, nearest first."""
        return [(n.index, n.state.scale) for n in reversed(self._nodes[: node.index + 1])]
