"""Sequencer - walks the chain one node per activation, bouncing at the ends."""
from __future__ import annotations

import logging

from unfold.chain import Node, NodeChain
from unfold.types import Completion, DrawPair

logger = logging.getLogger(__name__)


class Sequencer:
    def __init__(self, chain: NodeChain) -> None:
        self._chain = chain
        self._current: Node = chain.first
        self._direction: int = 1

    @property
    def chain(self) -> NodeChain:
        return self._chain

    @property
    def current(self) -> Node:
        return self._current

    @property
    def direction(self) -> int:
        return self._direction

    @property
    def animating(self) -> bool:
        return self._current.state.animating

    def _flip(self) -> None:
        self._direction *= -1
        logger.debug(
            "bounce at node %d, direction now %+d", self._current.index, self._direction,
        )

    def trigger(self) -> bool:
        started = self._current.state.trigger()
        if started:
            logger.debug(
                "node %d started, dir=%+.0f",
                self._current.index,
                self._current.state.dir,
            )
        return started

    def advance(self) -> Completion | None:
        node = self._current
        settled = node.state.advance()
        if settled is None:
            return None
        self._current = self._chain.neighbor(node, self._direction, self._flip)
        logger.debug(
            "node %d completed at %.1f, current node %d",
            node.index,
            settled,
            self._current.index,
        )
        return Completion(node.index, settled)

    def draw_sequence(self) -> list[DrawPair]:
        return self._chain.draw_sequence(self._current)

    def reset(self) -> None:
        for node in self._chain:
            node.state.reset()
        self._current = self._chain.first
        self._direction = 1
