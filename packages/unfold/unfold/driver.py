"""Driver - frame ticker, pacing, and completion hooks."""

import logging
import time
from typing import Callable

from unfold.clock import Clock
from unfold.sequencer import Sequencer
from unfold.types import Completion, Frame, TickResult

logger = logging.getLogger(__name__)


class Driver:
    """Runs the sequencer one tick at a time while an animation is in flight.

    The host calls :meth:`activate` on each tap and :meth:`tick` (or
    :meth:`run`) until it reports ``STOPPED``. Frames go to ``on_frame``
    hooks; the host redraws from them.
    """

    def __init__(
        self,
        sequencer: Sequencer,
        delay: int | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        if delay is None:
            delay = sequencer.chain.config.delay
        self._sequencer = sequencer
        self._clock = Clock(delay)
        self._sleep = sleep
        self._active: bool = False
        self._frame_hooks: list[Callable[[Frame], None]] = []
        self._complete_hooks: list[Callable[[Completion], None]] = []

    @property
    def sequencer(self) -> Sequencer:
        return self._sequencer

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def delay(self) -> int:
        return self._clock.delay

    @property
    def active(self) -> bool:
        return self._active

    def on_frame(self, hook: Callable[[Frame], None]) -> None:
        self._frame_hooks.append(hook)

    def on_complete(self, hook: Callable[[Completion], None]) -> None:
        self._complete_hooks.append(hook)

    def frame(self) -> Frame:
        return Frame(self._clock.tick_number, tuple(self._sequencer.draw_sequence()))

    def _emit_frame(self) -> None:
        frame = self.frame()
        for hook in self._frame_hooks:
            hook(frame)

    def _pause(self) -> bool:
        sleep = self._sleep if self._sleep is not None else time.sleep
        try:
            sleep(self._clock.interval)
        except InterruptedError:
            logger.debug("wait interrupted at tick %d, frame skipped", self._clock.tick_number)
            return False
        return True

    def activate(self) -> bool:
        """Handle a tap. Returns True if an animation was started."""
        if not self._sequencer.trigger():
            return False
        if not self._active:
            self._active = True
            self._emit_frame()
        return True

    def tick(self) -> TickResult:
        if not self._active:
            return TickResult.STOPPED

        self._clock.advance()
        completion = self._sequencer.advance()
        if completion is not None:
            self._active = False
            for hook in self._complete_hooks:
                hook(completion)

        if self._pause():
            self._emit_frame()

        return TickResult.CONTINUE if self._active else TickResult.STOPPED

    def run(self, max_ticks: int | None = None) -> int:
        """Tick until the current animation completes. Returns ticks executed."""
        ticks = 0
        while self._active:
            if max_ticks is not None and ticks >= max_ticks:
                break
            self.tick()
            ticks += 1
        return ticks
