"""Clock for the fixed-delay frame ticker."""


class Clock:
    def __init__(self, delay: int) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self._delay = delay
        self._interval = delay / 1000.0
        self._tick_number = 0

    @property
    def delay(self) -> int:
        return self._delay

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
