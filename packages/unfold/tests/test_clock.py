"""Tests for clock advancement and delay conversion."""

import pytest
from unfold.clock import Clock


def test_clock_initialization():
    """Test clock keeps the delay and starts at tick 0."""
    clock = Clock(delay=20)
    assert clock.delay == 20
    assert clock.tick_number == 0
    # interval is the delay in seconds
    assert abs(clock.interval - 0.02) < 1e-9


def test_zero_delay_is_allowed():
    clock = Clock(delay=0)
    assert clock.interval == 0.0


def test_negative_delay_raises_error():
    with pytest.raises(ValueError, match="delay must not be negative"):
        Clock(delay=-1)


def test_advance_returns_new_tick_number():
    clock = Clock(delay=20)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_multiple_advances_monotonic():
    clock = Clock(delay=20)
    prev = 0
    for _ in range(100):
        current = clock.advance()
        assert current == prev + 1
        prev = current


def test_reset():
    clock = Clock(delay=20)
    for _ in range(5):
        clock.advance()
    clock.reset()
    assert clock.tick_number == 0
    clock.reset(42)
    assert clock.tick_number == 42
    assert clock.advance() == 43
