"""Tests for AnimationState trigger/advance protocol."""

import pytest

from unfold import AnimationState, FoldConfig


def _run_to_completion(state, limit=1000):
    """Advance until a settled value comes back. Returns (value, ticks)."""
    for ticks in range(1, limit + 1):
        settled = state.advance()
        if settled is not None:
            return settled, ticks
    raise AssertionError("animation never completed")


class TestTrigger:
    """Starting an animation."""

    def test_initial_state_is_idle(self):
        state = AnimationState()
        assert state.scale == 0.0
        assert state.prev_scale == 0.0
        assert state.dir == 0.0
        assert not state.animating

    def test_trigger_from_folded_unfolds(self):
        state = AnimationState()
        assert state.trigger() is True
        assert state.dir == 1.0
        assert state.animating

    def test_second_trigger_is_ignored(self):
        """Two triggers before any advance start only one animation."""
        state = AnimationState()
        assert state.trigger() is True
        assert state.trigger() is False
        assert state.dir == 1.0

    def test_trigger_from_unfolded_refolds(self):
        state = AnimationState(scale=1.0, prev_scale=1.0)
        assert state.trigger() is True
        assert state.dir == -1.0


class TestAdvance:
    """Stepping and completion."""

    def test_advance_while_idle_is_noop(self):
        state = AnimationState()
        assert state.advance() is None
        assert state.scale == 0.0
        assert state.prev_scale == 0.0

    def test_first_step_uses_slow_rate(self):
        state = AnimationState()
        state.trigger()
        state.advance()
        assert state.scale == pytest.approx(0.00625)

    def test_completion_snaps_to_one(self):
        state = AnimationState()
        state.trigger()
        settled, ticks = _run_to_completion(state)
        assert settled == 1.0
        assert ticks == 102
        assert state.scale == 1.0
        assert state.prev_scale == 1.0
        assert state.dir == 0.0

    def test_completion_is_reported_once(self):
        state = AnimationState()
        state.trigger()
        results = [state.advance() for _ in range(300)]
        settled = [r for r in results if r is not None]
        assert settled == [1.0]
        assert state.scale == 1.0

    def test_forward_scale_is_monotonic_and_bounded(self):
        state = AnimationState()
        state.trigger()
        seen = []
        while state.advance() is None:
            seen.append(state.scale)
        assert all(a < b for a, b in zip(seen, seen[1:]))
        assert all(0.0 < s <= 1.0 for s in seen)

    def test_rate_speeds_up_past_threshold(self):
        state = AnimationState()
        state.trigger()
        deltas = []
        prev = state.scale
        while state.advance() is None:
            deltas.append(state.scale - prev)
            prev = state.scale
        assert deltas[0] == pytest.approx(0.00625)
        assert deltas[-1] == pytest.approx(0.025)

    def test_refold_returns_to_zero(self):
        state = AnimationState()
        state.trigger()
        _run_to_completion(state)

        assert state.trigger() is True
        settled, _ = _run_to_completion(state)
        assert settled == 0.0
        assert state.scale == 0.0
        assert state.prev_scale == 0.0
        assert not state.animating

    def test_refold_scale_is_monotonic_down(self):
        state = AnimationState(scale=1.0, prev_scale=1.0)
        state.trigger()
        seen = []
        while state.advance() is None:
            seen.append(state.scale)
        assert all(a > b for a, b in zip(seen, seen[1:]))
        assert seen[0] == pytest.approx(0.975)

    def test_custom_gap_completes_faster(self):
        state = AnimationState(config=FoldConfig(sc_gap=0.5))
        state.trigger()
        settled, ticks = _run_to_completion(state)
        assert settled == 1.0
        assert ticks == 11

    def test_reset(self):
        state = AnimationState()
        state.trigger()
        state.advance()
        state.reset()
        assert (state.scale, state.prev_scale, state.dir) == (0.0, 0.0, 0.0)
