"""Unit tests for the cooperative Ticker."""

from __future__ import annotations

from aura_session.models.focus.ticker import Ticker


class TestTicker:
    """Tests for arming, polling and cancelling a Ticker."""

    def test_idle_ticker_fires_nothing(self, clock) -> None:
        ticker = Ticker(clock=clock)
        clock.advance(10)

        assert not ticker.is_ticking
        assert ticker.poll() == 0

    def test_fires_once_per_elapsed_interval(self, clock) -> None:
        calls = []
        ticker = Ticker(clock=clock)
        ticker.start_ticking(lambda: calls.append(clock()))

        clock.advance(0.5)
        assert ticker.poll() == 0
        clock.advance(0.5)
        assert ticker.poll() == 1
        clock.advance(3)
        assert ticker.poll() == 3

        assert len(calls) == 4

    def test_custom_interval(self, clock) -> None:
        calls = []
        ticker = Ticker(interval=0.25, clock=clock)
        ticker.start_ticking(lambda: calls.append(True))

        clock.advance(1)
        ticker.poll()

        assert len(calls) == 4

    def test_rearming_replaces_callback(self, clock) -> None:
        first, second = [], []
        ticker = Ticker(clock=clock)
        ticker.start_ticking(lambda: first.append(True))
        ticker.start_ticking(lambda: second.append(True))

        clock.advance(2)
        ticker.poll()

        assert first == []
        assert len(second) == 2

    def test_stop_ticking_cancels_pending_ticks(self, clock) -> None:
        calls = []
        ticker = Ticker(clock=clock)
        ticker.start_ticking(lambda: calls.append(True))
        clock.advance(5)

        ticker.stop_ticking()

        assert ticker.poll() == 0
        assert calls == []
        assert not ticker.is_ticking

    def test_stop_when_idle_is_safe(self, clock) -> None:
        ticker = Ticker(clock=clock)

        ticker.stop_ticking()
        ticker.stop_ticking()

        assert not ticker.is_ticking

    def test_generation_bumps_on_every_change(self, clock) -> None:
        ticker = Ticker(clock=clock)
        start = ticker.generation

        ticker.start_ticking(lambda: None)
        ticker.stop_ticking()

        assert ticker.generation > start + 1

    def test_callback_that_stops_ends_the_poll(self, clock) -> None:
        """Ticks queued behind a stop are never delivered."""
        ticker = Ticker(clock=clock)
        calls = []

        def callback() -> None:
            calls.append(True)
            ticker.stop_ticking()

        ticker.start_ticking(callback)
        clock.advance(5)

        assert ticker.poll() == 1
        assert len(calls) == 1

    def test_callback_that_rearms_ends_the_poll(self, clock) -> None:
        """A re-armed ticker starts counting from the moment it was re-armed."""
        ticker = Ticker(clock=clock)
        calls = []

        def callback() -> None:
            calls.append(True)
            ticker.start_ticking(callback)

        ticker.start_ticking(callback)
        clock.advance(5)

        assert ticker.poll() == 1
        clock.advance(1)
        assert ticker.poll() == 1
        assert len(calls) == 2
