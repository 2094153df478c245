from __future__ import annotations

import random

import pytest

from number_rush.core.game_manager import GameManager
from number_rush.core.models import Difficulty
from number_rush.core.services.game_clock import GameClock
from number_rush.core.services.ticker import TickCallback, Ticker


class ManualTicker(Ticker):
    """Ticker that only fires when the test calls ``fire``."""

    def __init__(self) -> None:
        self.callback: TickCallback | None = None
        self.start_count = 0
        self.stop_count = 0

    def start(self, callback: TickCallback) -> None:
        self.callback = callback
        self.start_count += 1

    def stop(self) -> None:
        self.callback = None
        self.stop_count += 1

    def is_active(self) -> bool:
        return self.callback is not None

    def fire(self) -> None:
        if self.callback is not None:
            self.callback()


class FakeTime:
    """Monotonic time source advanced by hand, in seconds."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def ticker() -> ManualTicker:
    return ManualTicker()


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def clock(fake_time: FakeTime) -> GameClock:
    return GameClock(time_source=fake_time)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def manager_with_hint(ticker: ManualTicker, clock: GameClock) -> GameManager:
    manager = GameManager(ticker=ticker, seed=8, clock=clock)
    manager.select_difficulty(Difficulty.HARD)
    manager.request_hint()
    return manager
