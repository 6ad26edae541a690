from __future__ import annotations

import pytest

from textmagic_client.throttle import Throttle


class _FakeClock:
    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def test_first_dispatch_does_not_wait() -> None:
    clock = _FakeClock()
    throttle = Throttle(0.5, clock=clock, sleep=clock.sleep)

    assert throttle.wait() == 0.0
    assert clock.sleeps == []
    assert throttle.last_dispatch == 100.0


def test_back_to_back_dispatch_waits_for_remaining_interval() -> None:
    clock = _FakeClock()
    throttle = Throttle(0.5, clock=clock, sleep=clock.sleep)

    throttle.wait()
    clock.now += 0.2
    slept = throttle.wait()

    assert slept == pytest.approx(0.3)
    assert throttle.last_dispatch == pytest.approx(100.5)


def test_no_wait_after_interval_elapsed() -> None:
    clock = _FakeClock()
    throttle = Throttle(0.5, clock=clock, sleep=clock.sleep)

    throttle.wait()
    clock.now += 2.0
    throttle.wait()

    assert clock.sleeps == []


def test_zero_interval_disables_waiting() -> None:
    clock = _FakeClock()
    throttle = Throttle(0, clock=clock, sleep=clock.sleep)
    throttle.wait()
    throttle.wait()
    assert clock.sleeps == []
