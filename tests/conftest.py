import asyncio

from pytest import MonkeyPatch, fixture

mp = MonkeyPatch()
mp.setenv("PRODUCTION", "False")
mp.setenv("TESTING", "True")

import logjob.app  # noqa: E402,F401
from logjob.services.scheduler import runner  # noqa: E402

_real_sleep = asyncio.sleep

EXPECTED_TICK = [
    ("DEBUG", "debug"),
    ("INFO", "info"),
    ("WARNING", "warn"),
    ("ERROR", "error"),
]


class VirtualClock:
    """
    Stands in for the runner's sleep. Every sleep advances `now` instantly; the
    first sleep that would end past `until` parks forever and sets `parked`.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self.until = float("inf")
        self.sleeps: list[float] = []
        self.parked = asyncio.Event()

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        if self.now > self.until:
            self.parked.set()
            await asyncio.Event().wait()
        await _real_sleep(0)


@fixture
def virtual_clock(monkeypatch: MonkeyPatch) -> VirtualClock:
    clock = VirtualClock()
    monkeypatch.setattr(runner, "sleep", clock.sleep)
    return clock


@fixture
def expected_tick() -> list[tuple[str, str]]:
    return list(EXPECTED_TICK)
