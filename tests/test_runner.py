import asyncio
import logging
import threading

import pytest

from logjob.services.scheduler.runner import repeat_every


def test_fixed_delay_counts_from_end_of_call(virtual_clock):
    virtual_clock.until = 10.0
    fired_at = []

    @repeat_every(milliseconds=3000)
    async def slow_job():
        fired_at.append(virtual_clock.now)
        # the call itself takes one (virtual) second
        virtual_clock.now += 1.0

    async def run():
        task = await slow_job()
        await virtual_clock.parked.wait()
        task.cancel()

    asyncio.run(run())

    assert fired_at == [3.0, 7.0]


def test_wait_first_false_fires_immediately(virtual_clock):
    virtual_clock.until = 5.0
    fired_at = []

    @repeat_every(milliseconds=2000, wait_first=False)
    async def job():
        fired_at.append(virtual_clock.now)

    async def run():
        task = await job()
        await virtual_clock.parked.wait()
        task.cancel()

    asyncio.run(run())

    assert fired_at == [0.0, 2.0, 4.0]


def test_sleeps_use_configured_delay(virtual_clock):
    @repeat_every(milliseconds=250, max_repetitions=3)
    async def job():
        pass

    async def run():
        await (await job())

    asyncio.run(run())

    assert virtual_clock.sleeps == [0.25, 0.25, 0.25]


def test_sync_function_runs_in_worker_thread(virtual_clock):
    calls = []

    @repeat_every(milliseconds=10, max_repetitions=3)
    def job():
        calls.append(threading.get_ident())

    async def run():
        await (await job())

    asyncio.run(run())

    assert len(calls) == 3
    assert threading.main_thread().ident not in calls


def test_max_repetitions_ends_task(virtual_clock):
    count = 0

    @repeat_every(milliseconds=10, max_repetitions=2)
    async def job():
        nonlocal count
        count += 1

    async def run():
        task = await job()
        await task
        return task

    task = asyncio.run(run())

    assert task.done()
    assert count == 2


def test_exceptions_are_logged_and_loop_continues(virtual_clock, caplog):
    caplog.set_level(logging.ERROR, logger="tests.runner")
    attempts = 0

    @repeat_every(milliseconds=10, max_repetitions=3, logger=logging.getLogger("tests.runner"))
    async def failing():
        nonlocal attempts
        attempts += 1
        raise RuntimeError("boom")

    async def run():
        await (await failing())

    asyncio.run(run())

    errors = [r for r in caplog.records if r.name == "tests.runner"]
    assert attempts == 3
    assert len(errors) == 3
    assert "Exception in scheduled task 'failing'" in errors[0].getMessage()
    assert "RuntimeError: boom" in errors[0].getMessage()


def test_raise_exceptions_stops_loop(virtual_clock):
    attempts = 0

    @repeat_every(milliseconds=10, raise_exceptions=True)
    async def failing():
        nonlocal attempts
        attempts += 1
        raise RuntimeError("boom")

    async def run():
        await (await failing())

    with pytest.raises(RuntimeError, match="boom"):
        asyncio.run(run())

    assert attempts == 1


def test_calls_never_overlap(virtual_clock):
    virtual_clock.until = 1.05
    active = False
    overlaps = 0
    calls = 0

    @repeat_every(milliseconds=100)
    async def job():
        nonlocal active, overlaps, calls
        if active:
            overlaps += 1
        active = True
        calls += 1
        await asyncio.sleep(0.001)
        active = False

    async def run():
        task = await job()
        await virtual_clock.parked.wait()
        task.cancel()

    asyncio.run(run())

    assert calls == 10
    assert overlaps == 0


@pytest.mark.parametrize("milliseconds", [0, -5])
def test_non_positive_delay_is_rejected(milliseconds):
    with pytest.raises(ValueError):
        repeat_every(milliseconds=milliseconds)
