"""
This module implements the scheduler service for the logjob application.

`SchedulerService` starts one fixed-delay repeating task per job in a
`SchedulerRegistry`, using the `repeat_every` decorator from
`logjob.services.scheduler.runner`, and cancels those tasks on shutdown.
"""

import asyncio
from collections.abc import Callable

from logjob.core import root_logger
from logjob.core.exceptions import SchedulerAlreadyRunning
from logjob.services.scheduler.runner import repeat_every

from .scheduled_func import ScheduledFunc
from .scheduler_registry import SchedulerRegistry

logger = root_logger.get_logger("scheduler")


class SchedulerService:
    """
    Runs the jobs of a registry until stopped.

    Each job gets its own asyncio task, so a slow job never delays another one,
    while calls of the same job never overlap.
    """

    def __init__(self, registry: SchedulerRegistry) -> None:
        self.registry = registry
        self._tasks: dict[str, asyncio.Task[None]] = {}
        self._running = False

    @property
    def running(self) -> bool:
        """True from `start()` until `stop()`, or until every job has used up its `max_repetitions`."""
        if not self._running:
            return False

        return not self._tasks or any(not task.done() for task in self._tasks.values())

    @property
    def tasks(self) -> dict[str, asyncio.Task[None]]:
        return dict(self._tasks)

    async def start(self) -> None:
        """
        Starts a repeating task for every registered job.

        Raises:
            SchedulerAlreadyRunning: If the service was started and not stopped since.
        """
        if self.running:
            raise SchedulerAlreadyRunning()

        logger.info("SchedulerService starting...")
        self.registry.print_jobs()
        # tasks of jobs that ran out of repetitions
        self._tasks.clear()

        for job in self.registry.jobs:
            run_job = _repeating(job)
            self._tasks[job.name] = await run_job()
            logger.info(f"Scheduled job '{job.name}' every {job.delay_ms}ms (fixed delay)")

        self._running = True
        logger.info(f"SchedulerService started with {len(self._tasks)} job(s).")

    async def stop(self) -> None:
        """Cancels every running job and waits for the tasks to finish."""
        if not self._running:
            return

        logger.info("SchedulerService stopping...")
        self._running = False
        tasks = list(self._tasks.values())
        self._tasks.clear()

        for task in tasks:
            task.cancel()

        await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("SchedulerService stopped.")


def _repeating(job: ScheduledFunc):
    @repeat_every(
        milliseconds=job.delay_ms,
        wait_first=job.wait_first,
        max_repetitions=job.max_repetitions,
    )
    def run_job() -> None:
        _scheduled_task_wrapper(job.name, job.callback)

    return run_job


def _scheduled_task_wrapper(name: str, task_callable: Callable[[], None]) -> None:
    """
    Executes a job's callback, logging any exception so that a failing job
    keeps its schedule and never affects other jobs.
    """
    try:
        logger.debug(f"Executing scheduled task: {name}")
        task_callable()
        logger.debug(f"Finished scheduled task: {name}")
    except Exception as e:
        logger.error(f"Error in scheduled task func='{name}': exception='{e}'", exc_info=True)
