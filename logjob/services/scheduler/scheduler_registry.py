"""
This module defines the `SchedulerRegistry`, the collection of jobs a
`SchedulerService` runs.

A registry is constructed explicitly and handed to the service, so the set of
scheduled jobs is visible at the point where the process is wired together.
"""

from logjob.core import root_logger
from logjob.core.exceptions import JobAlreadyRegistered

from .scheduled_func import ScheduledFunc

logger = root_logger.get_logger("scheduler")


class SchedulerRegistry:
    """Named `ScheduledFunc` registrations, kept in registration order."""

    def __init__(self) -> None:
        self._jobs: dict[str, ScheduledFunc] = {}

    def register(self, *jobs: ScheduledFunc) -> None:
        """
        Registers one or more jobs. Nothing is registered if any job is rejected.

        Raises:
            JobAlreadyRegistered: If a job's name is taken, by the registry or earlier in
                the same call, and the job does not allow replacing the existing registration.
        """
        taken = set(self._jobs)
        for job in jobs:
            if job.name in taken and not job.replace_existing:
                raise JobAlreadyRegistered(job.name)
            taken.add(job.name)

        for job in jobs:
            if job.name in self._jobs:
                logger.debug(f"Replacing scheduled job: {job.name}")
            else:
                logger.debug(f"Registering scheduled job: {job.name} (every {job.delay_ms}ms)")
            self._jobs[job.name] = job

    def remove(self, name: str) -> None:
        try:
            logger.debug(f"Removing scheduled job: {name}")
            del self._jobs[name]
        except KeyError:
            logger.warning(f"Attempted to remove scheduled job not found in registry: {name}")

    def get(self, name: str) -> ScheduledFunc | None:
        return self._jobs.get(name)

    @property
    def jobs(self) -> list[ScheduledFunc]:
        return list(self._jobs.values())

    def __len__(self) -> int:
        return len(self._jobs)

    def print_jobs(self) -> None:
        """Logs every registered job at debug level."""
        logger.debug("--- Registered Jobs ---")
        if self._jobs:
            for job in self._jobs.values():
                logger.debug(
                    f"Job: {job.name} | delay={job.delay_ms}ms | wait_first={job.wait_first}"
                    f" | max_repetitions={job.max_repetitions}"
                )
        else:
            logger.debug("No jobs registered.")
        logger.debug("--- End of Registered Jobs ---")
