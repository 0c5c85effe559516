"""
The periodic log job: every firing writes one fixed message at each of the
debug, info, warning and error levels.
"""

import logging

from logjob.core import root_logger
from logjob.core.settings import DEFAULT_LOG_JOB_DELAY_MS
from logjob.services.scheduler.scheduled_func import ScheduledFunc

JOB_NAME = "periodic_logger"


class PeriodicLogger:
    """
    Writes four log records, one per severity tier, each time `tick` runs.

    The delay is fixed at construction. `scheduled()` turns the instance into the
    registration the scheduler runs.
    """

    def __init__(self, delay_ms: int = DEFAULT_LOG_JOB_DELAY_MS, logger: logging.Logger | None = None) -> None:
        if delay_ms <= 0:
            raise ValueError(f"delay_ms must be positive, got {delay_ms}")

        self._delay_ms = delay_ms
        self.logger = logger or root_logger.get_logger(__name__)

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    def tick(self) -> None:
        self.logger.debug("debug")
        self.logger.info("info")
        self.logger.warning("warn")
        self.logger.error("error")

    def scheduled(self) -> ScheduledFunc:
        return ScheduledFunc(name=JOB_NAME, callback=self.tick, delay_ms=self._delay_ms)
