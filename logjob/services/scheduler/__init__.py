from .runner import repeat_every
from .scheduled_func import ScheduledFunc
from .scheduler_registry import SchedulerRegistry
from .scheduler_service import SchedulerService

__all__ = [
    "repeat_every",
    "ScheduledFunc",
    "SchedulerRegistry",
    "SchedulerService",
]
