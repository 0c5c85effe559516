"""
This module defines the `ScheduledFunc` model, the description of one job the
scheduler runs on a fixed delay.
"""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field


class ScheduledFunc(BaseModel):
    """
    A function registered for repeated, fixed-delay execution.

    The scheduler calls `callback` with no arguments, waits `delay_ms`
    milliseconds after it returns, and calls it again.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = Field(min_length=1)
    """Unique name of the job within a registry; used in logs."""
    callback: Callable[[], None]
    """The function to call on every firing."""
    delay_ms: int = Field(gt=0)
    """Milliseconds between the end of one call and the start of the next."""
    wait_first: bool = True
    """If True, the first call happens one delay after the scheduler starts."""
    max_repetitions: int | None = Field(default=None, ge=0)
    """Stop after this many calls. None runs until the scheduler stops."""
    replace_existing: bool = True
    """
    If True, registering a job whose name is already taken replaces the old job.
    If False, the registry raises `JobAlreadyRegistered`.
    """
