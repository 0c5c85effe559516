"""
This module provides `repeat_every`, a decorator that turns a function taking no
arguments into a repeating background task on the running asyncio event loop.

Repetition uses fixed-delay semantics: the wait for the next call starts only
after the previous call has returned, so calls never overlap and a slow call
pushes every later call back by the same amount.

Adapted from the `fastapi-utils` project by dmontagu
(https://github.com/dmontagu/fastapi-utils/blob/master/fastapi_utils/tasks.py),
MIT license.
"""

import asyncio
import inspect
import logging
from asyncio import ensure_future, sleep
from collections.abc import Callable, Coroutine
from functools import wraps
from traceback import format_exception
from typing import Any, cast

from starlette.concurrency import run_in_threadpool

NoArgsNoReturnFuncT = Callable[[], None]
NoArgsNoReturnAsyncFuncT = Callable[[], Coroutine[Any, Any, None]]
RepeatingTaskFuncT = Callable[[], Coroutine[Any, Any, "asyncio.Task[None]"]]
NoArgsNoReturnDecorator = Callable[[NoArgsNoReturnFuncT | NoArgsNoReturnAsyncFuncT], RepeatingTaskFuncT]


def repeat_every(
    *,
    milliseconds: int,
    wait_first: bool = True,
    logger: logging.Logger | None = None,
    raise_exceptions: bool = False,
    max_repetitions: int | None = None,
) -> NoArgsNoReturnDecorator:
    """
    Returns a decorator that modifies a function to be periodically re-executed.

    The decorated function should accept no arguments and return nothing. Awaiting
    the decorated function schedules the loop and returns its `asyncio.Task`,
    which the caller owns and cancels to stop the repetition.

    Args:
        milliseconds (int): Delay between the end of one call and the start of the next.
        wait_first (bool, optional): If True, wait one delay before the first call.
            Defaults to True.
        logger (logging.Logger | None, optional): Logger used to report exceptions
            raised by the function. Defaults to None.
        raise_exceptions (bool, optional): If True, an exception from the function
            ends the loop and is stored on the task. If False, it is logged (when a
            logger is given) and the loop keeps going. Defaults to False.
        max_repetitions (int | None, optional): Maximum number of calls. None repeats
            until the task is cancelled. Defaults to None.
    """
    if milliseconds <= 0:
        raise ValueError(f"milliseconds must be positive, got {milliseconds}")

    delay_seconds = milliseconds / 1000

    def decorator(func: NoArgsNoReturnAsyncFuncT | NoArgsNoReturnFuncT) -> RepeatingTaskFuncT:
        is_coroutine = inspect.iscoroutinefunction(func)

        @wraps(func)
        async def wrapped() -> "asyncio.Task[None]":
            repetitions = 0

            async def loop() -> None:
                nonlocal repetitions

                if wait_first:
                    await sleep(delay_seconds)

                while max_repetitions is None or repetitions < max_repetitions:
                    try:
                        if is_coroutine:
                            await cast(NoArgsNoReturnAsyncFuncT, func)()
                        else:
                            # sync functions run off the event loop thread
                            await run_in_threadpool(cast(NoArgsNoReturnFuncT, func))
                    except Exception as exc:
                        if logger is not None:
                            details = "".join(format_exception(type(exc), exc, exc.__traceback__))
                            logger.error(f"Exception in scheduled task '{func.__name__}':\n{details}")
                        if raise_exceptions:
                            raise exc

                    repetitions += 1
                    if max_repetitions is not None and repetitions >= max_repetitions:
                        break

                    await sleep(delay_seconds)

            return ensure_future(loop())

        return wrapped

    return decorator
