import asyncio
import contextlib
import signal
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from logjob.core.config import get_app_settings
from logjob.core.root_logger import get_logger
from logjob.core.settings import AppSettings
from logjob.core.settings.static import APP_VERSION
from logjob.services.scheduler import SchedulerRegistry, SchedulerService
from logjob.services.scheduler.tasks import PeriodicLogger

settings = get_app_settings()

logger = get_logger()


def build_scheduler(app_settings: AppSettings) -> SchedulerService:
    """Wire the scheduled jobs of the application into a scheduler service."""
    registry = SchedulerRegistry()
    registry.register(PeriodicLogger(delay_ms=app_settings.LOG_JOB_DELAY_MS).scheduled())

    return SchedulerService(registry)


@asynccontextmanager
async def lifespan_fn(app_settings: AppSettings) -> AsyncGenerator[SchedulerService, None]:
    """
    lifespan_fn controls the startup and shutdown of the application.
    The scheduler built from `app_settings` runs for as long as the context is open.
    """
    logger.info(f"------SYSTEM STARTUP (logjob {APP_VERSION})------")
    logger.info("------APP SETTINGS------")
    logger.info(app_settings.model_dump_json(indent=2))

    scheduler = build_scheduler(app_settings)
    await scheduler.start()

    try:
        yield scheduler
    finally:
        logger.info("------SYSTEM SHUTDOWN------")
        await scheduler.stop()


def _install_signal_handlers(stop_event: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()

    def handle_shutdown() -> None:
        logger.info("Received shutdown signal")
        stop_event.set()

    for sig in (signal.SIGTERM, signal.SIGINT):
        try:
            loop.add_signal_handler(sig, handle_shutdown)
        except NotImplementedError:
            # Windows doesn't support add_signal_handler
            signal.signal(sig, lambda s, f: loop.call_soon_threadsafe(handle_shutdown))


async def serve(
    stop_event: asyncio.Event | None = None,
    handle_signals: bool = True,
    app_settings: AppSettings | None = None,
) -> None:
    """Run the scheduler until `stop_event` is set (SIGINT/SIGTERM set it when `handle_signals`)."""
    if stop_event is None:
        stop_event = asyncio.Event()

    if handle_signals:
        _install_signal_handlers(stop_event)

    async with lifespan_fn(app_settings or settings):
        await stop_event.wait()


def main():
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(serve())


if __name__ == "__main__":
    main()
