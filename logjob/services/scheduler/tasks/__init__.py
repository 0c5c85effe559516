from .periodic_logger import PeriodicLogger

__all__ = ["PeriodicLogger"]
