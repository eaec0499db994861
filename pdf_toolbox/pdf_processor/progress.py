"""Monotonic progress reporting for long-running assembly operations"""

from typing import Callable, Optional

from ..middleware.logging import logger

type ProgressCallback = Callable[[int, str], None]


class ProgressTracker:
    """
    Forwards progress checkpoints to an optional callback.

    Values are clamped to [0, 100] and never decrease within one tracker, so
    a checkpoint reported out of order is raised to the last value instead.
    """

    def __init__(self, callback: Optional[ProgressCallback], operation: str):
        self._callback = callback
        self._operation = operation
        self.percent = 0

    def report(self, percent: float, message: str) -> None:
        value = max(self.percent, min(100, max(0, int(percent))))
        self.percent = value
        logger.debug(
            "Progress",
            extra={"operation": self._operation, "percent": value, "phase": message},
        )
        if self._callback is not None:
            self._callback(value, message)
