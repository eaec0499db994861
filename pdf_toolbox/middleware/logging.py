import functools
import os
import threading

import psutil
from aws_lambda_powertools.logging import Logger

logger = Logger(service="pdf-toolbox")


def memory_snapshot() -> dict:
    """Return the memory figures logged around assembly operations."""
    vm = psutil.virtual_memory()
    rss = psutil.Process(os.getpid()).memory_info().rss
    return {
        "memory_available_mb": vm.available // (1024 * 1024),
        "memory_percent_used": vm.percent,
        "process_rss_mb": rss // (1024 * 1024),
    }


def logging_middleware(operation):
    """Decorator to automatically handle structured logging of an operation."""

    @functools.wraps(operation)
    def wrapper(*args, **kwargs):
        name = operation.__qualname__

        # Log system details at the start
        system_info_start = {
            "cpu_cores": os.cpu_count(),
            "active_threads": threading.active_count(),
            **memory_snapshot(),
        }
        logger.info(
            "Operation started",
            extra={"operation": name, "system_info": system_info_start},
        )

        try:
            result = operation(*args, **kwargs)
        except Exception as e:
            # the traceback is reported once, by the error handler
            logger.info(
                "Operation failed",
                extra={
                    "operation": name,
                    "error": e.__class__.__name__,
                    "system_info": memory_snapshot(),
                },
            )
            raise

        logger.info(
            "Operation finished",
            extra={"operation": name, "system_info": memory_snapshot()},
        )
        return result

    return wrapper
