"""
Logging utilities for forwarding engine logs to a host console.

Export and presentation run inside a UI event loop; the host reads log
records from a queue and shows them in its own status/console widget.
"""
from __future__ import annotations

import logging
from queue import Empty, Queue
from typing import List, Optional, Tuple

ENGINE_LOGGER = "framedeck"


class QueueLogHandler(logging.Handler):
    """
    A logging handler that puts (message, level) tuples on a queue.

    DEBUG records are reported as INFO so the host only needs to style
    INFO / WARNING / ERROR.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            level = record.levelname
            if level == "DEBUG":
                level = "INFO"
            self.log_queue.put((message, level))
        except Exception:
            self.handleError(record)


def attach_queue_handler(
    log_queue: Queue,
    logger_name: Optional[str] = ENGINE_LOGGER,
    level: int = logging.INFO,
) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the engine logger (or root logger if None).

    Args:
        log_queue: Queue to send log messages to.
        logger_name: Name of logger to attach to. None = root logger.
        level: Minimum level forwarded to the queue.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue, level=level)
    logger.addHandler(handler)
    if logger.getEffectiveLevel() > level:
        logger.setLevel(level)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = ENGINE_LOGGER) -> None:
    """
    Remove a QueueLogHandler from the specified logger.

    Args:
        handler: The handler to remove.
        logger_name: Name of logger to detach from. None = root logger.
    """
    logging.getLogger(logger_name).removeHandler(handler)


def drain_queue(log_queue: Queue) -> List[Tuple[str, str]]:
    """Pop every pending (message, level) entry without blocking."""
    entries: List[Tuple[str, str]] = []
    while True:
        try:
            entries.append(log_queue.get_nowait())
        except Empty:
            return entries
