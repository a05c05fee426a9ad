"""
Unit tests for host console log forwarding.
"""

import asyncio
import logging
from queue import Queue

import pytest

from framedeck.core.errors import EmptyInputError
from framedeck.export import export_frames
from framedeck.utils.logging_utils import (
    QueueLogHandler,
    attach_queue_handler,
    detach_queue_handler,
    drain_queue,
)


@pytest.fixture
def log_queue():
    queue = Queue()
    handler = attach_queue_handler(queue)
    yield queue
    detach_queue_handler(handler)


class TestQueueLogHandler:
    """Tests for QueueLogHandler."""

    def test_emit_when_debug_then_reported_as_info(self):
        # Arrange
        queue = Queue()
        handler = QueueLogHandler(queue, level=logging.DEBUG)
        record = logging.LogRecord("framedeck.test", logging.DEBUG, __file__, 1, "hello %s", ("world",), None)

        # Act
        handler.emit(record)

        # Assert
        assert drain_queue(queue) == [("hello world", "INFO")]

    def test_attach_when_export_fails_then_error_forwarded(self, log_queue, rasterizer, make_scene):
        """Engine errors reach the host console queue."""
        with pytest.raises(EmptyInputError):
            asyncio.run(export_frames(make_scene(), [], rasterize=rasterizer))

        entries = drain_queue(log_queue)
        assert ("PDF export failed: no frames provided", "ERROR") in entries

    def test_detach_when_removed_then_no_more_messages(self):
        queue = Queue()
        handler = attach_queue_handler(queue)
        detach_queue_handler(handler)

        logging.getLogger("framedeck.export").warning("after detach")

        assert drain_queue(queue) == []
