"""Feed input lines to the worker queue."""

import logging
import queue
from typing import Iterable, Union

logger = logging.getLogger(__name__)

# Put once per consumer after the last line; a worker exits when it takes one.
STOP = None


def _decode(raw: Union[str, bytes]) -> str:
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def read_lines(stream: Iterable[Union[str, bytes]]) -> Iterable[str]:
    """Yield lines without terminators, stopping at the first empty line or EOF.

    A blank line in the middle of the input therefore ends it. Only one
    trailing LF or CRLF is removed. Byte lines are decoded as UTF-8 one
    at a time, with invalid bytes replaced, so a bad line stays a bad line.
    """
    for raw in stream:
        line = _strip_terminator(_decode(raw))
        if not line:
            return
        yield line


def dispatch_lines(stream: Iterable[Union[str, bytes]], work_queue: queue.Queue, num_consumers: int) -> int:
    """Push every input line onto work_queue, then close it.

    Blocks while the queue is full. Returns the number of lines pushed.
    """
    dispatched = 0
    try:
        for line in read_lines(stream):
            work_queue.put(line)
            dispatched += 1
    finally:
        for _ in range(num_consumers):
            work_queue.put(STOP)
    logger.info("Dispatched %d lines", dispatched)
    return dispatched
