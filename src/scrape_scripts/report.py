"""Serialized success/failure reporting shared by all workers."""

import threading
from typing import TextIO

from scrape_scripts.models import FAILURE, SUCCESS, ReportEvent


class ResultReporter:
    """Writes one line per ReportEvent to stream; lines never interleave."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._lock = threading.Lock()
        self._succeeded = 0
        self._failed = 0

    def report(self, event: ReportEvent) -> None:
        line = event.format() + "\n"
        with self._lock:
            self._stream.write(line)
            self._stream.flush()
            if event.status == SUCCESS:
                self._succeeded += 1
            else:
                self._failed += 1

    def report_success(self, title: str) -> None:
        self.report(ReportEvent(SUCCESS, title))

    def report_failure(self, title: str, category: str, message: str) -> None:
        self.report(ReportEvent(FAILURE, title, category, message))

    @property
    def counts(self) -> tuple[int, int]:
        """(succeeded, failed) reported so far."""
        with self._lock:
            return self._succeeded, self._failed
