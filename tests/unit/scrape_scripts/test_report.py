"""Tests for scrape_scripts.report module."""

import io
import threading

from scrape_scripts.models import FAILURE, SUCCESS, ReportEvent
from scrape_scripts.report import ResultReporter


class TestReportEventFormat:
    def test_success(self) -> None:
        assert ReportEvent(SUCCESS, "Alien").format() == "success:\tAlien"

    def test_failure_with_category(self) -> None:
        event = ReportEvent(FAILURE, "Alien", "scrape error", "unexpected status code 404")
        assert event.format() == "failure:\tAlien\tscrape error:unexpected status code 404"

    def test_failure_without_category(self) -> None:
        event = ReportEvent(FAILURE, "Alien", "", "script already found")
        assert event.format() == "failure:\tAlien\tscript already found"


class TestResultReporter:
    def test_writes_one_line_per_event(self) -> None:
        stream = io.StringIO()
        reporter = ResultReporter(stream)

        reporter.report_success("Alien")
        reporter.report_failure("[unknown]", "", "invalid input line")

        assert stream.getvalue() == "success:\tAlien\nfailure:\t[unknown]\tinvalid input line\n"
        assert reporter.counts == (1, 1)

    def test_concurrent_writers_do_not_interleave(self) -> None:
        stream = io.StringIO()
        reporter = ResultReporter(stream)

        def emit(worker: int) -> None:
            for i in range(200):
                if i % 2:
                    reporter.report_success(f"title-{worker}-{i}")
                else:
                    reporter.report_failure(f"title-{worker}-{i}", "scrape error", "boom")

        threads = [threading.Thread(target=emit, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1600
        for line in lines:
            fields = line.split("\t")
            assert fields[0] in ("success:", "failure:")
            assert fields[1].startswith("title-")
            if fields[0] == "failure:":
                assert fields[2] == "scrape error:boom"
        assert reporter.counts == (800, 800)
