"""Concurrent fetch, extract and persist of scripts."""

import logging
import queue
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Union

from scrape_scripts.config import ScraperConfig
from scrape_scripts.dispatch import STOP, dispatch_lines
from scrape_scripts.errors import MalformedLineError, PersistenceError, ScrapeError
from scrape_scripts.fetch_script import fetch_script
from scrape_scripts.helpers import UNKNOWN_TITLE, artifact_key, parse_work_item
from scrape_scripts.models import RunStats
from scrape_scripts.persist import artifact_paths, write_artifacts
from scrape_scripts.report import ResultReporter
from scrape_scripts.tree import flatten

logger = logging.getLogger(__name__)


def process_line(line: str, config: ScraperConfig, reporter: ResultReporter) -> None:
    """Run one input line through validate, fetch, flatten and persist.

    Every outcome is reported; nothing is raised for expected failures.
    """
    try:
        item = parse_work_item(line)
    except MalformedLineError:
        reporter.report_failure(UNKNOWN_TITLE, "", "invalid input line")
        return

    key = artifact_key(item.title)
    _, meta_path = artifact_paths(config.output_dir, key)
    # Not atomic with the writes below; titles are expected to be unique per run.
    if meta_path.exists():
        reporter.report_failure(item.title, "", "script already found")
        return

    try:
        node = fetch_script(item.title, config)
    except ScrapeError as exc:
        reporter.report_failure(item.title, "scrape error", str(exc))
        return

    try:
        write_artifacts(config.output_dir, key, flatten(node), item.raw_line)
    except PersistenceError as exc:
        reporter.report_failure(item.title, exc.category, exc.message)
        return

    reporter.report_success(item.title)


def _worker(work_queue: queue.Queue, config: ScraperConfig, reporter: ResultReporter) -> None:
    while True:
        line = work_queue.get()
        if line is STOP:
            return
        try:
            process_line(line, config, reporter)
        except Exception as e:
            logger.exception("Unexpected error processing line %r", line)
            reporter.report_failure(_title_of(line), "unexpected error", str(e))


def _title_of(line: str) -> str:
    terms = line.split(",")
    return terms[0].strip() if len(terms) == 3 else UNKNOWN_TITLE


def scrape_scripts(
    lines: Iterable[Union[str, bytes]],
    config: ScraperConfig,
    reporter: ResultReporter,
) -> RunStats:
    """Process every input line with config.num_workers concurrent workers.

    Lines are read on the calling thread and handed to the workers through a
    queue bounded by config.queue_size. Returns once all workers have exited.
    """
    logger.info(
        "Scraping with %d workers from %s into %s",
        config.num_workers,
        config.endpoint_template,
        config.output_dir,
    )

    succeeded_before, failed_before = reporter.counts
    work_queue: queue.Queue = queue.Queue(maxsize=config.queue_size)
    with ThreadPoolExecutor(max_workers=config.num_workers) as executor:
        workers = [
            executor.submit(_worker, work_queue, config, reporter)
            for _ in range(config.num_workers)
        ]
        dispatched = dispatch_lines(lines, work_queue, config.num_workers)
        for worker in workers:
            worker.result()

    succeeded, failed = reporter.counts
    stats = RunStats(
        dispatched=dispatched,
        succeeded=succeeded - succeeded_before,
        failed=failed - failed_before,
    )
    logger.info(
        "Processed %d lines: %d succeeded, %d failed",
        stats.dispatched,
        stats.succeeded,
        stats.failed,
    )
    return stats
