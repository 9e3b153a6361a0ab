"""Helper functions for the scrape_scripts stage."""

from __future__ import annotations

import argparse

from common.cli_helpers import positive_float, positive_int
from scrape_scripts.errors import MalformedLineError
from scrape_scripts.models import WorkItem

UNKNOWN_TITLE = "[unknown]"


def parse_work_item(line: str) -> WorkItem:
    '''Split an input line into a WorkItem.

    The line must have exactly three comma-separated fields; the third is
    carried only through raw_line.
    '''
    terms = line.split(",")
    if len(terms) != 3:
        raise MalformedLineError(f"expected 3 fields, found {len(terms)}")
    return WorkItem(
        title=terms[0].strip(),
        content_rating=terms[1].strip(),
        raw_line=line,
    )


def format_title_for_url(title: str) -> str:
    return title.replace(" ", "_")


def artifact_key(title: str) -> str:
    '''Filename stem shared by the .txt and .meta artifacts of a title.'''
    return title.lower().replace(" ", "_")


def parse_scrape_scripts_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for scrape_scripts.'''
    parser = argparse.ArgumentParser(
        description="Fetch scripts for titles read from stdin and save them locally.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under scrape_scripts/configs or a YAML path (default: $SCRAPER_CONFIG or 'default').",
    )
    parser.add_argument(
        "--input",
        default=None,
        help="Read input lines from this file instead of stdin.",
    )
    parser.add_argument("--workers", type=positive_int, default=None, help="Number of concurrent workers.")
    parser.add_argument("--output-dir", default=None, help="Directory for .txt and .meta artifacts.")
    parser.add_argument("--timeout", type=positive_float, default=None, help="Request timeout in seconds.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)
