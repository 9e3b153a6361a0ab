"""CLI for scraping scripts for titles listed on stdin."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from scrape_scripts.config import apply_overrides, load_config
from scrape_scripts.helpers import parse_scrape_scripts_args
from scrape_scripts.report import ResultReporter
from scrape_scripts.scrape_scripts import scrape_scripts

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_scrape_scripts_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    load_dotenv()

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, TypeError, yaml.YAMLError) as exc:
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)

    config = apply_overrides(
        config,
        num_workers=args.workers,
        output_dir=args.output_dir,
        request_timeout=args.timeout,
    )

    output_dir = Path(config.output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Cannot create output directory %s: %s", output_dir, exc)
        sys.exit(1)

    reporter = ResultReporter(sys.stdout)

    if args.input is None:
        scrape_scripts(sys.stdin.buffer, config, reporter)
        return

    try:
        input_file = open(args.input, "rb")
    except OSError as exc:
        logger.error("Cannot read input %s: %s", args.input, exc)
        sys.exit(1)
    with input_file:
        scrape_scripts(input_file, config, reporter)


if __name__ == "__main__":
    main()
