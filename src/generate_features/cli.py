"""CLI for generating feature CSVs from scraped scripts."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from common.cli_helpers import require_directory, setup_logging
from generate_features.generate_features import generate_all_features

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Write features-<title>.csv for every scraped .txt/.meta pair.",
    )
    parser.add_argument("--in", dest="input_dir", default=None, help="Directory with .meta and .txt files")
    parser.add_argument("--out", dest="output_dir", default=".", help="Directory for feature CSVs (default: cwd)")
    args = parser.parse_args(argv)

    setup_logging()

    try:
        input_dir = require_directory(args.input_dir)
    except ValueError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    output_dir = Path(args.output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        generate_all_features(input_dir, output_dir)
    except (OSError, ValueError) as exc:
        logger.error("Feature generation failed: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
