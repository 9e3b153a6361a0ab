"""CLI for joining feature CSVs."""

from __future__ import annotations

import argparse
import logging
import sys

from common.cli_helpers import require_directory, setup_logging
from join_features.join_features import outer_join, read_feature_dir

logger = logging.getLogger(__name__)


def _percent(value: str) -> int:
    pct = int(value)
    if not 0 <= pct <= 100:
        raise argparse.ArgumentTypeError("percentage must be between 0 and 100")
    return pct


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Outer-join features-<title>.csv files and print one CSV to stdout.",
    )
    parser.add_argument("--in", dest="input_dir", default=None, help="Directory with feature CSVs")
    parser.add_argument("--pct-min", type=_percent, default=5, help="Drop features in fewer than this percent of titles")
    parser.add_argument("--pct-max", type=_percent, default=90, help="Drop features in more than this percent of titles")
    args = parser.parse_args(argv)

    setup_logging()

    try:
        input_dir = require_directory(args.input_dir)
        vectors = read_feature_dir(input_dir)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    sys.stdout.write(outer_join(vectors, args.pct_min, args.pct_max))


if __name__ == "__main__":
    main()
