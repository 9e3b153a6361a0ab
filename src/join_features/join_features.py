"""Outer join of per-title feature CSVs into one table."""

import csv
import io
import logging
from pathlib import Path

from generate_features.generate_features import RATING_COLUMN
from generate_features.models import FeatureVector

logger = logging.getLogger(__name__)

FILE_PREFIX = "features-"
FILE_SUFFIX = ".csv"


def title_from_path(path: Path) -> str:
    name = path.name
    if name.startswith(FILE_PREFIX):
        name = name[len(FILE_PREFIX):]
    if name.endswith(FILE_SUFFIX):
        name = name[: -len(FILE_SUFFIX)]
    return name


def read_feature_csv(path: Path) -> FeatureVector:
    """Read a features-<title>.csv written by generate_features.

    Raises:
        ValueError: If the first column is not content_rating or a count is
            not an integer.
    """
    with path.open(newline="") as f:
        rows = list(csv.reader(f))
    if not rows or not rows[0] or rows[0][0] != RATING_COLUMN:
        raise ValueError(f"first feature must be '{RATING_COLUMN}' in {path.name}")

    header = rows[0]
    values = rows[1] if len(rows) > 1 else []
    if len(values) != len(header):
        raise ValueError(f"{path.name}: {len(header)} columns in header, {len(values)} in values")

    counts = {name: int(value) for name, value in zip(header[1:], values[1:])}
    return FeatureVector(title=title_from_path(path), content_rating=values[0], counts=counts)


def read_feature_dir(input_dir: Path) -> list[FeatureVector]:
    paths = sorted(
        path for path in input_dir.iterdir()
        if path.is_file() and path.name.startswith(FILE_PREFIX) and path.suffix == FILE_SUFFIX
    )
    logger.info("Reading %d feature files from %s", len(paths), input_dir)
    return [read_feature_csv(path) for path in paths]


def filter_features(vectors: list[FeatureVector], pct_min: int, pct_max: int) -> list[str]:
    """Features present in at least pct_min and at most pct_max percent of vectors."""
    occurrences: dict[str, int] = {}
    for vector in vectors:
        for name, count in vector.counts.items():
            if count > 0:
                occurrences[name] = occurrences.get(name, 0) + 1
            else:
                occurrences.setdefault(name, 0)

    total = len(vectors)
    kept = [
        name for name, seen in occurrences.items()
        if total * pct_min <= seen * 100 <= total * pct_max
    ]
    return sorted(kept)


def outer_join(vectors: list[FeatureVector], pct_min: int = 5, pct_max: int = 90) -> str:
    """Join vectors into CSV text with one row per title and zero for absent features."""
    features = filter_features(vectors, pct_min, pct_max)
    logger.info("Keeping %d features across %d titles", len(features), len(vectors))

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["title", RATING_COLUMN, *features])
    for vector in vectors:
        writer.writerow([
            vector.title,
            vector.content_rating,
            *(vector.counts.get(name, 0) for name in features),
        ])
    return buffer.getvalue()
