"""Per-title feature counts from scraped scripts."""

import csv
import logging
import re
from collections import Counter
from pathlib import Path

from generate_features.models import FeatureVector

logger = logging.getLogger(__name__)

NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")
ARTIFACT_SUFFIXES = (".txt", ".meta")
RATING_COLUMN = "content_rating"


def normalize_word(word: str) -> str:
    """Lowercase word and drop punctuation and other non-alphanumerics."""
    return NON_ALNUM.sub("", word.lower())


def count_features(text: str) -> dict[str, int]:
    """Count every normalized word and every bigram of consecutive words.

    Words that normalize to nothing are skipped and do not break a bigram.
    """
    counts: Counter = Counter()
    previous = ""
    for raw in text.split():
        word = normalize_word(raw)
        if not word:
            continue
        counts[word] += 1
        if previous:
            counts[f"{previous}_{word}"] += 1
        previous = word
    return dict(counts)


def list_titles(input_dir: Path) -> list[str]:
    """Sorted unique artifact keys of the .txt/.meta files in input_dir."""
    titles = {
        path.stem
        for path in input_dir.iterdir()
        if path.is_file() and path.suffix in ARTIFACT_SUFFIXES
    }
    return sorted(titles)


def read_content_rating(meta_path: Path) -> str:
    terms = meta_path.read_text(encoding="utf-8").split(",")
    if len(terms) < 2:
        raise ValueError(f"malformed metadata in {meta_path}")
    return terms[1].strip()


def generate_features(input_dir: Path, title: str) -> FeatureVector:
    """Build the feature vector for one scraped title.

    Raises:
        OSError: If either artifact cannot be read.
        ValueError: If the metadata has no content rating field.
    """
    rating = read_content_rating(input_dir / f"{title}.meta")
    text = (input_dir / f"{title}.txt").read_text(encoding="utf-8", errors="replace")
    return FeatureVector(title=title, content_rating=rating, counts=count_features(text))


def write_feature_csv(vector: FeatureVector, output_dir: Path) -> Path:
    """Write features-<title>.csv: a header row of names and one row of counts."""
    features = sorted(vector.counts)
    path = output_dir / f"features-{vector.title}.csv"
    with path.open("w", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow([RATING_COLUMN, *features])
        writer.writerow([vector.content_rating, *(vector.counts[name] for name in features)])
    return path


def generate_all_features(input_dir: Path, output_dir: Path) -> list[Path]:
    """Write a feature CSV for every title in input_dir; stops at the first error."""
    titles = list_titles(input_dir)
    logger.info("Generating features for %d titles from %s", len(titles), input_dir)

    written = []
    for title in titles:
        logger.debug("title -> %r", title)
        vector = generate_features(input_dir, title)
        written.append(write_feature_csv(vector, output_dir))

    logger.info("Wrote %d feature files to %s", len(written), output_dir)
    return written
