"""Local persistence of scraped scripts."""

import logging
from pathlib import Path

from scrape_scripts.errors import PersistenceError

logger = logging.getLogger(__name__)


def artifact_paths(output_dir: str | Path, key: str) -> tuple[Path, Path]:
    """Return the (.txt, .meta) paths for an artifact key."""
    base = Path(output_dir)
    return base / f"{key}.txt", base / f"{key}.meta"


def _write(path: Path, data: bytes, kind: str) -> None:
    try:
        f = path.open("wb")
    except OSError as exc:
        raise PersistenceError(f"file {kind} open", str(exc)) from exc
    try:
        with f:
            f.write(data)
            f.flush()
    except OSError as exc:
        raise PersistenceError(f"file {kind} write", str(exc)) from exc


def write_artifacts(output_dir: str | Path, key: str, content: bytes, raw_line: str) -> None:
    """
    Write the script text, then the metadata line.

    The metadata file marks the title as done, so it is written last and
    only after the text was written in full.

    Raises:
        PersistenceError: On the first open or write failure.
    """
    txt_path, meta_path = artifact_paths(output_dir, key)
    _write(txt_path, content, "txt")
    _write(meta_path, (raw_line + "\n").encode("utf-8"), "meta")
    logger.debug("Saved %s and %s", txt_path, meta_path)
