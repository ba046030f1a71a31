"""Input/Output operations for the print CLI."""

import bz2
import gzip
import json
import logging
import webbrowser
from pathlib import Path
from typing import Any

from billboard_print.print_engine.errors import PrintSurfaceUnavailableError

logger = logging.getLogger(__name__)


def open_compressed(path: Path, mode: str = "rt", **kwargs):
    """Open a file, automatically detecting compression.

    Supports uncompressed files, gzip .gz, and bz2 .bz2 files.
    Works like the built-in open() but handles compressed files transparently.

    Args:
        path: Path to file (compressed or uncompressed)
        mode: File mode (e.g., 'rt', 'rb', 'wt', 'wb')
        **kwargs: Additional arguments passed to the opener (e.g., encoding)

    Returns:
        File handle (text or binary mode depending on mode parameter)
    """
    if path.suffix == ".bz2":
        return bz2.open(path, mode, **kwargs)
    elif path.suffix == ".gz":
        return gzip.open(path, mode, **kwargs)
    else:
        return open(path, mode, **kwargs)


def load_json(path: Path) -> Any:
    """Load JSON from file, automatically detecting compression.

    Args:
        path: Path to JSON file (compressed or uncompressed)

    Returns:
        The decoded JSON value
    """
    with open_compressed(path, "rt", encoding="utf-8") as f:
        return json.load(f)


def write_document(path: Path, html: str) -> Path:
    """Write a composed document, creating parent directories.

    Raises:
        PrintSurfaceUnavailableError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open_compressed(path, "wt", encoding="utf-8") as f:
            f.write(html)
    except OSError as e:
        raise PrintSurfaceUnavailableError(f"Cannot write {path}: {e}") from e
    logger.info("Wrote %s", path)
    return path


def open_in_browser(path: Path) -> None:
    """Open a written document in the default browser for printing.

    Raises:
        PrintSurfaceUnavailableError: If no browser accepted the document.
    """
    url = path.resolve().as_uri()
    try:
        opened = webbrowser.open(url, new=2)
    except webbrowser.Error as e:
        raise PrintSurfaceUnavailableError(f"Cannot open {url}: {e}") from e
    if not opened:
        raise PrintSurfaceUnavailableError(f"No browser could open {url}")
    logger.debug("Opened %s", url)
