"""
Stylesheet writer.

The only place generated documents touch the filesystem.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import ErrorContext, OutputError

logger = logging.getLogger(__name__)


def write_stylesheets(documents: dict[str, str], output_dir: Path) -> list[Path]:
    """
    Write generated documents below *output_dir*.

    Args:
        documents: Relative path -> content, as returned by generate_stylesheets
        output_dir: Root output directory (created if missing)

    Returns:
        Written file paths, in mapping order

    Raises:
        OutputError: If a directory or file cannot be written
    """
    written: list[Path] = []
    for relative, content in documents.items():
        path = output_dir / relative
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputError("Cannot write stylesheet", ErrorContext(str(path), str(e))) from e
        logger.debug("Wrote %s", path)
        written.append(path)

    logger.info("SCSS files generated: %s (%d files)", output_dir, len(written))
    return written
