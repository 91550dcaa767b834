"""
Build pipeline: load tokens, generate stylesheets, check references, write.

Loading and writing are injectable so the pipeline can be exercised
without network or disk access.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .emitter import generate_stylesheets
from .errors import DanglingReferenceError, ErrorContext
from .source import DEFAULT_TOKEN_FILE, load_tokens
from .validation import DanglingReference, find_dangling_references
from .writer import write_stylesheets

logger = logging.getLogger(__name__)

Loader = Callable[[str, str], dict[str, Any]]
Writer = Callable[[dict[str, str], Path], list[Path]]


@dataclass
class BuildResult:
    """Outcome of a build."""

    documents: dict[str, str]
    dangling: list[DanglingReference] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)


def build(
    source: str,
    output_dir: Path | None = None,
    *,
    token_file: str = DEFAULT_TOKEN_FILE,
    strict: bool = False,
    loader: Loader = load_tokens,
    writer: Writer = write_stylesheets,
) -> BuildResult:
    """
    Run a full conversion.

    Args:
        source: Token source (path, URL, or git repository)
        output_dir: Where to write; None generates in memory only
        token_file: Token file name inside a directory or repository
        strict: Raise instead of warn on dangling references
        loader: Token document loader
        writer: Stylesheet writer

    Returns:
        BuildResult with the generated documents

    Raises:
        TokenSourceError: If the source cannot be loaded
        DanglingReferenceError: In strict mode, if any reference dangles
        OutputError: If writing fails
    """
    document = loader(source, token_file)
    documents = generate_stylesheets(document)

    dangling = find_dangling_references(documents)
    for ref in dangling:
        logger.warning("Dangling reference --%s in %s", ref.name, ref.path)
    if dangling and strict:
        raise DanglingReferenceError([ref.name for ref in dangling], ErrorContext(source))

    result = BuildResult(documents=documents, dangling=dangling)
    if output_dir is not None:
        result.written = writer(documents, output_dir)
    return result
