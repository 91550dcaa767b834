"""
Token document retrieval.

A token source is one of:
- a local .json/.yaml/.yml file
- a local directory containing the token file (default tokens.json)
- an http(s) URL pointing straight at a .json/.yaml/.yml file
- anything else: a git repository, shallow-cloned into a temporary
  directory that is removed again once the document has been read
"""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx
import yaml

from .errors import ErrorContext, TokenSourceError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_FILE = "tokens.json"
DOCUMENT_SUFFIXES = (".json", ".yaml", ".yml")
HTTP_TIMEOUT = 30.0


# =============================================================================
# Parsing
# =============================================================================


def parse_document(content: str, origin: str) -> dict[str, Any]:
    """Parse JSON (or YAML, for .yaml/.yml origins) into a token document."""
    try:
        if origin.lower().endswith((".yaml", ".yml")):
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise TokenSourceError("Malformed token document", ErrorContext(origin, str(e))) from e

    if not isinstance(data, dict):
        raise TokenSourceError(
            "Token document must be a mapping of categories",
            ErrorContext(origin, f"got {type(data).__name__}"),
        )
    return data


def read_document(path: Path) -> dict[str, Any]:
    """Read and parse a token document from disk."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TokenSourceError("Cannot read token file", ErrorContext(str(path), str(e))) from e
    return parse_document(content, str(path))


# =============================================================================
# Source kinds
# =============================================================================


def is_http_document(source: str) -> bool:
    parsed = urlparse(source)
    return parsed.scheme in ("http", "https") and parsed.path.lower().endswith(DOCUMENT_SUFFIXES)


def load_local(path: Path, token_file: str = DEFAULT_TOKEN_FILE) -> dict[str, Any]:
    """Load from a file, or from *token_file* inside a directory."""
    if path.is_dir():
        path = path / token_file
    if not path.exists():
        raise TokenSourceError("Token file not found", ErrorContext(str(path)))
    return read_document(path)


def fetch_http(url: str, client: httpx.Client | None = None) -> dict[str, Any]:
    """Download a token document over HTTP."""
    logger.info("Fetching tokens: %s", url)
    owns_client = client is None
    client = client or httpx.Client(timeout=HTTP_TIMEOUT, follow_redirects=True)
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise TokenSourceError("Token download failed", ErrorContext(url, str(e))) from e
    finally:
        if owns_client:
            client.close()
    return parse_document(response.text, urlparse(url).path)


def clone_repository(repo_url: str, target_dir: Path) -> None:
    """Shallow-clone *repo_url* into *target_dir*."""
    logger.info("Cloning token repository: %s", repo_url)
    try:
        subprocess.run(
            ["git", "clone", "--depth", "1", repo_url, str(target_dir)],
            check=True,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise TokenSourceError("git is not installed", ErrorContext(repo_url)) from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit code {e.returncode}"
        raise TokenSourceError("Git repository clone failed", ErrorContext(repo_url, detail)) from e


def _cleanup(temp_dir: Path) -> None:
    try:
        shutil.rmtree(temp_dir)
        logger.debug("Temporary clone removed: %s", temp_dir)
    except OSError as e:
        logger.warning("Temporary clone cleanup failed for %s: %s", temp_dir, e)


def load_repository(repo_url: str, token_file: str = DEFAULT_TOKEN_FILE) -> dict[str, Any]:
    """Clone a repository, read its token file and remove the clone."""
    temp_dir = Path(tempfile.mkdtemp(prefix="figtokens-"))
    try:
        clone_dir = temp_dir / "repo"
        clone_repository(repo_url, clone_dir)
        token_path = clone_dir / token_file
        if not token_path.exists():
            raise TokenSourceError(
                f"{token_file} not found in repository", ErrorContext(repo_url)
            )
        return read_document(token_path)
    finally:
        _cleanup(temp_dir)


def load_tokens(source: str, token_file: str = DEFAULT_TOKEN_FILE) -> dict[str, Any]:
    """
    Load a token document from any supported source.

    Args:
        source: Local path, http(s) document URL, or git repository URL
        token_file: File name to read inside a directory or repository

    Returns:
        Parsed token document

    Raises:
        TokenSourceError: If the document cannot be retrieved or parsed
    """
    local = Path(source).expanduser()
    if local.exists():
        document = load_local(local, token_file)
    elif is_http_document(source):
        document = fetch_http(source)
    elif "://" in source or source.startswith("git@") or source.endswith(".git"):
        document = load_repository(source, token_file)
    else:
        raise TokenSourceError("Token source not found", ErrorContext(source))

    logger.info("Tokens loaded: %s (%d categories)", source, len(document))
    return document
