"""
Project configuration (figtokens.toml).

Example:

    [source]
    location = "https://github.com/acme/design-tokens"
    token_file = "tokens.json"

    [output]
    directory = "./css"

    [build]
    strict = false

Every section and key is optional. Values given on the command line win
over the manifest; the manifest wins over the TOKENS_SOURCE environment
variable.
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ErrorContext, ManifestError

MANIFEST_FILE = "figtokens.toml"
SOURCE_ENV_VAR = "TOKENS_SOURCE"


@dataclass
class SourceConfig:
    """Where the token document comes from."""

    location: str | None = None  # file, directory, URL, or git repository
    token_file: str = "tokens.json"  # file name inside a directory/repository


@dataclass
class OutputConfig:
    """Where stylesheets are written."""

    directory: str = "./css"


@dataclass
class BuildConfig:
    """Build behaviour."""

    strict: bool = False  # fail on dangling references


@dataclass
class ProjectManifest:
    source: SourceConfig = field(default_factory=SourceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    build: BuildConfig = field(default_factory=BuildConfig)

    def resolve_source(self, override: str | None = None) -> str | None:
        """Token source: explicit override, then manifest, then environment."""
        return override or self.source.location or os.environ.get(SOURCE_ENV_VAR) or None


def load_manifest(path: Path) -> ProjectManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError("Invalid TOML", ErrorContext(str(path), str(e))) from e

    source = data.get("source", {})
    output = data.get("output", {})
    build = data.get("build", {})

    return ProjectManifest(
        source=SourceConfig(
            location=source.get("location"),
            token_file=source.get("token_file", "tokens.json"),
        ),
        output=OutputConfig(
            directory=output.get("directory", "./css"),
        ),
        build=BuildConfig(
            strict=bool(build.get("strict", False)),
        ),
    )


def find_manifest(start: Path | None = None) -> ProjectManifest:
    """Load figtokens.toml from *start* (default: cwd) or return defaults."""
    path = (start or Path.cwd()) / MANIFEST_FILE
    if path.exists():
        return load_manifest(path)
    return ProjectManifest()
