"""Tests for token document retrieval."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any

import httpx
import pytest

from figtokens.core import source
from figtokens.core.errors import TokenSourceError
from figtokens.core.source import fetch_http, is_http_document, load_tokens, parse_document


class TestParseDocument:
    """Test parse_document."""

    def test_json(self):
        assert parse_document('{"a": {}}', "tokens.json") == {"a": {}}

    def test_yaml(self):
        content = "global:\n  spacing:\n    sm:\n      type: dimension\n      value: 8\n"
        data = parse_document(content, "tokens.yaml")
        assert data["global"]["spacing"]["sm"]["value"] == 8

    def test_malformed(self):
        with pytest.raises(TokenSourceError, match="Malformed token document"):
            parse_document("{not json", "tokens.json")

    def test_not_a_mapping(self):
        with pytest.raises(TokenSourceError, match="must be a mapping"):
            parse_document("[1, 2]", "tokens.json")


class TestLocalSources:
    """Test file and directory sources."""

    def test_file(self, tokens_file: Path, token_document: dict[str, Any]):
        assert load_tokens(str(tokens_file)) == token_document

    def test_directory(self, tokens_file: Path, token_document: dict[str, Any]):
        assert load_tokens(str(tokens_file.parent)) == token_document

    def test_directory_custom_token_file(self, tmp_path: Path):
        (tmp_path / "design.json").write_text('{"core": {}}', encoding="utf-8")
        assert load_tokens(str(tmp_path), "design.json") == {"core": {}}

    def test_directory_without_token_file(self, tmp_path: Path):
        with pytest.raises(TokenSourceError, match="Token file not found"):
            load_tokens(str(tmp_path))

    def test_unknown_source(self, tmp_path: Path):
        with pytest.raises(TokenSourceError, match="Token source not found"):
            load_tokens(str(tmp_path / "missing.json"))


class TestHttpSource:
    """Test HTTP retrieval with a mock transport."""

    def test_is_http_document(self):
        assert is_http_document("https://example.com/tokens.json")
        assert is_http_document("http://example.com/a/tokens.yml")
        assert not is_http_document("https://github.com/acme/design-tokens")

    def test_fetch(self, token_document: dict[str, Any]):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/tokens.json"
            return httpx.Response(200, json=token_document)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        assert fetch_http("https://example.com/tokens.json", client) == token_document

    def test_fetch_error(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(404)))
        with pytest.raises(TokenSourceError, match="Token download failed"):
            fetch_http("https://example.com/tokens.json", client)


class TestRepositorySource:
    """Test git repository retrieval with a stubbed clone."""

    def test_clone_and_cleanup(
        self, monkeypatch: pytest.MonkeyPatch, token_document: dict[str, Any]
    ):
        cloned: list[Path] = []

        def fake_clone(repo_url: str, target_dir: Path) -> None:
            target_dir.mkdir(parents=True)
            (target_dir / "tokens.json").write_text(json.dumps(token_document))
            cloned.append(target_dir)

        monkeypatch.setattr(source, "clone_repository", fake_clone)
        assert load_tokens("https://github.com/acme/design-tokens") == token_document
        assert cloned
        assert not cloned[0].parent.exists()

    def test_missing_token_file_still_cleans_up(self, monkeypatch: pytest.MonkeyPatch):
        cloned: list[Path] = []

        def fake_clone(repo_url: str, target_dir: Path) -> None:
            target_dir.mkdir(parents=True)
            cloned.append(target_dir)

        monkeypatch.setattr(source, "clone_repository", fake_clone)
        with pytest.raises(TokenSourceError, match="tokens.json not found in repository"):
            load_tokens("git@github.com:acme/design-tokens.git")
        assert not cloned[0].parent.exists()

    def test_clone_failure(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        def fake_run(*args: Any, **kwargs: Any) -> None:
            raise subprocess.CalledProcessError(128, args[0], stderr="fatal: not found")

        monkeypatch.setattr(source.subprocess, "run", fake_run)
        with pytest.raises(TokenSourceError, match="fatal: not found"):
            source.clone_repository("https://github.com/acme/nope", tmp_path / "repo")
