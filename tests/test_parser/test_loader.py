"""Tests for openapi_arrangement.parser.loader."""

from __future__ import annotations

import io
import json
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from openapi_arrangement.exceptions import SpecParseError
from openapi_arrangement.parser.loader import load_document, parse_document

DEFS_DOC = {"$defs": {"A": {"type": "string"}, "B": {"allOf": [{"$ref": "#/$defs/A"}]}}}


def _response(url: str, status: int = 200, **kwargs) -> httpx.Response:
    return httpx.Response(status_code=status, request=httpx.Request("GET", url), **kwargs)


class TestFiles:
    """Documents read from disk; the suffix selects the parser."""

    def test_json(self, tmp_path: Path) -> None:
        doc = tmp_path / "schema.json"
        doc.write_text(json.dumps(DEFS_DOC), encoding="utf-8")
        assert load_document(str(doc)) == DEFS_DOC

    def test_yaml_keeps_document_order(self, tmp_path: Path) -> None:
        doc = tmp_path / "order.yml"
        doc.write_text("$defs:\n  Zeta: {}\n  Alpha: {}\n  Mid: {}\n", encoding="utf-8")
        assert list(load_document(str(doc))["$defs"]) == ["Zeta", "Alpha", "Mid"]

    def test_unknown_suffix_falls_back_to_yaml(self, tmp_path: Path) -> None:
        doc = tmp_path / "schemas.txt"
        doc.write_text("$defs:\n  A: {}\n", encoding="utf-8")
        assert load_document(str(doc)) == {"$defs": {"A": {}}}

    def test_json_suffix_is_strict(self, tmp_path: Path) -> None:
        doc = tmp_path / "bad.json"
        doc.write_text("$defs:\n  A: {}\n", encoding="utf-8")
        with pytest.raises(SpecParseError, match="Invalid JSON"):
            load_document(str(doc))

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(SpecParseError, match="not found"):
            load_document(str(tmp_path / "missing.yaml"))

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(SpecParseError, match="Cannot read"):
            load_document(str(tmp_path))

    def test_blank(self, tmp_path: Path) -> None:
        doc = tmp_path / "blank.yaml"
        doc.write_text("  \n\t\n", encoding="utf-8")
        with pytest.raises(SpecParseError, match="empty"):
            load_document(str(doc))


class TestStdin:
    def test_dash_reads_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("$defs:\n  A:\n    type: string\n"))
        assert load_document("-") == {"$defs": {"A": {"type": "string"}}}

    def test_empty_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        with pytest.raises(SpecParseError, match="empty"):
            load_document("-")


class TestUrls:
    """Documents fetched over HTTP with a mocked ``httpx.get``."""

    def test_json_content_type(self) -> None:
        url = "https://example.com/schema"
        with patch("openapi_arrangement.parser.loader.httpx.get", return_value=_response(url, json=DEFS_DOC)):
            assert load_document(url) == DEFS_DOC

    def test_yaml_content_type(self) -> None:
        url = "https://example.com/api"
        response = _response(
            url,
            text="components:\n  schemas:\n    Pet: {}\n",
            headers={"content-type": "application/x-yaml"},
        )
        with patch("openapi_arrangement.parser.loader.httpx.get", return_value=response):
            assert load_document(url) == {"components": {"schemas": {"Pet": {}}}}

    def test_url_suffix_when_content_type_is_generic(self) -> None:
        url = "https://example.com/api.json"
        response = _response(url, text="components: {}\n", headers={"content-type": "text/plain"})
        with patch("openapi_arrangement.parser.loader.httpx.get", return_value=response):
            with pytest.raises(SpecParseError, match="Invalid JSON"):
                load_document(url)

    def test_http_error(self) -> None:
        url = "https://example.com/missing.json"
        with patch("openapi_arrangement.parser.loader.httpx.get", return_value=_response(url, 404)):
            with pytest.raises(SpecParseError, match="HTTP 404"):
                load_document(url)

    def test_connection_error(self) -> None:
        with patch(
            "openapi_arrangement.parser.loader.httpx.get",
            side_effect=httpx.ConnectError("Connection refused"),
        ):
            with pytest.raises(SpecParseError, match="Failed to fetch"):
                load_document("https://unreachable.example.com/api.json")


class TestParseDocument:
    def test_json_without_hint(self) -> None:
        assert parse_document('{"$defs": {}}') == {"$defs": {}}

    def test_yaml_without_hint(self) -> None:
        assert parse_document("key: value\nnested:\n  a: 1") == {"key": "value", "nested": {"a": 1}}

    def test_yaml_hint_skips_json(self) -> None:
        assert parse_document('{"a": [1, 2]}', "yaml") == {"a": [1, 2]}

    def test_non_mapping_is_returned_as_is(self) -> None:
        assert parse_document('["a", "b"]') == ["a", "b"]
        assert parse_document("just text") == "just text"

    def test_empty_yaml_document(self) -> None:
        assert parse_document("---\n", "yaml") is None

    def test_invalid(self) -> None:
        with pytest.raises(SpecParseError, match="Invalid JSON or YAML"):
            parse_document("}{not valid at all][")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(SpecParseError, match="Invalid YAML"):
            parse_document("a: [1, 2\n", "yaml")
