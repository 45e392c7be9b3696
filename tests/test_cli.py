"""Tests for the crawler CLI."""

from __future__ import annotations

import json

import httpx
import respx
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

_PAGE_HTML = """\
<html>
<head><link rel="shortcut icon" href="/favicon.ico"></head>
<body>
  <a href="/docs/">Docs</a>
  <a href="blog#latest">Blog</a>
  <script src="/js/app.js"></script>
</body>
</html>
"""


def test_fetch_prints_links_and_assets():
    with respx.mock:
        respx.get("https://example.com/").mock(
            return_value=httpx.Response(200, text=_PAGE_HTML)
        )
        result = runner.invoke(app, ["fetch", "https://example.com/"])

    assert result.exit_code == 0
    assert "Links  : 2" in result.stdout
    assert "https://example.com/docs/" in result.stdout
    assert "https://example.com/blog" in result.stdout
    assert "Assets : 2" in result.stdout
    assert "https://example.com/js/app.js" in result.stdout
    assert "https://example.com/favicon.ico" in result.stdout


def test_fetch_json_output():
    with respx.mock:
        respx.get("https://example.com/").mock(
            return_value=httpx.Response(200, text=_PAGE_HTML)
        )
        result = runner.invoke(app, ["fetch", "https://example.com/", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {
        "url": "https://example.com/",
        "links": ["https://example.com/docs/", "https://example.com/blog"],
        "assets": ["https://example.com/js/app.js", "https://example.com/favicon.ico"],
    }


def test_fetch_without_assets():
    with respx.mock:
        respx.get("https://example.com/").mock(
            return_value=httpx.Response(200, text=_PAGE_HTML)
        )
        result = runner.invoke(app, ["fetch", "https://example.com/", "--json", "--no-assets"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert "assets" not in payload
    assert payload["links"] == ["https://example.com/docs/", "https://example.com/blog"]


def test_fetch_http_error_exits_with_code_1():
    with respx.mock:
        respx.get("https://example.com/missing").mock(
            return_value=httpx.Response(404, text="Not Found")
        )
        result = runner.invoke(app, ["fetch", "https://example.com/missing"])

    assert result.exit_code == 1
    assert "[fetch] Error:" in result.stdout


def test_crawl_defaults_to_start_url(monkeypatch):
    monkeypatch.setattr("cli.main.settings.start_url", "https://start.example.com/")
    with respx.mock:
        route = respx.get("https://start.example.com/").mock(
            return_value=httpx.Response(200, text=_PAGE_HTML)
        )
        result = runner.invoke(app, ["crawl"])

    assert route.called
    assert result.exit_code == 0
    assert "https://start.example.com/: 2 links, 2 assets" in result.stdout


def test_crawl_connection_error():
    with respx.mock:
        respx.get("https://down.example.com/").mock(
            side_effect=httpx.ConnectError("connection refused")
        )
        result = runner.invoke(app, ["crawl", "https://down.example.com/"])

    assert result.exit_code == 1
    assert "[crawl] Error:" in result.stdout


def test_verbose_enables_debug_logging(monkeypatch):
    calls = []
    monkeypatch.setattr("cli.main.logging.basicConfig", lambda **kw: calls.append(kw))
    with respx.mock:
        respx.get("https://example.com/").mock(
            return_value=httpx.Response(200, text="")
        )
        result = runner.invoke(app, ["--verbose", "fetch", "https://example.com/"])

    assert result.exit_code == 0
    assert calls and calls[0]["level"] == 10
