"""Tests for html2toml.document and html2toml.reader."""

import tomllib

import pytest

from html2toml import Document, html_to_toml
from html2toml.errors import InputError
from html2toml.reader import read_source, top_level_elements, parse_html


SAMPLE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>Sample page</title>
  </head>
  <body>
    <div id="main" class="container wide">
      <h1>Welcome</h1>
      <p>First <em>paragraph</em></p>
      <ul>
        <li>one</li>
        <li>two</li>
        <li>three</li>
      </ul>
    </div>
  </body>
</html>
"""


def test_from_html_structure():
    doc = Document.from_html(SAMPLE)
    assert doc.to_plain() == {
        "html": {
            "lang": "en",
            "head": {
                "meta": {"charset": "utf-8"},
                "title": {"text": "Sample page"},
            },
            "body": {
                "div": {
                    "id": "main",
                    "class": "container wide",
                    "h1": {"text": "Welcome"},
                    "p": {"em": {"text": "paragraph"}},
                    "ul": {"li": [{"text": "one"}, {"text": "two"}, {"text": "three"}]},
                },
            },
        },
    }

def test_to_toml_parses_back():
    doc = Document.from_html(SAMPLE)
    assert tomllib.loads(doc.to_toml()) == doc.to_plain()

def test_default_document_is_empty():
    assert Document().to_toml() == ""


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def test_html_to_toml_from_file(tmp_path):
    src = tmp_path / "index.html"
    src.write_text(SAMPLE, encoding="utf-8")
    data = tomllib.loads(html_to_toml(src))
    assert data["html"]["body"]["div"]["h1"] == {"text": "Welcome"}

def test_html_to_toml_is_deterministic(tmp_path):
    src = tmp_path / "index.html"
    src.write_text(SAMPLE, encoding="utf-8")
    assert html_to_toml(src) == html_to_toml(src)

def test_utf8_source(tmp_path):
    src = tmp_path / "index.html"
    src.write_bytes("<p>山田太郎</p>".encode("utf-8"))
    data = tomllib.loads(html_to_toml(src))
    assert data["html"]["body"]["p"]["text"] == "山田太郎"

def test_invalid_utf8_is_tolerated(tmp_path):
    src = tmp_path / "index.html"
    src.write_bytes(b"<p>ok \xff</p>")
    data = tomllib.loads(html_to_toml(src))
    assert data["html"]["body"]["p"]["text"] == "ok \ufffd"

def test_missing_file(tmp_path):
    with pytest.raises(InputError):
        html_to_toml(tmp_path / "nope.html")

def test_read_source_returns_bytes(tmp_path):
    src = tmp_path / "index.html"
    src.write_bytes(b"<p>x</p>")
    assert read_source(src) == b"<p>x</p>"

def test_top_level_elements_skips_doctype():
    soup = parse_html("<!DOCTYPE html><html></html>")
    assert [el.name for el in top_level_elements(soup)] == ["html"]
