"""Reader layer: loads an HTML source and parses it into a BeautifulSoup tree."""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import Tag

from .errors import InputError

logger = logging.getLogger(__name__)

# WHATWG-conformant tree construction (implied html/head/body, error recovery)
TREE_BUILDER = "html5lib"
SOURCE_ENCODING = "utf-8"


def read_source(path: str | Path) -> bytes:
    """Return the raw bytes of the HTML file at *path*."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputError(f"cannot read '{path}': {exc}") from exc
    logger.debug("read %d bytes from %s", len(data), path)
    return data


def parse_html(markup: str | bytes) -> BeautifulSoup:
    """Parse *markup* into a document tree.

    Attribute values are always kept as plain strings (``class="a b"``
    stays ``"a b"``). Bytes are decoded as UTF-8; undecodable sequences are
    replaced rather than rejected.
    """
    options: dict[str, object] = {"multi_valued_attributes": None}
    if isinstance(markup, bytes):
        options["from_encoding"] = SOURCE_ENCODING
    return BeautifulSoup(markup, TREE_BUILDER, **options)


def top_level_elements(soup: BeautifulSoup) -> list[Tag]:
    """Element children of the document root, in document order."""
    return [child for child in soup.children if isinstance(child, Tag)]
