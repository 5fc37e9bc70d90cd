"""Document: the converted form of one HTML source."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .mapper import document_to_table
from .reader import parse_html, read_source
from .values import VTable, to_plain
from .writer import dumps

logger = logging.getLogger(__name__)


@dataclass
class Document:
    """Holds the output table built from an HTML source."""

    table: VTable = field(default_factory=VTable)

    # -- Construction ---------------------------------------------------

    @classmethod
    def from_html(cls, markup: str | bytes) -> "Document":
        soup = parse_html(markup)
        table = document_to_table(soup)
        logger.debug("mapped %d top-level key(s)", len(table))
        return cls(table)

    @classmethod
    def from_file(cls, path: str | Path) -> "Document":
        return cls.from_html(read_source(path))

    # -- Output ---------------------------------------------------------

    def to_plain(self) -> dict:
        return to_plain(self.table)

    def to_toml(self) -> str:
        return dumps(self.table)


def html_to_toml(path: str | Path) -> str:
    """Read the HTML file at *path* and return it rendered as TOML."""
    return Document.from_file(path).to_toml()
