"""Writer layer: renders Value tables as TOML text and saves them."""

from __future__ import annotations

import logging
from pathlib import Path

import tomli_w

from .errors import OutputError, SerializeError
from .values import VTable, to_plain

logger = logging.getLogger(__name__)


def dumps(table: VTable) -> str:
    """Render *table* as a TOML document."""
    try:
        return tomli_w.dumps(to_plain(table))
    except (TypeError, ValueError) as exc:
        raise SerializeError(f"cannot serialize to TOML: {exc}") from exc


def write_output(path: str | Path, text: str) -> None:
    """Write *text* to *path*, replacing any existing file."""
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise OutputError(f"cannot write '{path}': {exc}") from exc
    logger.debug("wrote %d characters to %s", len(text), path)
