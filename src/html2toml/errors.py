"""Error types raised by the html2toml pipeline."""

from __future__ import annotations


class Html2TomlError(Exception):
    """Base class for every failure the CLI reports."""


class InputError(Html2TomlError):
    """The HTML source could not be read."""


class SerializeError(Html2TomlError):
    """A value could not be rendered as TOML."""


class OutputError(Html2TomlError):
    """The TOML output could not be written."""
