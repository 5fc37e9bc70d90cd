"""html2toml: structural dump of an HTML document into TOML."""

from .document import Document, html_to_toml
from .errors import Html2TomlError, InputError, OutputError, SerializeError
from .mapper import document_to_table, element_to_value
from .reader import parse_html, read_source, top_level_elements
from .values import Value, VArray, VString, VTable, to_plain
from .writer import dumps, write_output

__all__ = [
    "html_to_toml",
    "Document",
    "Value",
    "VArray",
    "VString",
    "VTable",
    "to_plain",
    "element_to_value",
    "document_to_table",
    "parse_html",
    "read_source",
    "top_level_elements",
    "dumps",
    "write_output",
    "Html2TomlError",
    "InputError",
    "OutputError",
    "SerializeError",
]
