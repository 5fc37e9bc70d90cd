"""Mapper: converts a parsed element tree into Value tables."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from .reader import top_level_elements
from .values import VString, VTable

TEXT_KEY = "text"


def _is_text(node) -> bool:
    # Comments, CDATA, doctypes and processing instructions are not text
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def element_to_value(element: Tag) -> VTable | None:
    """Map *element* to a VTable, or ``None`` if it carries no information.

    - every attribute becomes ``name = "value"`` (source order)
    - every child element is mapped recursively and stored under its tag
      name; repeated tag names are grouped into a VArray
    - direct text is kept under ``text`` (trimmed) only when the element
      has no child elements at all
    """
    table = VTable()

    for name, value in element.attrs.items():
        table.set(str(name), VString(str(value)))

    has_child_elements = False
    text_content = ""

    for child in element.children:
        if isinstance(child, Tag):
            has_child_elements = True
            child_value = element_to_value(child)
            if child_value is not None:
                table.insert(child.name, child_value)
        elif _is_text(child):
            # trailing space keeps adjacent fragments from running together
            text_content += str(child) + " "

    text_content = text_content.strip()
    if not has_child_elements and text_content:
        table.set(TEXT_KEY, VString(text_content))

    if not table:
        return None
    return table


def document_to_table(soup: BeautifulSoup) -> VTable:
    """Map every top-level element of *soup* into one output table."""
    table = VTable()
    for element in top_level_elements(soup):
        value = element_to_value(element)
        if value is not None:
            table.insert(element.name, value)
    return table
