"""Value types produced by the mapper and consumed by the writer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VArray:
    items: list["Value"] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass
class VTable:
    """Insertion-ordered mapping from string key to Value."""

    entries: dict[str, "Value"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]

    def items(self) -> Iterator[tuple[str, "Value"]]:
        return iter(self.entries.items())

    def set(self, key: str, value: "Value") -> None:
        """Store *value* under *key*, replacing any previous value."""
        self.entries[key] = value

    def insert(self, key: str, value: "Value") -> None:
        """Store *value* under *key*, grouping repeats into a VArray.

        - absent key → stored as-is
        - key holding a non-array → becomes ``VArray([existing, value])``
        - key holding a VArray → *value* is appended
        """
        existing = self.entries.get(key)
        if existing is None:
            self.entries[key] = value
        elif isinstance(existing, VArray):
            existing.items.append(value)
        else:
            self.entries[key] = VArray([existing, value])

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k} = {v}" for k, v in self.entries.items()) + "}"


Value = Union[VString, VTable, VArray]


def to_plain(value: Value) -> str | dict | list:
    """Convert a Value tree into built-in str / dict / list objects."""
    if isinstance(value, VString):
        return value.value
    if isinstance(value, VTable):
        return {k: to_plain(v) for k, v in value.entries.items()}
    if isinstance(value, VArray):
        return [to_plain(v) for v in value.items]
    raise TypeError(f"not a Value: {value!r}")
