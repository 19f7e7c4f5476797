"""Typed attribute values.

An attribute value is one of four variants: Float, Int, Bool or Text.
Raw tokens are turned into these by dotgraph.coerce.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Float:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Int:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Bool:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Text:
    value: str

    def __str__(self) -> str:
        return self.value


AttributeValue = Union[Float, Int, Bool, Text]

# attribute name -> value
Attributes = dict[str, AttributeValue]
