# src/tg_schema/primitives.py

"""Primitive type algebra for Bot API fields.

A closed set of frozen variants. `Array` and `Optional` wrap exactly one
child, every other variant is a leaf. `Struct` refers to another entity
by name only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Primitive:
    """Base of all primitive variants."""

    @property
    def kind(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class Int32(Primitive):
    """tg's Integer"""


@dataclass(frozen=True)
class Int64(Primitive):
    """tg's Integer when the description mentions 64-bit width"""


@dataclass(frozen=True)
class Float32(Primitive):
    """tg's Float / Float number"""


@dataclass(frozen=True)
class Str(Primitive):
    """tg's String"""


@dataclass(frozen=True)
class Bool(Primitive):
    """tg's Boolean"""


@dataclass(frozen=True)
class TrueLiteral(Primitive):
    """tg's True"""


@dataclass(frozen=True)
class Struct(Primitive):
    """Reference to another documented type."""

    name: str


@dataclass(frozen=True)
class Array(Primitive):
    """tg's `Array of`"""

    item: Primitive


@dataclass(frozen=True)
class Optional(Primitive):
    """tg's "Optional. " description prefix"""

    inner: Primitive


@dataclass(frozen=True)
class ChatId(Primitive):
    """tg's Integer or String"""


@dataclass(frozen=True)
class ParseMode(Primitive):
    """String in the docs, a `HTML | Markdown | MarkdownV2` choice in practice."""


@dataclass(frozen=True)
class InputFile(Primitive):
    """tg's InputFile or String: file id, URL or multipart upload."""


PRIMITIVES: tuple[str, ...] = tuple(cls.__name__ for cls in Primitive.__subclasses__())
