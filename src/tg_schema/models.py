# src/tg_schema/models.py

from dataclasses import dataclass, field
from enum import Enum

from .primitives import PRIMITIVES, Primitive


# --- Raw records (segmentation output) ---


@dataclass
class RawRecord:
    """One documented entity as found in the page, all strings.

    Owned and mutated by the segmenter until the section walk ends.
    """

    heading: str
    description: str | None = None
    rows: list[list[str]] = field(default_factory=list)


@dataclass
class RawChange:
    heading: str
    description: str | None = None
    items: list[str] = field(default_factory=list)


# --- Typed schema ---


class Required(str, Enum):
    """Value of the "Required" column in method tables."""

    YES = "Yes"
    OPTIONAL = "Optional"


@dataclass(frozen=True)
class Field:
    name: str
    type: Primitive
    description: str


@dataclass(frozen=True)
class Param:
    name: str
    type: Primitive
    required: Required
    description: str


@dataclass(frozen=True)
class Type:
    name: str
    description: str
    fields: list[Field]


@dataclass(frozen=True)
class Method:
    name: str
    description: str
    params: list[Param]
    return_type: Primitive


@dataclass(frozen=True)
class Change:
    date: str
    version: str
    changes: list[str]


@dataclass(frozen=True)
class Schema:
    """Everything extracted from one documentation page."""

    recent_changes: list[Change]
    types: list[Type]
    methods: list[Method]
    primitives: tuple[str, ...] = PRIMITIVES

    def get_type(self, name: str) -> Type:
        for ty in self.types:
            if ty.name == name:
                return ty
        raise KeyError(f"Type '{name}' not found")

    def get_method(self, name: str) -> Method:
        for method in self.methods:
            if method.name == name:
                return method
        raise KeyError(f"Method '{name}' not found")
