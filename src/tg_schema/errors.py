# src/tg_schema/errors.py


class SchemaError(Exception):
    """Base class for failures while extracting the schema."""


class BoundaryNotFoundError(SchemaError):
    """A section start or stop marker is missing from the document."""

    def __init__(self, tag: str, text: str) -> None:
        self.tag = tag
        self.text = text
        super().__init__(f"Section boundary <{tag}> '{text}' not found")


class MalformedRowError(SchemaError):
    """A table row cannot be turned into a field or parameter."""

    def __init__(self, entity: str, row: list[str], reason: str) -> None:
        self.entity = entity
        self.row = row
        self.reason = reason
        super().__init__(f"Malformed row in '{entity}': {reason}: {row!r}")
