# src/tg_schema/transform/schema.py

import logging

from tg_schema.errors import MalformedRowError
from tg_schema.models import (
    Change,
    Field,
    Method,
    Param,
    RawChange,
    RawRecord,
    Required,
    Type,
)
from tg_schema.observability import names
from tg_schema.observability.base import MetricsHook, NoOpMetricsHook

from .resolver import resolve_return_type, resolve_type

logger = logging.getLogger(__name__)

FIELD_CELLS = 3
PARAM_CELLS = 4


def to_types(
    records: list[RawRecord],
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Type]:
    """Build one `Type` per record, one `Field` per table row.

    Rows are read positionally as (name, type, description); extra cells
    are ignored.

    Raises:
        MalformedRowError: If a row has fewer than three cells.
    """
    types = []
    for record in records:
        fields = [_to_field(record.heading, row) for row in record.rows]
        types.append(
            Type(
                name=record.heading,
                description=record.description or "",
                fields=fields,
            )
        )
        metrics_hook.increment(names.FIELDS_RESOLVED, len(fields))
    return types


def to_methods(
    records: list[RawRecord],
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Method]:
    """Build one `Method` per record whose heading is a method name.

    Method tables have four columns: Parameter, Type, Required, Description.
    Headings that are not camelCase method names are prose sub-sections
    and are skipped.

    Raises:
        MalformedRowError: If a row has fewer than four cells or an unknown
            required marker.
    """
    methods = []
    for record in records:
        if not record.heading[:1].islower():
            logger.debug("Skipping non-method heading: %s", record.heading)
            continue

        description = record.description or ""
        params = [_to_param(record.heading, row) for row in record.rows]
        methods.append(
            Method(
                name=record.heading,
                description=description,
                params=params,
                return_type=resolve_return_type(description),
            )
        )
        metrics_hook.increment(names.PARAMS_RESOLVED, len(params))
    metrics_hook.increment(names.METHODS_PARSED, len(methods))
    return methods


def to_changes(
    changes: list[RawChange],
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Change]:
    result = [
        Change(
            date=change.heading,
            version=change.description or "",
            changes=list(change.items),
        )
        for change in changes
    ]
    metrics_hook.increment(names.CHANGES_PARSED, len(result))
    return result


def _to_field(entity: str, row: list[str]) -> Field:
    if len(row) < FIELD_CELLS:
        raise MalformedRowError(entity, row, f"expected {FIELD_CELLS} cells")

    name, type_text, description = row[0], row[1], row[2]
    ty, description = resolve_type(name, type_text, description)
    return Field(name=name, type=ty, description=description)


def _to_param(entity: str, row: list[str]) -> Param:
    if len(row) < PARAM_CELLS:
        raise MalformedRowError(entity, row, f"expected {PARAM_CELLS} cells")

    name, type_text, marker, description = row[0], row[1], row[2], row[3]
    try:
        required = Required(marker.strip())
    except ValueError:
        raise MalformedRowError(entity, row, f"unknown required marker '{marker}'")

    ty, description = resolve_type(name, type_text, description)
    return Param(name=name, type=ty, required=required, description=description)
