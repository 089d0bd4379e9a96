# Config
from .config import SchemaConfig, SectionSelector, load_config

# Errors
from .errors import BoundaryNotFoundError, MalformedRowError, SchemaError

# Schema
from .models import (
    Change,
    Field,
    Method,
    Param,
    RawChange,
    RawRecord,
    Required,
    Schema,
    Type,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import BotApiHtmlParser, DocumentParser, HtmlDocument

# Primitives
from .primitives import PRIMITIVES, Primitive

# Retrieval
from .retrieval import load_source

# Transform
from .transform import resolve_return_type, resolve_type

__all__ = [
    # Config
    "SchemaConfig",
    "SectionSelector",
    "load_config",
    # Errors
    "BoundaryNotFoundError",
    "MalformedRowError",
    "SchemaError",
    # Schema
    "Change",
    "Field",
    "Method",
    "Param",
    "RawChange",
    "RawRecord",
    "Required",
    "Schema",
    "Type",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "BotApiHtmlParser",
    "DocumentParser",
    "HtmlDocument",
    # Primitives
    "PRIMITIVES",
    "Primitive",
    # Retrieval
    "load_source",
    # Transform
    "resolve_return_type",
    "resolve_type",
]
