from .resolver import resolve_return_type, resolve_type
from .schema import to_changes, to_methods, to_types

__all__ = [
    # Resolver
    "resolve_type",
    "resolve_return_type",
    # Records -> schema
    "to_types",
    "to_methods",
    "to_changes",
]
