# src/tg_schema/config.py

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_URL = "https://core.telegram.org/bots/api"


@dataclass(frozen=True)
class SectionSelector:
    """Start and stop markers of one documentation section.

    The walk covers every node from the start marker up to, but not
    including, the stop marker. Both texts must match exactly.
    """

    start_tag: str
    start_text: str
    stop_tag: str
    stop_text: str


TYPES_SECTION = SectionSelector(
    start_tag="h3",
    start_text="Available types",
    # InputFile has its own prose layout and no field table
    stop_tag="h4",
    stop_text="InputFile",
)

RECENT_CHANGES_SECTION = SectionSelector(
    start_tag="h3",
    start_text="Recent changes",
    stop_tag="a",
    stop_text="See earlier changes »",
)

METHODS_SECTION = SectionSelector(
    start_tag="h3",
    start_text="Available methods",
    stop_tag="h3",
    stop_text="Updating messages",
)


@dataclass(frozen=True)
class SchemaConfig:
    """Configuration for the documentation parser.

    Immutable. Explicit. No magic defaults from environment.
    """

    types: SectionSelector = TYPES_SECTION
    recent_changes: SectionSelector = RECENT_CHANGES_SECTION
    methods: SectionSelector | None = METHODS_SECTION  # None skips methods
    heading_tag: str = "h4"
    source: str = DEFAULT_SOURCE_URL


class _SelectorModel(BaseModel):
    start_tag: str
    start_text: str
    stop_tag: str
    stop_text: str

    class Config:
        extra = "forbid"


class _ConfigModel(BaseModel):
    types: _SelectorModel | None = None
    recent_changes: _SelectorModel | None = None
    methods: _SelectorModel | None = None
    heading_tag: str | None = None
    source: str | None = None

    class Config:
        extra = "forbid"


def load_config(path: str | Path) -> SchemaConfig:
    """Load a `SchemaConfig` from a YAML file.

    Keys left out keep their defaults. ``methods: null`` disables the
    method section.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the file has unknown keys or bad values.
    """
    file_path = Path(path)
    logger.info("Loading schema config from: %s", file_path)
    with open(file_path) as f:
        data = yaml.safe_load(f) or {}

    model = _ConfigModel(**data)
    defaults = SchemaConfig()

    methods = defaults.methods
    if "methods" in data:
        methods = _to_selector(model.methods) if model.methods else None

    config = SchemaConfig(
        types=_to_selector(model.types) if model.types else defaults.types,
        recent_changes=(
            _to_selector(model.recent_changes)
            if model.recent_changes
            else defaults.recent_changes
        ),
        methods=methods,
        heading_tag=model.heading_tag or defaults.heading_tag,
        source=model.source or defaults.source,
    )
    logger.debug("Loaded schema config: %s", config)
    return config


def _to_selector(model: _SelectorModel) -> SectionSelector:
    return SectionSelector(
        start_tag=model.start_tag,
        start_text=model.start_text,
        stop_tag=model.stop_tag,
        stop_text=model.stop_text,
    )
