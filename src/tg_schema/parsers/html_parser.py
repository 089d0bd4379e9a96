# parsers/html_parser.py

import logging
from collections.abc import Callable
from pathlib import Path
from time import monotonic
from typing import BinaryIO, TypeVar

from tg_schema.config import SchemaConfig
from tg_schema.models import Method, Schema
from tg_schema.observability import names
from tg_schema.observability.base import MetricsHook, NoOpMetricsHook
from tg_schema.transform import to_changes, to_methods, to_types

from .base import DocumentParser
from .document import HtmlDocument
from .segmenter import segment_changes, segment_entities

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BotApiHtmlParser(DocumentParser):
    """
    Deterministic parser for the Bot API documentation page.
    - Walks each configured section once, in document order
    - Resolves type cells into primitives
    - Fails on the first missing boundary or malformed row
    """

    def __init__(
        self,
        config: SchemaConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or SchemaConfig()
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized BotApiHtmlParser with methods=%s",
            "on" if self.config.methods else "off",
        )

    def parse(self, source: str | bytes | Path | BinaryIO) -> Schema:
        """Parse HTML markup (str/bytes), an HTML file (Path) or a binary stream."""
        if isinstance(source, Path):
            markup: str | bytes = source.read_bytes()
        elif isinstance(source, (str, bytes)):
            markup = source
        else:
            markup = source.read()
        return self.parse_document(HtmlDocument.from_html(markup))

    def parse_document(self, document: HtmlDocument) -> Schema:
        start = monotonic()
        cfg = self.config

        recent_changes = self._timed(
            "recent_changes",
            lambda: to_changes(
                segment_changes(
                    document,
                    cfg.recent_changes,
                    heading_tag=cfg.heading_tag,
                    metrics_hook=self.metrics_hook,
                ),
                self.metrics_hook,
            ),
        )

        types = self._timed(
            "types",
            lambda: to_types(
                segment_entities(
                    document,
                    cfg.types,
                    heading_tag=cfg.heading_tag,
                    metrics_hook=self.metrics_hook,
                ),
                self.metrics_hook,
            ),
        )

        methods: list[Method] = []
        if cfg.methods is not None:
            methods_selector = cfg.methods
            methods = self._timed(
                "methods",
                lambda: to_methods(
                    segment_entities(
                        document,
                        methods_selector,
                        heading_tag=cfg.heading_tag,
                        metrics_hook=self.metrics_hook,
                    ),
                    self.metrics_hook,
                ),
            )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        logger.info(
            "Parsed schema: changes=%d, types=%d, methods=%d, latency=%.0fms",
            len(recent_changes),
            len(types),
            len(methods),
            elapsed_ms,
        )

        return Schema(recent_changes=recent_changes, types=types, methods=methods)

    def _timed(self, section: str, run: Callable[[], list[T]]) -> list[T]:
        start = monotonic()
        result = run()
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.SECTION_PARSE_DURATION, elapsed_ms, labels={"section": section}
        )
        logger.debug("Parsed section %s: %d entries", section, len(result))
        return result
