# src/tg_schema/parsers/segmenter.py

"""First stage: group a flat node stream into raw per-entity records.

Each section is walked once, front to back. A heading node opens a new
record, and the nodes that follow it (paragraphs, tables, lists) are
attached to the most recently opened record until the stop marker.
"""

import logging
from collections.abc import Iterator

from bs4.element import Tag

from tg_schema.config import SectionSelector
from tg_schema.errors import BoundaryNotFoundError
from tg_schema.models import RawChange, RawRecord
from tg_schema.observability import names
from tg_schema.observability.base import MetricsHook, NoOpMetricsHook

from .document import HtmlDocument

logger = logging.getLogger(__name__)

VERSION_PREFIX = "Bot API"


def segment_entities(
    document: HtmlDocument,
    selector: SectionSelector,
    *,
    heading_tag: str = "h4",
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[RawRecord]:
    """Split a section into one `RawRecord` per heading.

    Raises:
        BoundaryNotFoundError: If the start or stop marker is missing.
    """
    records: list[RawRecord] = []

    for node in _section_nodes(document, selector):
        if node.name == heading_tag:
            records.append(RawRecord(heading=document.text(node)))
        elif node.name == "p":
            text = document.text(node)
            if not records:
                _drop_orphan(node, text, metrics_hook)
                continue
            last = records[-1]
            if last.description is None:
                last.description = text
            else:
                last.description += text
        elif node.name == "table":
            rows = _table_rows(document, node)
            if not records:
                _drop_orphan(node, f"{len(rows)} rows", metrics_hook)
                continue
            records[-1].rows.extend(rows)

    logger.debug(
        "Segmented %d records between '%s' and '%s'",
        len(records),
        selector.start_text,
        selector.stop_text,
    )
    metrics_hook.increment(names.RECORDS_SEGMENTED, len(records))
    return records


def segment_changes(
    document: HtmlDocument,
    selector: SectionSelector,
    *,
    heading_tag: str = "h4",
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[RawChange]:
    """Split the changelog section into one `RawChange` per date heading.

    Only paragraphs starting with "Bot API" are kept as the version line.

    Raises:
        BoundaryNotFoundError: If the start or stop marker is missing.
    """
    changes: list[RawChange] = []

    for node in _section_nodes(document, selector):
        if node.name == heading_tag:
            changes.append(RawChange(heading=document.text(node)))
        elif node.name == "p":
            text = document.text(node)
            if not text.startswith(VERSION_PREFIX):
                continue
            if not changes:
                _drop_orphan(node, text, metrics_hook)
                continue
            last = changes[-1]
            if last.description is None:
                last.description = text
            else:
                last.description += text
        elif node.name == "ul":
            # nested lists are already part of their parent item's text
            if node.find_parent("li") is not None:
                continue
            items = [document.text(li) for li in document.children(node, "li")]
            if not changes:
                _drop_orphan(node, f"{len(items)} items", metrics_hook)
                continue
            changes[-1].items.extend(items)

    logger.debug("Segmented %d change entries", len(changes))
    metrics_hook.increment(names.RECORDS_SEGMENTED, len(changes))
    return changes


def _section_nodes(document: HtmlDocument, selector: SectionSelector) -> Iterator[Tag]:
    # Both boundaries are resolved before the first node is yielded,
    # so a missing marker never leaves a partial result behind.
    start = document.find(selector.start_tag, selector.start_text)
    if start is None:
        logger.error(
            "Start boundary not found: <%s> %s", selector.start_tag, selector.start_text
        )
        raise BoundaryNotFoundError(selector.start_tag, selector.start_text)

    stop = document.find(selector.stop_tag, selector.stop_text)
    if stop is None:
        logger.error(
            "Stop boundary not found: <%s> %s", selector.stop_tag, selector.stop_text
        )
        raise BoundaryNotFoundError(selector.stop_tag, selector.stop_text)

    return _walk(document, start, stop)


def _walk(document: HtmlDocument, start: int, stop: int) -> Iterator[Tag]:
    for index in range(start, stop):
        node = document.nth(index)
        if node is None:
            continue
        yield node


def _table_rows(document: HtmlDocument, table: Tag) -> list[list[str]]:
    rows = []
    for tr in table.find_all("tr"):
        cells = [document.text(td) for td in document.children(tr, "td")]
        # header rows only have <th> cells
        if cells:
            rows.append(cells)
    return rows


def _drop_orphan(node: Tag, text: str, metrics_hook: MetricsHook) -> None:
    logger.warning("Skipped <%s> before first heading: %s", node.name, text)
    metrics_hook.increment(names.ORPHAN_NODES_TOTAL, labels={"tag": node.name})
