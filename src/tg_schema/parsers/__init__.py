from .base import DocumentParser
from .document import HtmlDocument
from .html_parser import BotApiHtmlParser
from .segmenter import segment_changes, segment_entities

__all__ = [
    "BotApiHtmlParser",
    "DocumentParser",
    "HtmlDocument",
    "segment_changes",
    "segment_entities",
]
