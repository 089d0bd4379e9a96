# src/tg_schema/parsers/document.py

from bs4 import BeautifulSoup
from bs4.element import Tag


class HtmlDocument:
    """Document-ordered, indexable view over a parsed HTML page.

    Every element gets a position in a flat sequence, so sections can be
    addressed as ranges of positions between two marker nodes.
    """

    def __init__(self, soup: BeautifulSoup) -> None:
        self._nodes: list[Tag] = list(soup.find_all(True))

    @classmethod
    def from_html(cls, markup: str | bytes) -> "HtmlDocument":
        return cls(BeautifulSoup(markup, "html.parser"))

    def __len__(self) -> int:
        return len(self._nodes)

    def nth(self, index: int) -> Tag | None:
        if 0 <= index < len(self._nodes):
            return self._nodes[index]
        return None

    def find(self, tag: str, text: str) -> int | None:
        """Position of the first `tag` node whose text equals `text`."""
        for index, node in enumerate(self._nodes):
            if node.name == tag and self.text(node) == text:
                return index
        return None

    @staticmethod
    def text(node: Tag) -> str:
        return node.get_text()

    @staticmethod
    def children(node: Tag, tag: str) -> list[Tag]:
        return node.find_all(tag, recursive=False)
