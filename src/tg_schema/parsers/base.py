# parsers/base.py

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from tg_schema.models import Schema


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source: str | bytes | Path | BinaryIO) -> Schema:
        """
        Parse a documentation page and return its typed schema.

        Requirements:
        - Deterministic output for same input
        - Entity order follows document order
        - Missing section boundaries are fatal
        """
        raise NotImplementedError
