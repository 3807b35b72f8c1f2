"""Abstract interface for product sheet import."""

from abc import ABC, abstractmethod
from typing import Any


class ISheetReader(ABC):
    """Reads an uploaded product sheet into raw positional rows."""

    @abstractmethod
    def supports(self, filename: str) -> bool:
        """Check whether this reader handles the file name's extension."""
        pass

    @abstractmethod
    def read_rows(self, content: bytes, filename: str) -> list[list[Any]]:
        """
        Read raw rows, header rows already skipped.

        Cells are returned as found in the file (text, numbers or None).
        """
        pass
