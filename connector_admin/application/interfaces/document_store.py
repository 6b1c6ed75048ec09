"""Abstract interface (port) for the whole-document local data file."""

from abc import ABC, abstractmethod
from typing import Any

Document = dict[str, list[dict[str, Any]]]


class DocumentStore(ABC):
    """Port for reading and writing the ``{"users": [...], "connectors": [...]}`` document."""

    @abstractmethod
    async def read(self) -> Document:
        """Return the whole document; missing or unreadable data reads as empty."""
        ...

    @abstractmethod
    async def write(self, document: Document) -> None:
        """Replace the whole document."""
        ...
