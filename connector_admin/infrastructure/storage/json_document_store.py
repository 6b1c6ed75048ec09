"""Local JSON document storage for the file-backed data source.

The whole document is read and rewritten on every operation:

    {
      "users": [ {...}, ... ],
      "connectors": [ {...}, ... ]
    }

Records are stored in the backend wire shape. There is no locking, so a
single writing process is assumed.
"""

import json
import logging
from pathlib import Path

from connector_admin.application.interfaces import Document, DocumentStore

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "connectors")


def _empty_document() -> Document:
    return {name: [] for name in COLLECTIONS}


class JsonDocumentStore(DocumentStore):
    """Infrastructure adapter for the local data file."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def read(self) -> Document:
        """Read the document, returning empty collections if missing or corrupt."""
        if not self._path.exists():
            logger.warning("Data file %s does not exist; using empty collections", self._path)
            return _empty_document()

        try:
            raw = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read data file %s: %s; using empty collections", self._path, exc)
            return _empty_document()

        if not isinstance(raw, dict):
            logger.warning("Data file %s is not a JSON object; using empty collections", self._path)
            return _empty_document()

        document = _empty_document()
        for name in COLLECTIONS:
            items = raw.get(name)
            if isinstance(items, list):
                document[name] = [item for item in items if isinstance(item, dict)]
            elif items is not None:
                logger.warning("Data file %s: '%s' is not a list; ignoring it", self._path, name)
        return document

    async def write(self, document: Document) -> None:
        """Persist the document, creating the parent directory if needed."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        logger.debug(
            "Wrote data file %s (%s)",
            self._path,
            ", ".join(f"{name}={len(document.get(name, []))}" for name in COLLECTIONS),
        )
