"""Storage backends for the single JSON document.

A backend only knows how to read and write the whole document. Locking and
the load/mutate/commit discipline live in ``silentsos.db.session``.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from silentsos.core.errors import StoreError

logger = logging.getLogger(__name__)


def empty_document() -> dict[str, Any]:
    return {"users": [], "sosEvents": [], "alerts": []}


class DocumentBackend(Protocol):
    def read(self) -> dict[str, Any]: ...

    def write(self, data: dict[str, Any]) -> None: ...


class JsonFileBackend:
    """Document kept in a JSON file, created with empty arrays on first read."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def read(self) -> dict[str, Any]:
        if not self.path.exists():
            logger.info("Creating data file %s", self.path)
            initial = empty_document()
            self.write(initial)
            return initial
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Could not read data file: {e}") from e
        if not text.strip():
            return empty_document()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StoreError(f"Data file is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise StoreError("Data file must contain a JSON object")
        return data

    def write(self, data: dict[str, Any]) -> None:
        """Write to a sibling temp file, then rename over the old document."""
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        except OSError as e:
            raise StoreError(f"Could not write data file: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise StoreError(f"Could not write data file: {e}") from e


class MemoryBackend:
    """Document kept in process memory. Reads and writes copy, like a file would."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = copy.deepcopy(data) if data is not None else empty_document()

    def read(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)

    def write(self, data: dict[str, Any]) -> None:
        self._data = copy.deepcopy(data)
