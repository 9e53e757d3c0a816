from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from src.application.errors import StoreError

logger = logging.getLogger(__name__)


class LocalStorage:
    """Durable key/value storage backed by a single JSON document on disk.

    The document is read from disk once, on first access, and served from memory
    afterwards. Every write rewrites the whole file through a temporary file and
    an atomic rename, so readers never observe a partial document.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._data: dict[str, Any] | None = None

    def _read_all(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StoreError("Failed to read local store") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Local store %s is not valid JSON; ignoring its contents", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict[str, Any]) -> None:
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise StoreError("Failed to write local store") from exc
        logger.debug("Local store written: %s (%d keys)", self.path, len(data))

    def _document(self) -> dict[str, Any]:
        if self._data is None:
            self._data = self._read_all()
        return self._data

    def get_item(self, key: str) -> Any | None:
        """Cached value for ``key``; callers must not mutate it in place."""
        return self._document().get(key)

    def set_item(self, key: str, value: Any) -> None:
        data = {**self._document(), key: value}
        self._write_all(data)
        self._data = data

    def remove_item(self, key: str) -> None:
        current = self._document()
        if key not in current:
            return
        data = {k: v for k, v in current.items() if k != key}
        self._write_all(data)
        self._data = data
