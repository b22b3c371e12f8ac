# src/taskpad/storage/kv_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class KeyValueStore:
    """
    Small preferences file: one flat JSON object per file.

    Reads are served from memory; every write rewrites the whole file via
    a temp file + os.replace so a crash never leaves a half-written file.
    A missing file reads as empty. Memory only changes after the file does.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._data: dict[str, Any] = self._read()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except Exception:
            logger.exception("Failed to read preferences from %s; starting empty.", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Preferences file %s is not a JSON object; ignored.", self._path)
            return {}
        return data

    def _write(self, data: dict[str, Any]) -> None:
        """Persist `data`, then make it the in-memory view."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        self._data = data
        with contextlib.suppress(Exception):
            # May hold credentials.
            os.chmod(self._path, 0o600)

    def contains(self, key: str) -> bool:
        return key in self._data

    def get_str(self, key: str, default: str | None = None) -> str | None:
        val = self._data.get(key)
        return val if isinstance(val, str) else default

    def get_bool(self, key: str, default: bool = False) -> bool:
        val = self._data.get(key)
        return val if isinstance(val, bool) else default

    def put_str(self, key: str, value: str) -> None:
        self._write({**self._data, key: str(value)})

    def put_bool(self, key: str, value: bool) -> None:
        self._write({**self._data, key: bool(value)})

    def put_many(self, values: dict[str, Any]) -> None:
        """Set several keys with a single write."""
        self._write({**self._data, **values})

    def remove(self, key: str) -> None:
        if key in self._data:
            self._write({k: v for k, v in self._data.items() if k != key})
