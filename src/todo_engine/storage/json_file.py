# src/todo_engine/storage/json_file.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """
    Key/value storage kept in a single JSON object file: {"<key>": "<text>", ...}.

    - writes go to a temp file first and replace the target atomically
    - the file is made private (0600) best-effort
    - an unreadable or corrupt file reads as empty; the next write replaces it
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        logger.info("JsonFileKeyValueStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Storage file %s is unreadable; treating as empty.", self._path)
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def read(self, key: str) -> str | None:
        with self._lock:
            return self._load().get(key)

    def write(self, key: str, text: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = text
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
            with contextlib.suppress(Exception):
                os.chmod(self._path, 0o600)
            logger.debug("Wrote key=%s (%d chars) to %s", key, len(text), self._path)
