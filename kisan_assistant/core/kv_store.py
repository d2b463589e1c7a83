import logging
import os
from pathlib import Path
from typing import Dict, Optional, Protocol
from uuid import uuid4

from kisan_assistant.core.config import settings

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """String-keyed storage of serialized blobs. Synchronous, no transactions."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class MemoryKeyValueStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class FileKeyValueStore:
    """One file per key under ``root``. Writes go through a temp file and os.replace."""

    def __init__(self, root: str | Path | None = None) -> None:
        self._root = Path(root or settings.STORAGE_DIR).resolve()
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key in {".", ".."}:
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._root / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = self._root / f"{key}.{uuid4().hex}.tmp"
        try:
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    def remove(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return


def create_kv_store(backend: Optional[str] = None) -> KeyValueStore:
    backend = (backend or settings.STORAGE_BACKEND).lower()
    if backend == "memory":
        return MemoryKeyValueStore()
    if backend == "file":
        store = FileKeyValueStore()
        logger.info("Using file storage at %s", store.root)
        return store
    raise ValueError(f"Unknown storage backend: {backend}")
