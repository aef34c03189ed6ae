"""
Local persistent key-value storage.

Provides the small localStorage-like interface that the bookmark list is
persisted through: string keys mapped to string values.

Two stores are available:
- JsonFileStore: all keys live in one JSON object on disk, rewritten on every change
- MemoryStore: process-local dict, used by tests and short-lived shells

Storage access is synchronous. Read, write and parse failures raise StorageError.
"""

import json
import logging
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from forkify.config import ForkifyConfig
from forkify.errors import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """String-to-string store with the localStorage operations."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string, or None if the key is absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove a key. Absent keys are ignored."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class MemoryStore(KeyValueStore):
    """In-memory store. Contents are lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()


class JsonFileStore(KeyValueStore):
    """
    Store backed by a single JSON file.

    The file holds one JSON object of key -> string value. A missing file is
    treated as an empty store and created on the first write.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        """
        Args:
            path: File location (optional, reads FORKIFY_STORAGE_PATH if not provided)
        """
        self.path = Path(path) if path is not None else ForkifyConfig.get_storage_path()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Could not read storage file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self.path} does not hold a JSON object")
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        """Write to a temporary file beside the target, then swap it into place."""
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                json.dump(data, f, ensure_ascii=False)
            tmp_path.replace(self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise StorageError(f"Could not write storage file {self.path}: {e}") from e
        logger.debug("Wrote %d storage keys to %s", len(data), self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)

    def clear(self) -> None:
        self._write_all({})
