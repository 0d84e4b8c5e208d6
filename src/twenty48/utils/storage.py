"""Key-value storage used by the persistence systems."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class MemoryStore:
    """In-process store; values pass through JSON so they behave like saved data."""

    def __init__(self, initial: Dict[str, Any] | None = None) -> None:
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return default
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileStore:
    """All keys live in one JSON document on disk, rewritten on every change."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._data: Dict[str, Any] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, Any]:
        if self._data is not None:
            return self._data
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            payload = {}
        except json.JSONDecodeError:
            logger.warning("Save file %s is corrupt; starting fresh", self._path)
            payload = {}
        if not isinstance(payload, dict):
            logger.warning("Save file %s does not hold an object; starting fresh", self._path)
            payload = {}
        self._data = payload
        return payload

    def _flush(self, payload: Dict[str, Any]) -> None:
        """Write through a sibling temp file; the cache changes only once the file is in place."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        temp = self._path.with_name(self._path.name + ".tmp")
        with temp.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)
        temp.replace(self._path)
        self._data = payload

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._flush({**self._load(), key: value})

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            self._flush({k: v for k, v in data.items() if k != key})
