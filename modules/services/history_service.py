"""Conversion history tracking."""

from __future__ import annotations

import json
import logging
import threading
import time
import uuid
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

MAX_HISTORY_ITEMS = 50
MAX_FIELD_LENGTH = 1000
TRUNCATION_MARKER = "... [truncated]"
QUOTA_WARNING = "Storage limit reached. Some history items may not be saved."


class HistoryType(str, Enum):
    """Direction of a recorded conversion."""

    ENCODE = "encode"
    DECODE = "decode"


class HistoryStorageError(RuntimeError):
    """Raised when the history cannot be written to its backend."""


class StorageQuotaExceeded(HistoryStorageError):
    """Raised when the serialized history exceeds the storage quota."""


@dataclass(frozen=True, slots=True)
class HistoryItem:
    """A single recorded encode/decode operation."""

    id: str
    timestamp: int  # epoch milliseconds
    input: str
    output: str
    type: HistoryType

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["type"] = self.type.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryItem":
        return cls(
            id=str(data["id"]),
            timestamp=int(data["timestamp"]),
            input=str(data.get("input", "")),
            output=str(data.get("output", "")),
            type=HistoryType(data.get("type", HistoryType.ENCODE.value)),
        )


def truncate_if_needed(value: str, limit: int = MAX_FIELD_LENGTH) -> str:
    """Cut value to limit characters and mark it as truncated."""
    if len(value) > limit:
        return value[:limit] + TRUNCATION_MARKER
    return value


class HistoryRepository(ABC):
    """Storage backend holding the whole history list."""

    @abstractmethod
    def load(self) -> List[HistoryItem]:
        """Return stored items, most recent first."""

    @abstractmethod
    def save(self, items: List[HistoryItem]) -> None:
        """Replace the stored list with items."""

    def append(self, item: HistoryItem, limit: int = MAX_HISTORY_ITEMS) -> List[HistoryItem]:
        """Prepend item, evict past limit and return the stored list."""
        items = [item, *self.load()][:limit]
        self.save(items)
        return items

    def evict(self, limit: int = MAX_HISTORY_ITEMS) -> List[HistoryItem]:
        """Drop everything beyond the limit most recent items."""
        items = self.load()
        if len(items) > limit:
            items = items[:limit]
            self.save(items)
        return items


class InMemoryHistoryRepository(HistoryRepository):
    """Volatile repository, useful for tests and throwaway sessions."""

    def __init__(self, items: Optional[Iterable[HistoryItem]] = None) -> None:
        self._items: List[HistoryItem] = list(items or [])

    def load(self) -> List[HistoryItem]:
        return list(self._items)

    def save(self, items: List[HistoryItem]) -> None:
        self._items = list(items)


class JsonFileHistoryRepository(HistoryRepository):
    """History stored as one JSON array in a file."""

    def __init__(self, path: Path, max_bytes: Optional[int] = None) -> None:
        self.path = Path(path)
        self.max_bytes = max_bytes

    def load(self) -> List[HistoryItem]:
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as fp:
                data = json.load(fp)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.error("Error loading history from %s: %s", self.path, exc)
            return []
        if not isinstance(data, list):
            logger.error("Ignoring history file %s: expected a JSON array", self.path)
            return []

        items: List[HistoryItem] = []
        for entry in data:
            try:
                items.append(HistoryItem.from_dict(entry))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping malformed history entry: %s", exc)
        return items

    def save(self, items: List[HistoryItem]) -> None:
        payload = json.dumps([item.to_dict() for item in items], ensure_ascii=False)
        if self.max_bytes is not None and len(payload.encode("utf-8")) > self.max_bytes:
            raise StorageQuotaExceeded(
                f"History needs {len(payload.encode('utf-8'))} bytes, quota is {self.max_bytes}"
            )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as exc:
            raise HistoryStorageError(f"Failed to write {self.path}: {exc}") from exc


class HistoryService:
    """Bounded, searchable history mirrored to a repository.

    The in-memory list is authoritative for the session. Every change is
    written through to the repository; a failed write is logged and reported
    once through :meth:`consume_warning` without undoing the change.
    """

    def __init__(
        self,
        repository: HistoryRepository,
        max_items: int = MAX_HISTORY_ITEMS,
        max_field_length: int = MAX_FIELD_LENGTH,
    ) -> None:
        self.repository = repository
        self.max_items = max_items
        self.max_field_length = max_field_length
        self._lock = threading.Lock()
        self._warned = False
        self._pending_warning: Optional[str] = None
        self._items: List[HistoryItem] = repository.load()[:max_items]

    def items(self) -> List[HistoryItem]:
        """Return a snapshot of the history, most recent first."""
        with self._lock:
            return list(self._items)

    def get(self, item_id: str) -> Optional[HistoryItem]:
        with self._lock:
            return next((item for item in self._items if item.id == item_id), None)

    def add(self, input_text: str, output_text: str, item_type: HistoryType | str) -> HistoryItem:
        """Record a conversion and return the stored (truncated) item."""
        item = HistoryItem(
            id=uuid.uuid4().hex,
            timestamp=int(time.time() * 1000),
            input=truncate_if_needed(input_text, self.max_field_length),
            output=truncate_if_needed(output_text, self.max_field_length),
            type=HistoryType(item_type),
        )
        with self._lock:
            self._items = [item, *self._items][: self.max_items]
            self._persist()
        return item

    def clear(self) -> None:
        with self._lock:
            self._items = []
            self._persist()

    def delete(self, item_id: str) -> bool:
        """Remove the item with item_id; return False when nothing matched."""
        with self._lock:
            remaining = [item for item in self._items if item.id != item_id]
            if len(remaining) == len(self._items):
                return False
            self._items = remaining
            self._persist()
            return True

    def search(self, query: str) -> List[HistoryItem]:
        """Case-insensitive substring search over inputs and outputs."""
        with self._lock:
            if not (query or "").strip():
                return list(self._items)
            needle = query.lower()
            return [
                item
                for item in self._items
                if needle in item.input.lower() or needle in item.output.lower()
            ]

    def consume_warning(self) -> Optional[str]:
        """Return the pending storage warning once, then None."""
        with self._lock:
            message, self._pending_warning = self._pending_warning, None
            return message

    def _persist(self) -> None:
        try:
            self.repository.save(list(self._items))
        except HistoryStorageError as exc:
            logger.error("Failed to save history: %s", exc)
            if not self._warned:
                self._warned = True
                self._pending_warning = QUOTA_WARNING
