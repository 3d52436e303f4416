"""Key-value storage of the platform document.

All application state lives in one JSON document stored under a single key::

    {"currentUser": ..., "users": [...], "courses": [...], "progress": [...]}

Reads never fail: a missing, empty or corrupt payload is treated as ``{}``.
Writes serialize the whole document. A failed write is logged and dropped.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from adaptlearn.core.config import settings
from adaptlearn.models.storage_model import StorageEntry
from adaptlearn.utils.json_utils import safe_json_object

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    """Read-default-empty / write-whole-document contract.

    Backends only move the serialized payload; parsing and error handling
    stay here.
    """

    def __init__(self, key: str | None = None):
        self.key = key or settings.STORAGE_KEY

    @abstractmethod
    def _read_raw(self) -> Optional[str]:
        """Return the stored payload, or ``None`` when nothing is stored."""

    @abstractmethod
    def _write_raw(self, payload: str) -> None:
        """Replace the stored payload."""

    @abstractmethod
    def _delete_raw(self) -> None:
        """Remove the stored payload if present."""

    def load(self) -> dict[str, Any]:
        try:
            raw = self._read_raw()
        except SQLAlchemyError as exc:
            logger.warning("Lecture du document '%s' impossible: %s", self.key, exc)
            return {}
        return safe_json_object(raw)

    def save(self, document: dict[str, Any]) -> None:
        try:
            payload = json.dumps(document, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            logger.error("Failed to save data: %s", exc)
            return

        try:
            self._write_raw(payload)
        except SQLAlchemyError as exc:
            logger.error("Failed to save data: %s", exc)

    def clear(self) -> None:
        try:
            self._delete_raw()
        except SQLAlchemyError as exc:
            logger.error("Failed to clear data: %s", exc)


class SqlDocumentStore(DocumentStore):
    """Stores the document in the ``storage_entries`` table."""

    def __init__(self, db: Session, key: str | None = None):
        super().__init__(key)
        self.db = db

    def _read_raw(self) -> Optional[str]:
        entry = self.db.get(StorageEntry, self.key)
        return entry.value if entry else None

    def _write_raw(self, payload: str) -> None:
        entry = self.db.get(StorageEntry, self.key)
        if entry is None:
            entry = StorageEntry(key=self.key, value=payload)
            self.db.add(entry)
        else:
            entry.value = payload
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def _delete_raw(self) -> None:
        entry = self.db.get(StorageEntry, self.key)
        if entry is None:
            return
        self.db.delete(entry)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise


class InMemoryDocumentStore(DocumentStore):
    """Keeps the serialized document in memory (tests, scripts)."""

    def __init__(self, initial: Union[dict[str, Any], str, None] = None, key: str | None = None):
        super().__init__(key)
        if isinstance(initial, dict):
            self._raw: Optional[str] = json.dumps(initial)
        else:
            self._raw = initial

    @property
    def raw(self) -> Optional[str]:
        return self._raw

    def _read_raw(self) -> Optional[str]:
        return self._raw

    def _write_raw(self, payload: str) -> None:
        self._raw = payload

    def _delete_raw(self) -> None:
        self._raw = None
