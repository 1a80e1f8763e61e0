"""
Base Repository - PRR Platform
prr/repositories/base.py

Base repository over an in-process document store. Each repository owns one
index (id -> pydantic model); access is serialized with a lock so request
handlers can share a repository across threads.
"""

import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Dict, Generator, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from prr.core.exceptions import DuplicateEntityException, EntityNotFoundException

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseRepository(Generic[ModelT]):
    """Base repository with locked access to a single index."""

    ENTITY_NAME = "Entity"

    def __init__(self) -> None:
        self._documents: Dict[str, ModelT] = {}
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Generator[Dict[str, ModelT], None, None]:
        """Context manager yielding the index while holding the lock."""
        with self._lock:
            yield self._documents

    def insert(self, document: ModelT) -> ModelT:
        doc_id = getattr(document, "id")
        with self.locked() as docs:
            if doc_id in docs:
                raise DuplicateEntityException(f"{self.ENTITY_NAME} with ID {doc_id} already exists")
            docs[doc_id] = document
        return document

    def replace(self, document: ModelT) -> ModelT:
        doc_id = getattr(document, "id")
        with self.locked() as docs:
            if doc_id not in docs:
                raise EntityNotFoundException(self.ENTITY_NAME, doc_id)
            docs[doc_id] = document
        return document

    def get_by_id(self, doc_id: str) -> Optional[ModelT]:
        with self.locked() as docs:
            return docs.get(doc_id)

    def get_or_raise(self, doc_id: str) -> ModelT:
        document = self.get_by_id(doc_id)
        if document is None:
            raise EntityNotFoundException(self.ENTITY_NAME, doc_id)
        return document

    def delete(self, doc_id: str) -> None:
        with self.locked() as docs:
            if docs.pop(doc_id, None) is None:
                raise EntityNotFoundException(self.ENTITY_NAME, doc_id)

    def all(self) -> List[ModelT]:
        with self.locked() as docs:
            return list(docs.values())

    def count(self) -> int:
        with self.locked() as docs:
            return len(docs)

    def clear(self) -> None:
        with self.locked() as docs:
            docs.clear()

    @staticmethod
    def normalize_timestamp(dt: Optional[datetime]) -> Optional[datetime]:
        """Ensure timestamp is UTC-aware."""
        if dt is None:
            return None
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
