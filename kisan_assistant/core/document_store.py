"""Document collections over a key-value substrate.

Each collection lives under one key as a JSON array. Every operation reads the
whole array, and writes rewrite the whole array in a single ``set``. Expected
cardinality is tens to low hundreds of records.

Newest documents come first: ``insert_one`` prepends. Documents are stored
by alias, so query keys are the persisted key names (``seedType``, not
``seed_type``).
"""

import json
import logging
import time
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from kisan_assistant.core.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None


DocumentT = TypeVar("DocumentT", bound=Document)

Query = Mapping[str, Any]


def timestamp_id() -> str:
    # Millisecond wall clock. Two inserts within the same millisecond share an id.
    return str(time.time_ns() // 1_000_000)


def matches_query(item: Mapping[str, Any], query: Query) -> bool:
    """AND of exact equality over every key in ``query``; a missing key never matches."""
    for key, expected in query.items():
        if key not in item:
            return False
        if item[key] != expected:
            return False
    return True


class DocumentCollection(Protocol[DocumentT]):
    def find(self, query: Optional[Query] = None) -> List[DocumentT]:
        ...

    def find_one(self, query: Optional[Query] = None) -> Optional[DocumentT]:
        ...

    def insert_one(self, document: DocumentT) -> DocumentT:
        ...

    def is_empty(self) -> bool:
        ...


class Collection(Generic[DocumentT]):
    def __init__(
        self,
        name: str,
        model: type[DocumentT],
        store: KeyValueStore,
        id_factory: Callable[[], str] = timestamp_id,
    ) -> None:
        self._name = name
        self._model = model
        self._store = store
        self._id_factory = id_factory

    @property
    def name(self) -> str:
        return self._name

    def _load(self) -> List[Any]:
        try:
            raw = self._store.get(self._name)
        except UnicodeDecodeError:
            logger.warning("Collection '%s' is not valid UTF-8, treating it as empty", self._name)
            return []
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Collection '%s' holds unreadable content, treating it as empty", self._name)
            return []
        if not isinstance(data, list):
            logger.warning("Collection '%s' does not hold a list, treating it as empty", self._name)
            return []
        return data

    def _save(self, data: List[Any]) -> None:
        self._store.set(self._name, json.dumps(data, ensure_ascii=False))

    def _to_document(self, item: Dict[str, Any]) -> Optional[DocumentT]:
        try:
            document = self._model.model_validate(item)
        except ValidationError as exc:
            logger.warning(
                "Skipping invalid record in '%s' (id=%s): %s",
                self._name,
                item.get("id"),
                exc.error_count(),
            )
            return None
        if not document.id:
            logger.warning("Skipping record without id in '%s'", self._name)
            return None
        return document

    def find(self, query: Optional[Query] = None) -> List[DocumentT]:
        query = query or {}
        documents: List[DocumentT] = []
        for item in self._load():
            if not isinstance(item, dict) or not matches_query(item, query):
                continue
            document = self._to_document(item)
            if document is not None:
                documents.append(document)
        return documents

    def find_one(self, query: Optional[Query] = None) -> Optional[DocumentT]:
        documents = self.find(query)
        return documents[0] if documents else None

    def insert_one(self, document: DocumentT) -> DocumentT:
        data = self._load()
        stored = document.model_copy(update={"id": document.id or self._id_factory()})
        data.insert(0, stored.model_dump(mode="json", exclude_none=True, by_alias=True))
        self._save(data)
        return stored

    def is_empty(self) -> bool:
        return len(self._load()) == 0


def seed_collection(collection: DocumentCollection[DocumentT], seeds: List[DocumentT], label: str) -> bool:
    """Insert ``seeds`` one by one when ``collection`` is empty.

    Because inserts prepend, the stored order ends up reversed.
    """
    if not collection.is_empty():
        return False
    logger.info("Seeding database with initial %s...", label)
    for seed in seeds:
        collection.insert_one(seed)
    return True
