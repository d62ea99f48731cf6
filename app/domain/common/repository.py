from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar
import uuid

from app.domain.common.models import Record
from app.infrastructure.database import InMemoryDatabase

RecordT = TypeVar("RecordT", bound=Record)


def generate_id() -> str:
    return str(uuid.uuid4())


class Repository(ABC, Generic[RecordT]):
    """Synchronous CRUD interface over an ordered collection of records"""

    @abstractmethod
    def list(self) -> List[RecordT]:
        ...

    @abstractmethod
    def get(self, record_id: str) -> Optional[RecordT]:
        ...

    @abstractmethod
    def insert(self, record: RecordT) -> RecordT:
        ...

    @abstractmethod
    def update(self, record_id: str, record: RecordT) -> bool:
        ...

    @abstractmethod
    def remove(self, record_id: str) -> bool:
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def new_id(self) -> str:
        ...


class InMemoryRepository(Repository[RecordT]):
    """Repository backed by one collection of the in-memory database"""

    collection_name: str = ""

    def __init__(self, db: InMemoryDatabase, id_factory: Callable[[], str] = generate_id):
        self.db = db
        self.records: List[RecordT] = db.collection(self.collection_name)
        self.id_factory = id_factory

    def _index_of(self, record_id: str) -> int:
        for index, record in enumerate(self.records):
            if record.id == record_id:
                return index
        return -1

    def list(self) -> List[RecordT]:
        """All records in collection order"""
        return list(self.records)

    def get(self, record_id: str) -> Optional[RecordT]:
        index = self._index_of(record_id)
        return self.records[index] if index != -1 else None

    def insert(self, record: RecordT) -> RecordT:
        """Append a record to the collection"""
        self.records.append(record)
        return record

    def update(self, record_id: str, record: RecordT) -> bool:
        """Replace the record stored under record_id; no-op when absent"""
        index = self._index_of(record_id)
        if index == -1:
            return False
        self.records[index] = record
        return True

    def remove(self, record_id: str) -> bool:
        """Drop the record stored under record_id; no-op when absent"""
        index = self._index_of(record_id)
        if index == -1:
            return False
        del self.records[index]
        return True

    def count(self) -> int:
        return len(self.records)

    def new_id(self) -> str:
        return self.id_factory()
