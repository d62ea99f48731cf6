from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from loguru import logger

from app.core.exceptions import NotFoundError
from app.core.permissions import PermissionChecker
from app.domain.auth.models import User
from app.domain.common.models import Record
from app.domain.common.repository import InMemoryRepository, Repository
from app.infrastructure.database import InMemoryDatabase

RecordT = TypeVar("RecordT", bound=Record)


class EntityService(Generic[RecordT]):
    """
    Service layer for one record collection.

    Every operation takes the acting user and checks permissions here, so
    callers that skip the list page's visibility gate are still refused.
    """

    entity_name: str = "record"
    model: Type[Record] = Record
    repository_class: Type[InMemoryRepository] = InMemoryRepository

    read_permission: str = ""
    create_permission: str = ""
    update_permission: str = ""
    delete_permission: str = ""

    def __init__(self, db: InMemoryDatabase, repository: Optional[Repository[RecordT]] = None):
        self.db = db
        self.repo: Repository[RecordT] = repository or self.repository_class(db)

    @property
    def label(self) -> str:
        return self.entity_name.capitalize()

    def authorize(self, user: User, action: str) -> None:
        """Raise AuthorizationError unless user may perform action (read, create, update, delete)"""
        permission = getattr(self, f"{action}_permission")
        verb = "view" if action == "read" else action
        PermissionChecker.ensure(user, [permission], f"{verb} {self.entity_name}s")

    def can_view(self, user: User) -> bool:
        return PermissionChecker.allows(user, [self.read_permission])

    def can_manage(self, user: User) -> bool:
        return PermissionChecker.allows(
            user,
            [self.create_permission, self.update_permission, self.delete_permission]
        )

    def list_records(self, user: User, search: Optional[str] = None) -> List[RecordT]:
        """Records in collection order, filtered by the search term"""
        self.authorize(user, "read")
        records = self.repo.list()
        if search:
            records = [record for record in records if record.matches(search)]
        return records

    def get_record(self, user: User, record_id: str) -> RecordT:
        self.authorize(user, "read")
        record = self.repo.get(record_id)
        if record is None:
            raise NotFoundError(
                message=f"{self.label} not found",
                details={"id": record_id}
            )
        return record

    def create_record(self, user: User, values: Dict[str, Any]) -> RecordT:
        """Assign a fresh id to validated form values and append the record"""
        self.authorize(user, "create")
        values = {key: value for key, value in values.items() if key != "id"}
        record = self.model(id=self.repo.new_id(), **values)
        self.repo.insert(record)
        logger.info(f"{self.label} {record.id} created by {user.email}")
        return record

    def update_record(self, user: User, record: RecordT) -> Optional[RecordT]:
        """Replace the stored record with the same id; None when it no longer exists"""
        self.authorize(user, "update")
        if not self.repo.update(record.id, record):
            logger.info(f"{self.label} {record.id} vanished before update by {user.email}")
            return None
        logger.info(f"{self.label} {record.id} updated by {user.email}")
        return record

    def delete_record(self, user: User, record_id: str) -> bool:
        self.authorize(user, "delete")
        removed = self.repo.remove(record_id)
        if removed:
            logger.info(f"{self.label} {record_id} deleted by {user.email}")
        return removed
