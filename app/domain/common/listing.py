"""
List page controller for a record collection.

The page owns the screen state (search term, current page, open form,
pending delete) and turns the collection into a view model. Which parts
are shown depends on the visibility gate; every data access still goes
through the service, which enforces permissions on its own.
"""
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar
import math

from pydantic import BaseModel

from app.core.config import settings
from app.core.permissions import VisibilityGate
from app.domain.auth.models import User
from app.domain.common.forms import EntityForm
from app.domain.common.models import Record
from app.domain.common.service import EntityService

RecordT = TypeVar("RecordT", bound=Record)
T = TypeVar("T")


class PaginationInfo(BaseModel):
    page: int
    page_size: int
    total: int
    pages: int
    start: int
    end: int
    has_previous: bool
    has_next: bool

    @property
    def summary(self) -> str:
        return f"Showing {self.start} to {self.end} of {self.total} results"


class ConfirmationPrompt(BaseModel):
    title: str
    message: str


class FormInfo(BaseModel):
    mode: str
    title: str
    record_id: Optional[str] = None


class PageView(BaseModel):
    title: str
    restricted: bool = False
    message: Optional[str] = None
    can_manage: bool = False
    search: str = ""
    columns: List[str] = []
    rows: List[Dict[str, Any]] = []
    pagination: Optional[PaginationInfo] = None
    summary: Optional[str] = None
    form: Optional[FormInfo] = None
    delete_prompt: Optional[ConfirmationPrompt] = None


def paginate(items: List[T], page: int, page_size: int) -> Tuple[List[T], PaginationInfo]:
    """Slice one page out of items; out-of-range pages clamp to the nearest valid one"""
    if page_size < 1:
        raise ValueError("page_size must be at least 1")

    total = len(items)
    pages = math.ceil(total / page_size)
    page = min(max(page, 1), max(pages, 1))

    offset = (page - 1) * page_size
    page_items = items[offset:offset + page_size]

    info = PaginationInfo(
        page=page,
        page_size=page_size,
        total=total,
        pages=pages,
        start=offset + 1 if page_items else 0,
        end=offset + len(page_items),
        has_previous=page > 1,
        has_next=page < pages,
    )
    return page_items, info


class EntityListPage(Generic[RecordT]):
    """Searchable, paged table of records with add/edit/delete flows"""

    title: str = "Records"
    form_class: Type[EntityForm] = EntityForm

    def __init__(
        self,
        service: EntityService[RecordT],
        user: User,
        gate: VisibilityGate,
        page_size: Optional[int] = None,
    ):
        self.service = service
        self.user = user
        self.gate = gate
        self.page_size = min(page_size or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
        self.search_term = ""
        self.page = 1
        self.form: Optional[EntityForm] = None
        self.pending_delete: Optional[RecordT] = None
        self.last_saved: Optional[RecordT] = None

    @property
    def label(self) -> str:
        return self.service.label

    @property
    def can_view(self) -> bool:
        return self.gate.can_view(self.user.role)

    @property
    def can_manage(self) -> bool:
        return self.gate.can_manage(self.user.role)

    # Search and paging

    def set_search(self, term: Optional[str]) -> None:
        self.search_term = term or ""
        self.page = 1

    def go_to_page(self, page: int) -> None:
        self.page = max(page, 1)

    def next_page(self) -> None:
        _, info = self.current_page()
        if info.has_next:
            self.page = info.page + 1

    def previous_page(self) -> None:
        _, info = self.current_page()
        if info.has_previous:
            self.page = info.page - 1

    def filtered_records(self) -> List[RecordT]:
        return self.service.list_records(self.user, search=self.search_term)

    def current_page(self) -> Tuple[List[RecordT], PaginationInfo]:
        records, info = paginate(self.filtered_records(), self.page, self.page_size)
        self.page = info.page
        return records, info

    # Add / edit

    def open_add(self) -> EntityForm:
        self.form = self.form_class(None, on_save=self._handle_add, on_cancel=self.close_form)
        return self.form

    def open_edit(self, record: RecordT) -> EntityForm:
        self.form = self.form_class(record, on_save=self._handle_update, on_cancel=self.close_form)
        return self.form

    def close_form(self) -> None:
        self.form = None

    def _handle_add(self, values: Dict[str, Any]) -> None:
        self.last_saved = self.service.create_record(self.user, values)
        self.close_form()

    def _handle_update(self, record: RecordT) -> None:
        self.last_saved = self.service.update_record(self.user, record)
        self.close_form()

    # Delete

    def request_delete(self, record: RecordT) -> ConfirmationPrompt:
        self.pending_delete = record
        return self.delete_prompt()

    def delete_prompt(self) -> Optional[ConfirmationPrompt]:
        if self.pending_delete is None:
            return None
        return ConfirmationPrompt(
            title=f"Delete {self.label}",
            message=(
                f"Are you sure you want to delete {self.pending_delete.full_name}? "
                "This action cannot be undone."
            ),
        )

    def confirm_delete(self) -> bool:
        """Remove the pending record; False when nothing was pending or it was already gone"""
        if self.pending_delete is None:
            return False
        removed = self.service.delete_record(self.user, self.pending_delete.id)
        self.pending_delete = None
        return removed

    def cancel_delete(self) -> None:
        self.pending_delete = None

    # Rendering

    def columns(self) -> List[str]:
        raise NotImplementedError

    def render_row(self, record: RecordT) -> Dict[str, Any]:
        raise NotImplementedError

    def actions(self) -> List[str]:
        return ["edit", "delete"] if self.can_manage else []

    def form_info(self) -> Optional[FormInfo]:
        if self.form is None:
            return None
        if self.form.is_edit:
            return FormInfo(mode="edit", title=f"Edit {self.label}", record_id=self.form.record.id)
        return FormInfo(mode="add", title=f"Add New {self.label}")

    def render(self) -> PageView:
        if not self.can_view:
            return PageView(
                title="Access Restricted",
                restricted=True,
                message=self.gate.restricted_message,
            )

        records, info = self.current_page()
        return PageView(
            title=self.title,
            can_manage=self.can_manage,
            search=self.search_term,
            columns=self.columns(),
            rows=[self.render_row(record) for record in records],
            pagination=info,
            summary=info.summary,
            form=self.form_info(),
            delete_prompt=self.delete_prompt(),
        )
