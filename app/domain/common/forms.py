"""
Draft editing and validation for a single record.

A form keeps string drafts of a record's editable fields. Validation never
raises: problems are collected in ``errors`` keyed by field name, and
``submit`` refuses to call ``on_save`` while any remain.
"""
from datetime import date
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar, Union
import enum
import re

from app.domain.common.models import Record

RecordT = TypeVar("RecordT", bound=Record)

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

SaveCallback = Callable[[Union[Record, Dict[str, Any]]], None]


class EntityForm(Generic[RecordT]):
    """Edit form for one record, or for a new one when no record is given"""

    # Draft field name -> label used in error messages
    fields: Dict[str, str] = {}
    required_fields: Tuple[str, ...] = ()
    optional_fields: Tuple[str, ...] = ()
    email_fields: Tuple[str, ...] = ("email",)

    def __init__(
        self,
        record: Optional[RecordT] = None,
        on_save: Optional[SaveCallback] = None,
        on_cancel: Optional[Callable[[], None]] = None,
    ):
        self.record = record
        self.on_save = on_save
        self.on_cancel = on_cancel
        self.draft: Dict[str, str] = self._initial_draft(record)
        self.errors: Dict[str, str] = {}

    @property
    def is_edit(self) -> bool:
        return self.record is not None

    def _initial_draft(self, record: Optional[RecordT]) -> Dict[str, str]:
        if record is None:
            return {name: "" for name in self.fields}
        return {name: self.format_value(getattr(record, name)) for name in self.fields}

    @staticmethod
    def format_value(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, enum.Enum):
            return str(value.value)
        if isinstance(value, date):
            return value.isoformat()
        return str(value)

    def set_field(self, name: str, value: Any) -> None:
        if name not in self.draft:
            raise KeyError(name)
        self.draft[name] = self.format_value(value)

    def set_fields(self, values: Dict[str, Any]) -> None:
        for name, value in values.items():
            self.set_field(name, value)

    def validate(self) -> bool:
        """Recompute the error map; True when the draft can be saved"""
        errors: Dict[str, str] = {}

        for name in self.required_fields:
            if not self.draft[name].strip():
                errors[name] = f"{self.fields[name]} is required"

        for name in self.email_fields:
            value = self.draft[name].strip()
            if value and not EMAIL_PATTERN.search(value):
                errors[name] = "Invalid email format"

        for name, message in self.validate_fields().items():
            errors.setdefault(name, message)

        self.errors = errors
        return not errors

    def validate_fields(self) -> Dict[str, str]:
        """Entity-specific checks on non-empty values"""
        return {}

    def clean_field(self, name: str, value: str) -> Any:
        return value

    def cleaned_values(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for name, raw in self.draft.items():
            value = raw.strip()
            if not value and name in self.optional_fields:
                values[name] = None
            else:
                values[name] = self.clean_field(name, value)
        return values

    def submit(self) -> bool:
        """
        Validate and hand the result to ``on_save``.

        Editing passes the original record with the draft merged over it, so
        the id is kept. Creating passes a mapping of the values; the caller
        assigns the id.
        """
        if not self.validate():
            return False

        values = self.cleaned_values()
        result: Union[RecordT, Dict[str, Any]]
        if self.record is not None:
            result = self.record.model_copy(update=values)
        else:
            result = values

        if self.on_save is not None:
            self.on_save(result)
        return True

    def cancel(self) -> None:
        if self.on_cancel is not None:
            self.on_cancel()
