from typing import Any, Dict, List, Optional, Union

from app.domain.common.forms import EntityForm, SaveCallback
from app.domain.doctors.models import AvailabilityEntry, Doctor, Weekday

AVAILABILITY_FIELDS = ("day", "start_time", "end_time")


class DoctorForm(EntityForm[Doctor]):
    """Doctor edit form with an availability sub-editor"""

    fields = {
        "first_name": "First name",
        "last_name": "Last name",
        "email": "Email",
        "contact_number": "Contact number",
        "license_number": "License number",
        "specialization": "Specialization",
        "department": "Department",
        "user_id": "User account",
    }
    required_fields = (
        "first_name",
        "last_name",
        "specialization",
        "department",
        "contact_number",
        "email",
        "license_number",
    )
    optional_fields = ("user_id",)

    def __init__(
        self,
        record: Optional[Doctor] = None,
        on_save: Optional[SaveCallback] = None,
        on_cancel=None,
    ):
        super().__init__(record, on_save=on_save, on_cancel=on_cancel)
        self.availability: List[AvailabilityEntry] = list(record.availability) if record else []
        self.availability_error: Optional[str] = None

    def add_entry(self) -> AvailabilityEntry:
        """Append a default Monday 09:00-17:00 slot"""
        entry = AvailabilityEntry()
        self.availability = self.availability + [entry]
        return entry

    def update_entry(self, index: int, field: str, value: str) -> AvailabilityEntry:
        if field not in AVAILABILITY_FIELDS:
            raise ValueError(f"Unknown availability field: {field}")
        if not 0 <= index < len(self.availability):
            raise IndexError(f"No availability entry at position {index}")

        new_value: Any = Weekday(value) if field == "day" else value
        entry = self.availability[index].model_copy(update={field: new_value})
        availability = list(self.availability)
        availability[index] = entry
        self.availability = availability
        return entry

    def remove_entry(self, index: int) -> None:
        self.availability = [entry for i, entry in enumerate(self.availability) if i != index]

    def set_availability(self, entries: List[Union[AvailabilityEntry, Dict[str, Any]]]) -> None:
        """
        Replace the whole schedule from entries or raw mappings.

        A malformed entry leaves the schedule unchanged and is reported
        under ``availability`` on the next validate.
        """
        availability = []
        for position, entry in enumerate(entries, start=1):
            try:
                availability.append(AvailabilityEntry.model_validate(entry))
            except ValueError:
                self.availability_error = f"Invalid availability entry {position}"
                return
        self.availability = availability
        self.availability_error = None

    def validate_fields(self) -> Dict[str, str]:
        if self.availability_error:
            return {"availability": self.availability_error}
        return {}

    def cleaned_values(self) -> Dict[str, Any]:
        values = super().cleaned_values()
        values["availability"] = list(self.availability)
        return values
