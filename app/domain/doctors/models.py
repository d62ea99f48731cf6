from typing import ClassVar, List, Optional, Tuple
from pydantic import BaseModel
import enum

from app.domain.common.models import Record


class Weekday(str, enum.Enum):
    """Days a doctor can be scheduled on, in display order"""
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class AvailabilityEntry(BaseModel):
    """One working-hours slot; times are kept as entered"""
    day: Weekday = Weekday.MONDAY
    start_time: str = "09:00"
    end_time: str = "17:00"

    def describe(self) -> str:
        return f"{self.day.value} {self.start_time}-{self.end_time}"


class Doctor(Record):
    """Doctor profile with a weekly availability schedule"""
    first_name: str
    last_name: str
    specialization: str
    department: str
    contact_number: str
    email: str
    license_number: str
    availability: List[AvailabilityEntry] = []
    user_id: Optional[str] = None

    search_fields: ClassVar[Tuple[str, ...]] = ("first_name", "last_name", "email", "specialization")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
