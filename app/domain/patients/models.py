from datetime import date
from typing import ClassVar, Optional, Tuple
import enum

from app.domain.common.models import Record


class BloodType(str, enum.Enum):
    """Blood type enumeration"""
    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"


class Patient(Record):
    """Patient record; user_id links to a login account when the patient has one"""
    first_name: str
    last_name: str
    date_of_birth: date
    blood_type: Optional[BloodType] = None
    contact_number: str
    email: str
    address: str
    user_id: Optional[str] = None

    search_fields: ClassVar[Tuple[str, ...]] = ("first_name", "last_name", "email")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}".upper()

    @property
    def has_account(self) -> bool:
        return bool(self.user_id)
