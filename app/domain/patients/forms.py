from datetime import date, datetime
from typing import Any, Dict
import re

from app.domain.common.forms import EntityForm
from app.domain.patients.models import BloodType, Patient

BLOOD_TYPES = {blood_type.value for blood_type in BloodType}
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD date; any other layout raises ValueError"""
    if not DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Expected YYYY-MM-DD, got {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


class PatientForm(EntityForm[Patient]):
    """Add/edit form for patients"""

    fields = {
        "first_name": "First name",
        "last_name": "Last name",
        "email": "Email",
        "contact_number": "Contact number",
        "date_of_birth": "Date of birth",
        "blood_type": "Blood type",
        "address": "Address",
        "user_id": "User account",
    }
    required_fields = (
        "first_name",
        "last_name",
        "date_of_birth",
        "contact_number",
        "email",
        "address",
    )
    optional_fields = ("blood_type", "user_id")

    def validate_fields(self) -> Dict[str, str]:
        errors = {}

        date_of_birth = self.draft["date_of_birth"].strip()
        if date_of_birth:
            try:
                parse_date(date_of_birth)
            except ValueError:
                errors["date_of_birth"] = "Invalid date format"

        blood_type = self.draft["blood_type"].strip()
        if blood_type and blood_type not in BLOOD_TYPES:
            errors["blood_type"] = "Invalid blood type"

        return errors

    def clean_field(self, name: str, value: str) -> Any:
        if name == "date_of_birth":
            return parse_date(value)
        if name == "blood_type":
            return BloodType(value)
        return value
