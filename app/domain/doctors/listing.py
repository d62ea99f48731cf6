from typing import Any, Dict, List, Optional

from app.core.permissions import DOCTORS_PAGE_GATE
from app.domain.auth.models import User
from app.domain.common.listing import EntityListPage
from app.domain.doctors.forms import DoctorForm
from app.domain.doctors.models import Doctor
from app.domain.doctors.service import DoctorService


class DoctorListPage(EntityListPage[Doctor]):
    title = "Doctors"
    form_class = DoctorForm

    def __init__(self, service: DoctorService, user: User, page_size: Optional[int] = None):
        super().__init__(service, user, DOCTORS_PAGE_GATE, page_size=page_size)

    def columns(self) -> List[str]:
        return ["Doctor", "Specialization", "Contact", "Availability", "Actions"]

    def render_row(self, doctor: Doctor) -> Dict[str, Any]:
        return {
            "id": doctor.id,
            "name": doctor.full_name,
            "license_number": doctor.license_number,
            "specialization": doctor.specialization,
            "department": doctor.department,
            "contact_number": doctor.contact_number,
            "email": doctor.email,
            "availability": [entry.describe() for entry in doctor.availability],
            "actions": self.actions(),
        }
