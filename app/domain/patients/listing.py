from typing import Any, Dict, List, Optional

from app.core.permissions import PATIENTS_PAGE_GATE
from app.domain.auth.models import User, UserRole
from app.domain.common.listing import EntityListPage
from app.domain.patients.forms import PatientForm
from app.domain.patients.models import Patient
from app.domain.patients.service import PatientService


class PatientListPage(EntityListPage[Patient]):
    """Patients table; admins also see each patient's login details"""

    title = "Patients"
    form_class = PatientForm

    def __init__(self, service: PatientService, user: User, page_size: Optional[int] = None):
        super().__init__(service, user, PATIENTS_PAGE_GATE, page_size=page_size)

    @property
    def show_login_details(self) -> bool:
        return self.user.role == UserRole.ADMIN

    def columns(self) -> List[str]:
        columns = ["Patient", "Medical Info", "Contact"]
        if self.show_login_details:
            columns.append("Login Details")
        columns.append("Actions")
        return columns

    def render_row(self, patient: Patient) -> Dict[str, Any]:
        row = {
            "id": patient.id,
            "initials": patient.initials,
            "name": patient.full_name,
            "blood_type": patient.blood_type.value if patient.blood_type else "N/A",
            "date_of_birth": patient.date_of_birth.isoformat(),
            "contact_number": patient.contact_number,
            "address": patient.address,
            "actions": self.actions(),
        }
        if self.show_login_details:
            row["email"] = patient.email
            row["has_account"] = patient.has_account
        return row
