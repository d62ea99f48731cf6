from app.core.permissions import Permissions
from app.domain.common.service import EntityService
from app.domain.patients.models import Patient
from app.domain.patients.repository import PatientRepository


class PatientService(EntityService[Patient]):
    """Service layer for patient management operations"""

    entity_name = "patient"
    model = Patient
    repository_class = PatientRepository

    read_permission = Permissions.PATIENTS_READ
    create_permission = Permissions.PATIENTS_CREATE
    update_permission = Permissions.PATIENTS_UPDATE
    delete_permission = Permissions.PATIENTS_DELETE
