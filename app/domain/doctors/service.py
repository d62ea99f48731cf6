from app.core.permissions import Permissions
from app.domain.common.service import EntityService
from app.domain.doctors.models import Doctor
from app.domain.doctors.repository import DoctorRepository


class DoctorService(EntityService[Doctor]):
    """Service layer for doctor management operations"""

    entity_name = "doctor"
    model = Doctor
    repository_class = DoctorRepository

    read_permission = Permissions.DOCTORS_READ
    create_permission = Permissions.DOCTORS_CREATE
    update_permission = Permissions.DOCTORS_UPDATE
    delete_permission = Permissions.DOCTORS_DELETE
