from app.domain.common.repository import InMemoryRepository
from app.domain.doctors.models import Doctor


class DoctorRepository(InMemoryRepository[Doctor]):
    """Repository for doctor records"""
    collection_name = "doctors"
