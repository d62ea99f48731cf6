from app.domain.common.repository import InMemoryRepository
from app.domain.patients.models import Patient


class PatientRepository(InMemoryRepository[Patient]):
    """Repository for patient records"""
    collection_name = "patients"
