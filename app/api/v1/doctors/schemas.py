from pydantic import BaseModel, ConfigDict
from typing import Any, Optional, List
from app.domain.doctors.models import AvailabilityEntry


class DoctorDraft(BaseModel):
    """
    Draft field values for the doctor form; omitted fields keep their current value.

    Availability entries are passed to the form unparsed so a bad day or
    time comes back as a per-field message.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    specialization: Optional[str] = None
    department: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    license_number: Optional[str] = None
    user_id: Optional[str] = None
    availability: Optional[List[Any]] = None


class AvailabilityUpdate(BaseModel):
    """Change one field of one availability entry"""
    field: str
    value: str


class DoctorResponse(BaseModel):
    """Schema for doctor response data"""
    id: str
    first_name: str
    last_name: str
    specialization: str
    department: str
    contact_number: str
    email: str
    license_number: str
    availability: List[AvailabilityEntry] = []
    user_id: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class DoctorListResponse(BaseModel):
    """Schema for paginated doctor list response"""
    items: List[DoctorResponse]
    total: int
    page: int
    limit: int
    pages: int
