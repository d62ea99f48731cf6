from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import date
from app.domain.patients.models import BloodType


class PatientDraft(BaseModel):
    """
    Draft field values for the patient form.

    Values are validated by the form, not here, so that every problem comes
    back as a per-field message. On update, fields left out keep the
    patient's current values.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    blood_type: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    user_id: Optional[str] = None


class PatientResponse(BaseModel):
    """Schema for patient response data"""
    id: str
    first_name: str
    last_name: str
    date_of_birth: date
    blood_type: Optional[BloodType] = None
    contact_number: str
    email: str
    address: str
    user_id: Optional[str] = None
    has_account: bool

    model_config = ConfigDict(from_attributes=True)


class PatientListResponse(BaseModel):
    """Schema for paginated patient list response"""
    items: List[PatientResponse]
    total: int
    page: int
    limit: int
    pages: int
