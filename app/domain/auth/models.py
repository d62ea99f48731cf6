from typing import Optional
from pydantic import BaseModel, EmailStr
import enum


class UserRole(str, enum.Enum):
    """User roles in the hospital administration system"""
    ADMIN = "admin"
    DOCTOR = "doctor"
    NURSE = "nurse"
    RECEPTIONIST = "receptionist"
    PATIENT = "patient"


class User(BaseModel):
    """Login account; the role drives what the user may see and change"""
    id: str
    email: EmailStr
    password_hash: str
    first_name: str
    last_name: str
    role: UserRole = UserRole.RECEPTIONIST
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
