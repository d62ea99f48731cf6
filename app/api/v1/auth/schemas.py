from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import List
from app.domain.auth.models import UserRole


class LoginRequest(BaseModel):
    """Schema for login credentials"""
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """Schema for user response data"""
    id: str
    email: EmailStr
    first_name: str
    last_name: str
    role: UserRole
    is_active: bool
    permissions: List[str] = []

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    """Schema for token response"""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
