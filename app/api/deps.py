from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from app.core.config import settings
from app.domain.auth.models import User
from app.domain.auth.service import AuthenticationService
from app.domain.doctors.service import DoctorService
from app.domain.patients.service import PatientService
from app.infrastructure.database import InMemoryDatabase, get_db

reusable_oauth2 = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/auth/token"
)


def get_current_user(
    db: InMemoryDatabase = Depends(get_db),
    token: str = Depends(reusable_oauth2)
) -> User:
    return AuthenticationService(db).get_user_from_token(token)


def get_doctor_service(db: InMemoryDatabase = Depends(get_db)) -> DoctorService:
    return DoctorService(db)


def get_patient_service(db: InMemoryDatabase = Depends(get_db)) -> PatientService:
    return PatientService(db)
