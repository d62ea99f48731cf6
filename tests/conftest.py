import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-hospital-admin")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.core.security import get_password_hash
from app.domain.auth.models import User, UserRole
from app.domain.auth.repository import UserRepository
from app.domain.auth.service import AuthenticationService
from app.domain.doctors.service import DoctorService
from app.domain.patients.service import PatientService
from app.infrastructure.database import InMemoryDatabase, get_db, init_db


@pytest.fixture(scope="function")
def db() -> InMemoryDatabase:
    """Fresh database seeded with the mock data for each test."""
    return init_db(seed=True)


@pytest.fixture(scope="function")
def empty_db() -> InMemoryDatabase:
    """Database without any records."""
    return init_db(seed=False)


@pytest.fixture(scope="function")
def admin_user(db: InMemoryDatabase) -> User:
    return UserRepository(db).get_by_email("admin@hospital.com")


@pytest.fixture(scope="function")
def doctor_user(db: InMemoryDatabase) -> User:
    return UserRepository(db).get_by_email("doctor@hospital.com")


@pytest.fixture(scope="function")
def patient_user(db: InMemoryDatabase) -> User:
    return UserRepository(db).get_by_email("patient@hospital.com")


@pytest.fixture(scope="function")
def nurse_user(db: InMemoryDatabase) -> User:
    """A role with no access to the doctor or patient screens."""
    user = User(
        id="user-nurse",
        email="nurse@hospital.com",
        password_hash=get_password_hash("nurse123"),
        first_name="Nina",
        last_name="Park",
        role=UserRole.NURSE,
    )
    return UserRepository(db).create(user)


@pytest.fixture(scope="function")
def patient_service(db: InMemoryDatabase) -> PatientService:
    return PatientService(db)


@pytest.fixture(scope="function")
def doctor_service(db: InMemoryDatabase) -> DoctorService:
    return DoctorService(db)


def _client_for(db: InMemoryDatabase, user: User = None) -> AsyncClient:
    app.dependency_overrides[get_db] = lambda: db
    headers = {}
    if user is not None:
        token = AuthenticationService(db).create_token(user)
        headers["Authorization"] = f"Bearer {token}"
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test", headers=headers)


@pytest.fixture(scope="function")
async def client(db: InMemoryDatabase) -> AsyncGenerator[AsyncClient, None]:
    """Unauthenticated test client bound to the test database."""
    async with _client_for(db) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
async def admin_client(db: InMemoryDatabase, admin_user: User) -> AsyncGenerator[AsyncClient, None]:
    async with _client_for(db, admin_user) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
async def doctor_client(db: InMemoryDatabase, doctor_user: User) -> AsyncGenerator[AsyncClient, None]:
    async with _client_for(db, doctor_user) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
async def nurse_client(db: InMemoryDatabase, nurse_user: User) -> AsyncGenerator[AsyncClient, None]:
    async with _client_for(db, nurse_user) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def sample_patient_data() -> dict:
    """Sample patient draft for testing."""
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "date_of_birth": "1990-01-01",
        "blood_type": "O+",
        "contact_number": "555-111-2222",
        "email": "jane.doe@example.com",
        "address": "123 Main St, New York, NY",
    }


@pytest.fixture(scope="function")
def sample_doctor_data() -> dict:
    """Sample doctor draft for testing."""
    return {
        "first_name": "Gregory",
        "last_name": "House",
        "specialization": "Diagnostics",
        "department": "Internal Medicine",
        "contact_number": "555-333-4444",
        "email": "gregory.house@example.com",
        "license_number": "MD99999",
        "availability": [
            {"day": "Tuesday", "start_time": "08:00", "end_time": "12:00"}
        ],
    }
