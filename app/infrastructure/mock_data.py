"""Seed records for the in-memory database."""
from datetime import date
from functools import lru_cache
from typing import Dict, List

from app.core.security import get_password_hash
from app.domain.auth.models import User, UserRole
from app.domain.doctors.models import AvailabilityEntry, Doctor, Weekday
from app.domain.patients.models import BloodType, Patient
from app.infrastructure.database import InMemoryDatabase

MOCK_USERS: List[Dict] = [
    {
        "id": "user-admin",
        "email": "admin@hospital.com",
        "password": "admin123",
        "first_name": "Alice",
        "last_name": "Morgan",
        "role": UserRole.ADMIN,
    },
    {
        "id": "user-doctor",
        "email": "doctor@hospital.com",
        "password": "doctor123",
        "first_name": "Sarah",
        "last_name": "Johnson",
        "role": UserRole.DOCTOR,
    },
    {
        "id": "user-patient",
        "email": "patient@hospital.com",
        "password": "patient123",
        "first_name": "John",
        "last_name": "Smith",
        "role": UserRole.PATIENT,
    },
]


@lru_cache(maxsize=None)
def _hashed(password: str) -> str:
    # bcrypt is slow on purpose; hash each seed password once per process
    return get_password_hash(password)


def mock_users() -> List[User]:
    users = []
    for data in MOCK_USERS:
        data = dict(data)
        password = data.pop("password")
        users.append(User(password_hash=_hashed(password), **data))
    return users


def mock_doctors() -> List[Doctor]:
    return [
        Doctor(
            id="doctor1",
            user_id="user-doctor",
            first_name="Sarah",
            last_name="Johnson",
            specialization="Cardiology",
            department="Cardiology",
            contact_number="555-123-4567",
            email="sarah.johnson@hospital.com",
            license_number="MD12345",
            availability=[
                AvailabilityEntry(day=Weekday.MONDAY, start_time="09:00", end_time="17:00"),
                AvailabilityEntry(day=Weekday.WEDNESDAY, start_time="09:00", end_time="17:00"),
                AvailabilityEntry(day=Weekday.FRIDAY, start_time="09:00", end_time="13:00"),
            ],
        ),
        Doctor(
            id="doctor2",
            first_name="Michael",
            last_name="Chen",
            specialization="Neurology",
            department="Neurology",
            contact_number="555-234-5678",
            email="michael.chen@hospital.com",
            license_number="MD23456",
            availability=[
                AvailabilityEntry(day=Weekday.TUESDAY, start_time="08:00", end_time="16:00"),
                AvailabilityEntry(day=Weekday.THURSDAY, start_time="08:00", end_time="16:00"),
            ],
        ),
        Doctor(
            id="doctor3",
            first_name="Emily",
            last_name="Rodriguez",
            specialization="Pediatrics",
            department="Pediatrics",
            contact_number="555-345-6789",
            email="emily.rodriguez@hospital.com",
            license_number="MD34567",
            availability=[
                AvailabilityEntry(day=Weekday.MONDAY, start_time="10:00", end_time="18:00"),
                AvailabilityEntry(day=Weekday.SATURDAY, start_time="09:00", end_time="12:00"),
            ],
        ),
    ]


def mock_patients() -> List[Patient]:
    return [
        Patient(
            id="patient1",
            user_id="user-patient",
            first_name="John",
            last_name="Smith",
            date_of_birth=date(1985, 5, 15),
            blood_type=BloodType.O_POSITIVE,
            contact_number="555-987-6543",
            email="john.smith@email.com",
            address="123 Main St, Anytown, USA",
        ),
        Patient(
            id="patient2",
            first_name="Maria",
            last_name="Garcia",
            date_of_birth=date(1990, 8, 22),
            blood_type=BloodType.A_NEGATIVE,
            contact_number="555-876-5432",
            email="maria.garcia@email.com",
            address="456 Oak Ave, Somewhere, USA",
        ),
        Patient(
            id="patient3",
            first_name="Robert",
            last_name="Williams",
            date_of_birth=date(1978, 11, 3),
            contact_number="555-765-4321",
            email="robert.williams@email.com",
            address="789 Pine Rd, Elsewhere, USA",
        ),
    ]


def seed_database(db: InMemoryDatabase) -> None:
    db.collection("users").extend(mock_users())
    db.collection("doctors").extend(mock_doctors())
    db.collection("patients").extend(mock_patients())
