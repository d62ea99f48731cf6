import uuid
from datetime import date

from app.domain.patients.models import Patient
from app.domain.patients.repository import PatientRepository
from app.infrastructure.database import InMemoryDatabase


def make_patient(record_id: str, first_name: str) -> Patient:
    return Patient(
        id=record_id,
        first_name=first_name,
        last_name="Test",
        date_of_birth=date(1980, 1, 1),
        contact_number="555-000-0000",
        email=f"{first_name.lower()}@x.com",
        address="1 Test Way",
    )


def populated_repo() -> PatientRepository:
    repo = PatientRepository(InMemoryDatabase())
    for index, name in enumerate(["Ann", "Ben", "Cal"], start=1):
        repo.insert(make_patient(f"p{index}", name))
    return repo


class TestInMemoryRepository:
    def test_insert_appends_in_order(self) -> None:
        repo = populated_repo()
        assert [p.first_name for p in repo.list()] == ["Ann", "Ben", "Cal"]
        assert repo.count() == 3

    def test_list_returns_a_copy(self) -> None:
        repo = populated_repo()
        snapshot = repo.list()
        snapshot.clear()
        assert repo.count() == 3

    def test_repositories_share_the_collection(self) -> None:
        db = InMemoryDatabase()
        PatientRepository(db).insert(make_patient("p1", "Ann"))
        assert PatientRepository(db).get("p1").first_name == "Ann"

    def test_update_replaces_only_target(self) -> None:
        repo = populated_repo()
        before = repo.list()
        replacement = before[1].model_copy(update={"first_name": "Benjamin"})

        assert repo.update("p2", replacement) is True

        after = repo.list()
        assert after[1] is replacement
        assert after[0] is before[0]
        assert after[2] is before[2]

    def test_update_missing_id_is_noop(self) -> None:
        repo = populated_repo()
        before = repo.list()

        assert repo.update("missing", make_patient("missing", "Zed")) is False
        assert repo.list() == before

    def test_remove(self) -> None:
        repo = populated_repo()
        assert repo.remove("p2") is True
        assert repo.count() == 2
        assert repo.get("p2") is None
        assert [p.id for p in repo.list()] == ["p1", "p3"]

    def test_remove_missing_id_is_noop(self) -> None:
        repo = populated_repo()
        assert repo.remove("missing") is False
        assert repo.count() == 3

    def test_new_ids_are_unique_uuids(self) -> None:
        repo = populated_repo()
        ids = {repo.new_id() for _ in range(50)}
        assert len(ids) == 50
        for value in ids:
            uuid.UUID(value)

    def test_id_factory_can_be_injected(self) -> None:
        counter = iter(range(100))
        repo = PatientRepository(InMemoryDatabase(), id_factory=lambda: f"fixed-{next(counter)}")
        assert repo.new_id() == "fixed-0"
        assert repo.new_id() == "fixed-1"
