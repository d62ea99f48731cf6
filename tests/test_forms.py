import pytest
from datetime import date

from app.domain.doctors.forms import DoctorForm
from app.domain.doctors.models import AvailabilityEntry, Doctor, Weekday
from app.domain.patients.forms import PatientForm
from app.domain.patients.models import BloodType, Patient


def make_doctor(**overrides) -> Doctor:
    data = dict(
        id="doc-1",
        first_name="Sarah",
        last_name="Johnson",
        specialization="Cardiology",
        department="Cardiology",
        contact_number="555-123-4567",
        email="sarah@hospital.com",
        license_number="MD12345",
        availability=[
            AvailabilityEntry(day=Weekday.MONDAY, start_time="09:00", end_time="17:00"),
            AvailabilityEntry(day=Weekday.WEDNESDAY, start_time="10:00", end_time="14:00"),
            AvailabilityEntry(day=Weekday.FRIDAY, start_time="08:00", end_time="12:00"),
        ],
    )
    data.update(overrides)
    return Doctor(**data)


def make_patient(**overrides) -> Patient:
    data = dict(
        id="pat-1",
        first_name="Jane",
        last_name="Doe",
        date_of_birth=date(1990, 1, 1),
        blood_type=BloodType.O_POSITIVE,
        contact_number="555-111-2222",
        email="jane@x.com",
        address="1 Main St",
    )
    data.update(overrides)
    return Patient(**data)


@pytest.mark.forms
class TestDoctorFormValidation:
    """Required fields and email format on the doctor form."""

    @pytest.mark.parametrize("field", DoctorForm.required_fields)
    def test_single_empty_required_field_blocks_save(self, field: str) -> None:
        saved = []
        form = DoctorForm(make_doctor(), on_save=saved.append)
        form.set_field(field, "")

        assert form.submit() is False
        assert set(form.errors) == {field}
        assert form.errors[field].endswith("is required")
        assert saved == []

    def test_whitespace_only_counts_as_empty(self) -> None:
        form = DoctorForm(make_doctor())
        form.set_field("first_name", "   ")

        assert form.validate() is False
        assert form.errors == {"first_name": "First name is required"}

    @pytest.mark.parametrize("email,valid", [
        ("a@b", False),
        ("a@b.com", True),
        ("not-an-email", False),
        ("first.last@hospital.org", True),
    ])
    def test_email_format(self, email: str, valid: bool) -> None:
        form = DoctorForm(make_doctor())
        form.set_field("email", email)

        assert form.validate() is valid
        if not valid:
            assert form.errors == {"email": "Invalid email format"}

    def test_empty_email_reports_required_not_format(self) -> None:
        form = DoctorForm(make_doctor())
        form.set_field("email", "")

        form.validate()
        assert form.errors == {"email": "Email is required"}

    def test_errors_are_recomputed(self) -> None:
        form = DoctorForm(make_doctor())
        form.set_field("department", "")
        assert form.validate() is False

        form.set_field("department", "Oncology")
        assert form.validate() is True
        assert form.errors == {}

    def test_unknown_field_raises(self) -> None:
        form = DoctorForm(make_doctor())
        with pytest.raises(KeyError):
            form.set_field("favourite_colour", "blue")


@pytest.mark.forms
class TestDoctorFormSubmit:
    def test_edit_merges_draft_over_record(self) -> None:
        doctor = make_doctor()
        saved = []
        form = DoctorForm(doctor, on_save=saved.append)
        form.set_fields({"specialization": "Electrophysiology", "department": "Heart Center"})

        assert form.submit() is True
        assert len(saved) == 1
        result = saved[0]
        assert isinstance(result, Doctor)
        assert result.id == doctor.id
        assert result.specialization == "Electrophysiology"
        assert result.department == "Heart Center"
        assert result.first_name == doctor.first_name
        # the original record is untouched until the page stores the result
        assert doctor.specialization == "Cardiology"

    def test_create_passes_values_without_id(self) -> None:
        saved = []
        form = DoctorForm(on_save=saved.append)
        form.set_fields({
            "first_name": "Gregory",
            "last_name": "House",
            "specialization": "Diagnostics",
            "department": "Internal Medicine",
            "contact_number": "555-333-4444",
            "email": "house@hospital.com",
            "license_number": "MD99999",
        })
        form.add_entry()

        assert form.submit() is True
        values = saved[0]
        assert "id" not in values
        assert values["first_name"] == "Gregory"
        assert values["user_id"] is None
        assert values["availability"] == [AvailabilityEntry()]

    def test_new_form_starts_empty_and_invalid(self) -> None:
        form = DoctorForm()
        assert all(value == "" for value in form.draft.values())
        assert form.availability == []
        assert form.validate() is False
        assert set(form.errors) == set(DoctorForm.required_fields)

    def test_cancel_invokes_callback(self) -> None:
        cancelled = []
        form = DoctorForm(make_doctor(), on_cancel=lambda: cancelled.append(True))
        form.cancel()
        assert cancelled == [True]


@pytest.mark.forms
class TestAvailabilityEditor:
    def test_add_entry_appends_default(self) -> None:
        form = DoctorForm(make_doctor())
        before = len(form.availability)

        form.add_entry()

        assert len(form.availability) == before + 1
        last = form.availability[-1]
        assert last.day == Weekday.MONDAY
        assert last.start_time == "09:00"
        assert last.end_time == "17:00"

    def test_remove_entry_preserves_order(self) -> None:
        form = DoctorForm(make_doctor())
        days_before = [entry.day for entry in form.availability]

        form.remove_entry(1)

        assert len(form.availability) == len(days_before) - 1
        assert [entry.day for entry in form.availability] == [days_before[0], days_before[2]]

    def test_remove_out_of_range_is_noop(self) -> None:
        form = DoctorForm(make_doctor())
        form.remove_entry(10)
        assert len(form.availability) == 3

    def test_update_entry_replaces_one_field(self) -> None:
        doctor = make_doctor()
        form = DoctorForm(doctor)
        original_list = form.availability
        original_entry = form.availability[1]

        form.update_entry(1, "end_time", "18:30")

        assert form.availability[1].end_time == "18:30"
        assert form.availability[1].start_time == original_entry.start_time
        assert form.availability[1].day == original_entry.day
        assert original_entry.end_time == "14:00"
        assert original_list is not form.availability
        assert doctor.availability[1].end_time == "14:00"

    def test_update_entry_day(self) -> None:
        form = DoctorForm(make_doctor())
        form.update_entry(0, "day", "Sunday")
        assert form.availability[0].day == Weekday.SUNDAY

    def test_update_entry_rejects_unknown_day_and_field(self) -> None:
        form = DoctorForm(make_doctor())
        with pytest.raises(ValueError):
            form.update_entry(0, "day", "Someday")
        with pytest.raises(ValueError):
            form.update_entry(0, "room", "12")

    def test_update_entry_out_of_range(self) -> None:
        form = DoctorForm(make_doctor())
        with pytest.raises(IndexError):
            form.update_entry(5, "start_time", "10:00")

    def test_set_availability_from_mappings(self) -> None:
        form = DoctorForm(make_doctor())
        form.set_availability([{"day": "Saturday", "start_time": "10:00", "end_time": "12:00"}])

        assert form.availability == [
            AvailabilityEntry(day=Weekday.SATURDAY, start_time="10:00", end_time="12:00")
        ]
        assert form.validate() is True

    def test_set_availability_with_bad_entry_reports_error(self) -> None:
        saved = []
        doctor = make_doctor()
        form = DoctorForm(doctor, on_save=saved.append)

        form.set_availability([{"day": "Tuesday"}, {"day": "Someday"}])

        assert form.availability == doctor.availability
        assert form.submit() is False
        assert form.errors == {"availability": "Invalid availability entry 2"}
        assert saved == []

        form.set_availability([{"day": "Tuesday"}])
        assert form.validate() is True

    def test_overlapping_and_malformed_times_are_accepted(self) -> None:
        saved = []
        form = DoctorForm(make_doctor(), on_save=saved.append)
        form.add_entry()
        form.add_entry()
        form.update_entry(4, "start_time", "25:99")

        assert form.submit() is True
        entries = saved[0].availability
        assert entries[3] == entries[0]
        assert entries[4].start_time == "25:99"


@pytest.mark.forms
class TestPatientForm:
    @pytest.mark.parametrize("field", PatientForm.required_fields)
    def test_single_empty_required_field_blocks_save(self, field: str) -> None:
        saved = []
        form = PatientForm(make_patient(), on_save=saved.append)
        form.set_field(field, "")

        assert form.submit() is False
        assert list(form.errors) == [field]
        assert saved == []

    def test_draft_is_populated_from_record(self) -> None:
        form = PatientForm(make_patient())
        assert form.draft["date_of_birth"] == "1990-01-01"
        assert form.draft["blood_type"] == "O+"
        assert form.draft["user_id"] == ""

    def test_invalid_date_and_blood_type(self) -> None:
        form = PatientForm(make_patient())
        form.set_fields({"date_of_birth": "15/05/1985", "blood_type": "Z+"})

        assert form.validate() is False
        assert form.errors == {
            "date_of_birth": "Invalid date format",
            "blood_type": "Invalid blood type",
        }

    @pytest.mark.parametrize("value", ["19900101", "1990-W01-1", "1990-1-1", "1990-02-30"])
    def test_only_year_month_day_dates_are_accepted(self, value: str) -> None:
        saved = []
        form = PatientForm(make_patient(), on_save=saved.append)
        form.set_field("date_of_birth", value)

        assert form.validate() is False
        assert form.errors == {"date_of_birth": "Invalid date format"}
        assert form.submit() is False
        assert saved == []

    def test_blood_type_is_optional(self) -> None:
        saved = []
        form = PatientForm(make_patient(), on_save=saved.append)
        form.set_field("blood_type", "")

        assert form.submit() is True
        assert saved[0].blood_type is None

    def test_submit_converts_values(self) -> None:
        saved = []
        form = PatientForm(on_save=saved.append)
        form.set_fields({
            "first_name": " Jane ",
            "last_name": "Doe",
            "date_of_birth": "1990-01-01",
            "blood_type": "AB-",
            "contact_number": "555-000-1111",
            "email": "jane@x.com",
            "address": "1 Main St",
        })

        assert form.submit() is True
        values = saved[0]
        assert values["first_name"] == "Jane"
        assert values["date_of_birth"] == date(1990, 1, 1)
        assert values["blood_type"] == BloodType.AB_NEGATIVE
