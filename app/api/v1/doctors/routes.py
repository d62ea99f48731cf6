from fastapi import APIRouter, Depends, Query, Response, status
from typing import Callable, Optional

from app.api.deps import get_current_user, get_doctor_service
from app.api.v1.doctors.schemas import (
    AvailabilityUpdate,
    DoctorDraft,
    DoctorListResponse,
    DoctorResponse
)
from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError, handle_validation_error
from app.domain.auth.models import User
from app.domain.common.listing import ConfirmationPrompt, PageView, paginate
from app.domain.doctors.forms import DoctorForm
from app.domain.doctors.listing import DoctorListPage
from app.domain.doctors.service import DoctorService

router = APIRouter(prefix="/doctors", tags=["Doctors"])


def _save_doctor(
    doctor_service: DoctorService,
    current_user: User,
    doctor_id: str,
    edit: Callable[[DoctorForm], None]
) -> DoctorResponse:
    """Open the edit form for a doctor, apply edit, and save it"""
    doctor_service.authorize(current_user, "update")
    doctor = doctor_service.get_record(current_user, doctor_id)

    list_page = DoctorListPage(doctor_service, current_user)
    form = list_page.open_edit(doctor)
    edit(form)

    if not form.submit():
        raise handle_validation_error(form.errors, entity="doctor")

    if list_page.last_saved is None:
        raise NotFoundError(message="Doctor not found", details={"id": doctor_id})

    return DoctorResponse.model_validate(list_page.last_saved)


@router.get("/", response_model=DoctorListResponse, status_code=status.HTTP_200_OK)
async def get_doctors(
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    current_user: User = Depends(get_current_user),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """Get doctors with search and pagination"""
    doctors = doctor_service.list_records(current_user, search=search)
    items, info = paginate(doctors, page, page_size)

    return DoctorListResponse(
        items=[DoctorResponse.model_validate(doctor) for doctor in items],
        total=info.total,
        page=info.page,
        limit=page_size,
        pages=info.pages
    )


@router.get("/page", response_model=PageView, status_code=status.HTTP_200_OK)
async def get_doctors_page(
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    current_user: User = Depends(get_current_user),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """Render the doctors table, or the restricted placeholder for other roles"""
    list_page = DoctorListPage(doctor_service, current_user, page_size=page_size)
    list_page.set_search(search)
    list_page.go_to_page(page)
    return list_page.render()


@router.post("/", response_model=DoctorResponse, status_code=status.HTTP_201_CREATED)
async def create_doctor(
    doctor_data: DoctorDraft,
    current_user: User = Depends(get_current_user),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """Create new doctor profile (admin only)"""
    doctor_service.authorize(current_user, "create")

    list_page = DoctorListPage(doctor_service, current_user)
    form = list_page.open_add()
    draft = doctor_data.model_dump(exclude_unset=True, exclude={"availability"})
    form.set_fields(draft)
    if doctor_data.availability is not None:
        form.set_availability(doctor_data.availability)

    if not form.submit():
        raise handle_validation_error(form.errors, entity="doctor")

    return DoctorResponse.model_validate(list_page.last_saved)


@router.get("/{doctor_id}", response_model=DoctorResponse, status_code=status.HTTP_200_OK)
async def get_doctor(
    doctor_id: str,
    current_user: User = Depends(get_current_user),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """Get doctor by ID"""
    return DoctorResponse.model_validate(doctor_service.get_record(current_user, doctor_id))


@router.put("/{doctor_id}", response_model=DoctorResponse, status_code=status.HTTP_200_OK)
async def update_doctor(
    doctor_id: str,
    doctor_data: DoctorDraft,
    current_user: User = Depends(get_current_user),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """Update doctor profile and availability"""
    def edit(form: DoctorForm) -> None:
        form.set_fields(doctor_data.model_dump(exclude_unset=True, exclude={"availability"}))
        if doctor_data.availability is not None:
            form.set_availability(doctor_data.availability)

    return _save_doctor(doctor_service, current_user, doctor_id, edit)


@router.post(
    "/{doctor_id}/availability",
    response_model=DoctorResponse,
    status_code=status.HTTP_201_CREATED
)
async def add_availability_entry(
    doctor_id: str,
    current_user: User = Depends(get_current_user),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """Append a default Monday 09:00-17:00 slot"""
    return _save_doctor(doctor_service, current_user, doctor_id, lambda form: form.add_entry())


@router.patch(
    "/{doctor_id}/availability/{index}",
    response_model=DoctorResponse,
    status_code=status.HTTP_200_OK
)
async def update_availability_entry(
    doctor_id: str,
    index: int,
    entry_update: AvailabilityUpdate,
    current_user: User = Depends(get_current_user),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """Change one field of one availability slot"""
    def edit(form: DoctorForm) -> None:
        try:
            form.update_entry(index, entry_update.field, entry_update.value)
        except IndexError:
            raise NotFoundError(
                message="Availability entry not found",
                details={"doctor_id": doctor_id, "index": index}
            )
        except ValueError:
            raise ValidationError(
                message="Invalid availability entry",
                field_errors={entry_update.field: f"Invalid value: {entry_update.value}"}
            )

    return _save_doctor(doctor_service, current_user, doctor_id, edit)


@router.delete(
    "/{doctor_id}/availability/{index}",
    response_model=DoctorResponse,
    status_code=status.HTTP_200_OK
)
async def remove_availability_entry(
    doctor_id: str,
    index: int,
    current_user: User = Depends(get_current_user),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """Drop one availability slot; the remaining slots keep their order"""
    return _save_doctor(doctor_service, current_user, doctor_id, lambda form: form.remove_entry(index))


@router.get(
    "/{doctor_id}/delete-confirmation",
    response_model=ConfirmationPrompt,
    status_code=status.HTTP_200_OK
)
async def get_doctor_delete_confirmation(
    doctor_id: str,
    current_user: User = Depends(get_current_user),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """Prompt shown before a doctor is deleted"""
    doctor_service.authorize(current_user, "delete")
    doctor = doctor_service.get_record(current_user, doctor_id)

    list_page = DoctorListPage(doctor_service, current_user)
    return list_page.request_delete(doctor)


@router.delete("/{doctor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_doctor(
    doctor_id: str,
    current_user: User = Depends(get_current_user),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """Delete doctor profile; deleting an unknown id is a no-op"""
    doctor_service.delete_record(current_user, doctor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
