from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional

from app.api.deps import get_current_user, get_patient_service
from app.api.v1.patients.schemas import PatientDraft, PatientListResponse, PatientResponse
from app.core.config import settings
from app.core.exceptions import NotFoundError, handle_validation_error
from app.domain.auth.models import User
from app.domain.common.listing import ConfirmationPrompt, PageView, paginate
from app.domain.patients.listing import PatientListPage
from app.domain.patients.service import PatientService

router = APIRouter(prefix="/patients", tags=["Patients"])


@router.get("/", response_model=PatientListResponse, status_code=status.HTTP_200_OK)
async def get_patients(
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    current_user: User = Depends(get_current_user),
    patient_service: PatientService = Depends(get_patient_service)
):
    """Get patients with search and pagination"""
    patients = patient_service.list_records(current_user, search=search)
    items, info = paginate(patients, page, page_size)

    return PatientListResponse(
        items=[PatientResponse.model_validate(patient) for patient in items],
        total=info.total,
        page=info.page,
        limit=page_size,
        pages=info.pages
    )


@router.get("/page", response_model=PageView, status_code=status.HTTP_200_OK)
async def get_patients_page(
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    current_user: User = Depends(get_current_user),
    patient_service: PatientService = Depends(get_patient_service)
):
    """Render the patients table, or the restricted placeholder for other roles"""
    list_page = PatientListPage(patient_service, current_user, page_size=page_size)
    list_page.set_search(search)
    list_page.go_to_page(page)
    return list_page.render()


@router.post("/", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def create_patient(
    patient_data: PatientDraft,
    current_user: User = Depends(get_current_user),
    patient_service: PatientService = Depends(get_patient_service)
):
    """Create a new patient"""
    patient_service.authorize(current_user, "create")

    list_page = PatientListPage(patient_service, current_user)
    form = list_page.open_add()
    form.set_fields(patient_data.model_dump(exclude_unset=True))

    if not form.submit():
        raise handle_validation_error(form.errors, entity="patient")

    return PatientResponse.model_validate(list_page.last_saved)


@router.get("/{patient_id}", response_model=PatientResponse, status_code=status.HTTP_200_OK)
async def get_patient(
    patient_id: str,
    current_user: User = Depends(get_current_user),
    patient_service: PatientService = Depends(get_patient_service)
):
    """Get patient by ID"""
    return PatientResponse.model_validate(patient_service.get_record(current_user, patient_id))


@router.put("/{patient_id}", response_model=PatientResponse, status_code=status.HTTP_200_OK)
async def update_patient(
    patient_id: str,
    patient_data: PatientDraft,
    current_user: User = Depends(get_current_user),
    patient_service: PatientService = Depends(get_patient_service)
):
    """Update patient information"""
    patient_service.authorize(current_user, "update")
    patient = patient_service.get_record(current_user, patient_id)

    list_page = PatientListPage(patient_service, current_user)
    form = list_page.open_edit(patient)
    form.set_fields(patient_data.model_dump(exclude_unset=True))

    if not form.submit():
        raise handle_validation_error(form.errors, entity="patient")

    if list_page.last_saved is None:
        raise NotFoundError(message="Patient not found", details={"id": patient_id})

    return PatientResponse.model_validate(list_page.last_saved)


@router.get(
    "/{patient_id}/delete-confirmation",
    response_model=ConfirmationPrompt,
    status_code=status.HTTP_200_OK
)
async def get_patient_delete_confirmation(
    patient_id: str,
    current_user: User = Depends(get_current_user),
    patient_service: PatientService = Depends(get_patient_service)
):
    """Prompt shown before a patient is deleted"""
    patient_service.authorize(current_user, "delete")
    patient = patient_service.get_record(current_user, patient_id)

    list_page = PatientListPage(patient_service, current_user)
    return list_page.request_delete(patient)


@router.delete("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_patient(
    patient_id: str,
    current_user: User = Depends(get_current_user),
    patient_service: PatientService = Depends(get_patient_service)
):
    """Delete patient record; deleting an unknown id is a no-op"""
    patient_service.delete_record(current_user, patient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
