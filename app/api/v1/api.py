from fastapi import APIRouter
from app.api.v1.auth import routes as auth
from app.api.v1.doctors import routes as doctors
from app.api.v1.patients import routes as patients
from app.core.exceptions import ErrorResponse, ValidationErrorResponse

# Error bodies produced by the custom exception handler
error_responses = {
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    422: {"model": ValidationErrorResponse},
}

api_router = APIRouter()
api_router.include_router(auth.router, responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}})
api_router.include_router(doctors.router, responses=error_responses)
api_router.include_router(patients.router, responses=error_responses)
