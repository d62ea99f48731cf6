from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm

from app.api.deps import get_current_user
from app.api.v1.auth.schemas import LoginRequest, TokenResponse, UserResponse
from app.core.permissions import PermissionChecker, Permissions, get_role_permissions
from app.domain.auth.models import User
from app.domain.auth.service import AuthenticationService
from app.infrastructure.database import InMemoryDatabase, get_db

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _user_response(user: User) -> UserResponse:
    return UserResponse(
        **user.model_dump(exclude={"password_hash"}),
        permissions=get_role_permissions(user.role)
    )


def _login(auth_service: AuthenticationService, email: str, password: str) -> TokenResponse:
    user = auth_service.authenticate_user(email, password)
    return TokenResponse(
        access_token=auth_service.create_token(user),
        user=_user_response(user)
    )


@router.post("/login", response_model=TokenResponse, status_code=status.HTTP_200_OK)
async def login(
    login_data: LoginRequest,
    db: InMemoryDatabase = Depends(get_db)
):
    """Authenticate user and return an access token"""
    return _login(AuthenticationService(db), login_data.email, login_data.password)


@router.post("/token", response_model=TokenResponse, status_code=status.HTTP_200_OK)
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: InMemoryDatabase = Depends(get_db)
):
    """OAuth2 password flow used by the interactive docs; username is the email"""
    return _login(AuthenticationService(db), form_data.username, form_data.password)


@router.get("/me", response_model=UserResponse, status_code=status.HTTP_200_OK)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information"""
    PermissionChecker.ensure(current_user, [Permissions.USERS_READ_OWN], "view own profile")
    return _user_response(current_user)
