from typing import Optional
from loguru import logger

from app.core.exceptions import AuthenticationError, UserError
from app.core.permissions import get_role_permissions
from app.core.security import create_access_token, verify_password, verify_token
from app.domain.auth.models import User
from app.domain.auth.repository import UserRepository
from app.infrastructure.database import InMemoryDatabase


class AuthenticationService:
    """Service layer for authentication operations"""

    def __init__(self, db: InMemoryDatabase):
        self.db = db
        self.user_repo = UserRepository(db)

    def authenticate_user(self, email: str, password: str) -> User:
        """Check credentials and return the matching active user"""
        user = self.user_repo.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            raise AuthenticationError(message="Invalid email or password")

        if not user.is_active:
            raise UserError(message="Inactive user", error_code="INACTIVE_USER")

        logger.info(f"User {user.email} logged in")
        return user

    def create_token(self, user: User) -> str:
        return create_access_token(
            subject=user.id,
            data={
                "role": user.role.value,
                "permissions": get_role_permissions(user.role),
            }
        )

    def get_user_from_token(self, token: str) -> User:
        """Resolve the user an access token was issued to"""
        payload = verify_token(token, "access")
        if not payload:
            raise AuthenticationError(message="Invalid or expired token")

        user: Optional[User] = self.user_repo.get_by_id(payload.get("sub", ""))
        if not user:
            raise AuthenticationError(message="User not found")
        if not user.is_active:
            raise UserError(message="Inactive user", error_code="INACTIVE_USER")
        return user
