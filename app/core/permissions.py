from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List
from loguru import logger

from app.core.exceptions import AuthorizationError
from app.domain.auth.models import User, UserRole


class Permissions:
    """Permission constants for the hospital administration system"""

    # User management
    USERS_READ_OWN = "users:read:own"

    # Doctor management
    DOCTORS_CREATE = "doctors:create"
    DOCTORS_READ = "doctors:read"
    DOCTORS_UPDATE = "doctors:update"
    DOCTORS_DELETE = "doctors:delete"

    # Patient management
    PATIENTS_CREATE = "patients:create"
    PATIENTS_READ = "patients:read"
    PATIENTS_UPDATE = "patients:update"
    PATIENTS_DELETE = "patients:delete"

    # System
    SYSTEM_ADMIN = "system:admin"


ROLE_PERMISSIONS: Dict[UserRole, List[str]] = {
    UserRole.ADMIN: [
        Permissions.SYSTEM_ADMIN,
        Permissions.USERS_READ_OWN,
        Permissions.DOCTORS_CREATE,
        Permissions.DOCTORS_READ,
        Permissions.DOCTORS_UPDATE,
        Permissions.DOCTORS_DELETE,
        Permissions.PATIENTS_CREATE,
        Permissions.PATIENTS_READ,
        Permissions.PATIENTS_UPDATE,
        Permissions.PATIENTS_DELETE,
    ],
    UserRole.DOCTOR: [
        Permissions.USERS_READ_OWN,
        Permissions.DOCTORS_READ,
        Permissions.PATIENTS_CREATE,
        Permissions.PATIENTS_READ,
        Permissions.PATIENTS_UPDATE,
        Permissions.PATIENTS_DELETE,
    ],
    UserRole.NURSE: [Permissions.USERS_READ_OWN],
    UserRole.RECEPTIONIST: [Permissions.USERS_READ_OWN],
    UserRole.PATIENT: [Permissions.USERS_READ_OWN],
}


def get_role_permissions(role: UserRole) -> List[str]:
    """Permissions granted to a role"""
    return list(ROLE_PERMISSIONS.get(role, []))


def has_any_permission(user_permissions: Iterable[str], required_permissions: List[str]) -> bool:
    user_permissions = set(user_permissions)
    if Permissions.SYSTEM_ADMIN in user_permissions:
        return True
    return any(perm in user_permissions for perm in required_permissions)


class PermissionChecker:
    """Authorization checks enforced at the service boundary"""

    @staticmethod
    def allows(user: User, required_permissions: List[str]) -> bool:
        return has_any_permission(get_role_permissions(user.role), required_permissions)

    @staticmethod
    def ensure(user: User, required_permissions: List[str], action: str) -> None:
        """Raise AuthorizationError unless the user holds one of the permissions"""
        if PermissionChecker.allows(user, required_permissions):
            return

        logger.warning(f"User {user.email} ({user.role.value}) denied: {action}")
        raise AuthorizationError(
            message=f"Insufficient permissions to {action}",
            details={"role": user.role.value},
            required_permissions=required_permissions
        )


ROLE_LABELS = {
    UserRole.ADMIN: "administrators",
    UserRole.DOCTOR: "doctors",
    UserRole.NURSE: "nurses",
    UserRole.RECEPTIONIST: "receptionists",
    UserRole.PATIENT: "patients",
}


@dataclass(frozen=True)
class VisibilityGate:
    """
    Decides what a list page renders for a role.

    This only shapes the view; the services still check permissions on
    every call.
    """
    viewer_roles: FrozenSet[UserRole]
    manager_roles: FrozenSet[UserRole]

    def can_view(self, role: UserRole) -> bool:
        return role in self.viewer_roles

    def can_manage(self, role: UserRole) -> bool:
        return role in self.manager_roles

    @property
    def restricted_message(self) -> str:
        labels = [ROLE_LABELS[role] for role in UserRole if role in self.viewer_roles]
        if len(labels) > 1:
            audience = ", ".join(labels[:-1]) + " and " + labels[-1]
        else:
            audience = "".join(labels) or "nobody"
        return f"Only {audience} can view this page."


PATIENTS_PAGE_GATE = VisibilityGate(
    viewer_roles=frozenset({UserRole.ADMIN, UserRole.DOCTOR}),
    manager_roles=frozenset({UserRole.ADMIN, UserRole.DOCTOR}),
)

DOCTORS_PAGE_GATE = VisibilityGate(
    viewer_roles=frozenset({UserRole.ADMIN, UserRole.DOCTOR}),
    manager_roles=frozenset({UserRole.ADMIN}),
)
