from typing import List, Optional

from app.domain.auth.models import User
from app.infrastructure.database import InMemoryDatabase


class UserRepository:
    """Repository for login accounts"""

    collection_name = "users"

    def __init__(self, db: InMemoryDatabase):
        self.db = db
        self.users: List[User] = db.collection(self.collection_name)

    def create(self, user: User) -> User:
        self.users.append(user)
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        return next((user for user in self.users if user.id == user_id), None)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email, ignoring case"""
        email = email.lower()
        return next((user for user in self.users if user.email.lower() == email), None)
