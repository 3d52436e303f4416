"""Local authentication: the login form creates the user, no password."""

import logging
import time
from typing import Optional

from adaptlearn.schemas.user_schema import LoginRequest, User, UserUpdate
from adaptlearn.services.data_service import DataService

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, data_service: DataService):
        self.data_service = data_service

    def current_user(self) -> Optional[User]:
        return self.data_service.get_current_user()

    def login(self, payload: LoginRequest) -> User:
        user = User(
            **payload.model_dump(),
            id=f"user-{int(time.time() * 1000)}",
            progress=[],
        )
        self.data_service.save_user(user)
        self.data_service.set_current_user(user)
        logger.info("Utilisateur %s connecté.", user.id)
        return user

    def logout(self) -> None:
        self.data_service.clear_current_user()

    def update_user(self, updates: UserUpdate) -> Optional[User]:
        """Merge the provided fields into the current user's profile."""
        user = self.current_user()
        if user is None:
            return None

        updated = user.model_copy(update=updates.model_dump(exclude_none=True))
        self.data_service.save_user(updated)
        self.data_service.set_current_user(updated)
        return updated
