import logging
from typing import List, Optional

from courseplatform.exceptions import ConflictError, ForbiddenError, NotFoundError
from courseplatform.models import User
from courseplatform.repositories import UserRepository

logger = logging.getLogger(__name__)


def check_if_user_exists(users: UserRepository, email: str, exclude_user_id: int = None):
    if email:
        existing_email = users.find_by_email(email)
        if existing_email and existing_email.id != exclude_user_id:
            raise ConflictError("Email already in use")


class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    def get_all_users(self) -> List[User]:
        return self.users.find_all()

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.users.find_by_id(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.users.find_by_email(email)

    def get_user_count(self) -> int:
        return self.users.count()

    def update_user(
        self, user_id: int, data: dict, acting_user_id: Optional[int] = None
    ) -> User:
        """Apply a partial update (name and/or email) to a user's profile."""
        user = self._get_for_mutation(user_id, acting_user_id)
        if data.get("email") and data["email"] != user.email:
            check_if_user_exists(self.users, data["email"], exclude_user_id=user.id)

        user = self.users.update(user, data)
        logger.info("Updated user %s fields=%s", user.id, sorted(data))
        return user

    def delete_user(self, user_id: int, acting_user_id: Optional[int] = None) -> None:
        user = self._get_for_mutation(user_id, acting_user_id)
        self.users.delete(user)
        logger.info("Deleted user %s", user_id)

    def _get_for_mutation(self, user_id: int, acting_user_id: Optional[int]) -> User:
        user = self.users.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        if acting_user_id is not None and acting_user_id != user_id:
            logger.warning("User %s denied access to user %s", acting_user_id, user_id)
            raise ForbiddenError("Users can only modify their own account")
        return user
