import logging
from datetime import timedelta
from typing import Optional

from jose import JWTError
from passlib.context import CryptContext

from courseplatform.config import AuthSettings
from courseplatform.exceptions import ConflictError, UnauthorizedError
from courseplatform.models import User
from courseplatform.repositories import UserRepository
from courseplatform.services.security import create_access_token, decode_access_token

logger = logging.getLogger(__name__)


class AuthService:
    """Registration, login and bearer-token resolution."""

    def __init__(
        self,
        users: UserRepository,
        settings: AuthSettings,
        crypt_context: CryptContext,
    ):
        self.users = users
        self.settings = settings
        self.crypt_context = crypt_context

    def register(self, name: str, email: str, password: str) -> dict:
        if self.users.find_by_email(email):
            logger.warning("Registration rejected, email already in use: %s", email)
            raise ConflictError("User with this email already exists")

        user = self.users.create(
            name=name,
            email=email,
            hashed_password=self.crypt_context.hash(password),
        )
        logger.info("Registered user %s", user.id)
        return self._issue_token(user)

    def login(self, email: str, password: str) -> dict:
        user = self.users.find_by_email(email)
        if not user:
            raise UnauthorizedError("Incorrect email or password")
        if not self.crypt_context.verify(password, user.hashed_password):
            logger.warning("Failed login for user %s", user.id)
            raise UnauthorizedError("Incorrect email or password")
        return self._issue_token(user)

    def validate_token(self, token: str) -> Optional[User]:
        """Resolve a bearer token to its user, or None for any failure."""
        try:
            payload = decode_access_token(
                token, self.settings.SECRET_KEY, self.settings.ALGORITHM
            )
        except JWTError as exc:
            logger.debug("Token rejected: %s", exc)
            return None

        user_id = payload.get("id")
        if not isinstance(user_id, int):
            logger.debug("Token rejected: missing user id")
            return None
        user = self.users.find_by_id(user_id)
        if user is None:
            logger.debug("Token rejected: unknown user %s", user_id)
        return user

    def get_current_user(self, user_id: int) -> Optional[User]:
        return self.users.find_by_id(user_id)

    def _issue_token(self, user: User) -> dict:
        token, expires_at = create_access_token(
            user.id,
            user.email,
            self.settings.SECRET_KEY,
            self.settings.ALGORITHM,
            timedelta(days=self.settings.TOKEN_EXPIRE_DAYS),
        )
        return {"user": user, "token": token, "expires_at": expires_at}
