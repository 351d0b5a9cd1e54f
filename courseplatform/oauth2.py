from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from courseplatform.dependencies import get_auth_service
from courseplatform.exceptions import UnauthorizedError
from courseplatform.models import User
from courseplatform.services.auth_service import AuthService

oauth2_bearer = OAuth2PasswordBearer(
    tokenUrl="auth/token",
    scheme_name="OAuth2",
    description="Enter your email as username and your password",
    auto_error=False,
)


async def get_optional_user(
    token: Optional[str] = Depends(oauth2_bearer),
    auth_service: AuthService = Depends(get_auth_service),
) -> Optional[User]:
    """Anonymous (None) when the token is missing or fails validation."""
    if not token:
        return None
    return auth_service.validate_token(token)


### Checking if the JWT Token of our user is correct ###
async def get_current_user_jwt(
    user: Optional[User] = Depends(get_optional_user),
) -> User:
    if user is None:
        raise UnauthorizedError("Could not validate credentials")
    return user
