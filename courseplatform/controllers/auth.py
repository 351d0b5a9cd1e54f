from fastapi import APIRouter, Depends, Form, status

from courseplatform.models import User
from courseplatform.oauth2 import get_current_user_jwt
from courseplatform.dependencies import get_auth_service
from courseplatform.schemas.auth import (
    AuthPayload,
    CourseAccessResponse,
    TokenResponse,
    UserLogin,
)
from courseplatform.schemas.user import CreateUserRequest, UserWithEnrollments
from courseplatform.services.access_hints import CourseAccessHints
from courseplatform.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


### ROUTE FOR REGISTRATION ###
@router.post("/register", response_model=AuthPayload, status_code=status.HTTP_201_CREATED)
async def register(
    create_user_request: CreateUserRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    payload = auth_service.register(
        name=create_user_request.name,
        email=create_user_request.email,
        password=create_user_request.password,
    )
    return AuthPayload.model_validate(payload, from_attributes=True)


### ROUTE FOR LOGIN ###
@router.post("/login", response_model=AuthPayload)
async def login(
    login_request: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    payload = auth_service.login(login_request.email, login_request.password)
    return AuthPayload.model_validate(payload, from_attributes=True)


@router.post("/token", response_model=TokenResponse)
async def login_for_access_token(
    username: str = Form(...),
    password: str = Form(...),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    OAuth2 password flow: send your email as username to get an access token.
    """
    payload = auth_service.login(username, password)
    return {"access_token": payload["token"], "token_type": "bearer"}


@router.get("/me", response_model=UserWithEnrollments)
async def get_info(current_user: User = Depends(get_current_user_jwt)):
    return UserWithEnrollments.model_validate(current_user)


@router.get("/me/courses/{course_id}/access", response_model=CourseAccessResponse)
async def get_course_access(
    course_id: int,
    current_user: User = Depends(get_current_user_jwt),
):
    """UI hints only; the course and enrollment routes enforce the real checks."""
    return CourseAccessHints(current_user).for_course(course_id)
