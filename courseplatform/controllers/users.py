from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import EmailStr
from starlette import status

from courseplatform.dependencies import get_user_service
from courseplatform.exceptions import NotFoundError
from courseplatform.models import User
from courseplatform.oauth2 import get_current_user_jwt
from courseplatform.schemas.user import UpdateUserRequest, UserWithEnrollments
from courseplatform.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserWithEnrollments], status_code=status.HTTP_200_OK)
async def get_all_users(user_service: UserService = Depends(get_user_service)):
    users = user_service.get_all_users()
    return [UserWithEnrollments.model_validate(user) for user in users]


@router.get("/count", response_model=int)
async def get_user_count(user_service: UserService = Depends(get_user_service)):
    return user_service.get_user_count()


@router.get("/by-email", response_model=UserWithEnrollments)
async def get_user_by_email(
    email: EmailStr = Query(...),
    user_service: UserService = Depends(get_user_service),
):
    user = user_service.get_user_by_email(email)
    if not user:
        raise NotFoundError("User not found")
    return UserWithEnrollments.model_validate(user)


@router.get("/{user_id}", response_model=UserWithEnrollments)
async def get_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    user = user_service.get_user_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    return UserWithEnrollments.model_validate(user)


@router.patch("/{user_id}", response_model=UserWithEnrollments)
async def update_user(
    user_id: int,
    update_user_request: UpdateUserRequest,
    current_user: User = Depends(get_current_user_jwt),
    user_service: UserService = Depends(get_user_service),
):
    update_data = update_user_request.model_dump(exclude_unset=True, exclude_none=True)
    user = user_service.update_user(user_id, update_data, acting_user_id=current_user.id)
    return UserWithEnrollments.model_validate(user)


@router.delete("/{user_id}", response_model=bool)
async def delete_user(
    user_id: int,
    current_user: User = Depends(get_current_user_jwt),
    user_service: UserService = Depends(get_user_service),
):
    user_service.delete_user(user_id, acting_user_id=current_user.id)
    return True
