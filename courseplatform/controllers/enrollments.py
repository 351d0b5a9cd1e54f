"""
Routes for enrolling users in courses and managing their course-scoped roles.
"""

from typing import List

from fastapi import APIRouter, Depends
from starlette import status

from courseplatform.dependencies import get_enrollment_service
from courseplatform.exceptions import NotFoundError
from courseplatform.models import User
from courseplatform.oauth2 import get_current_user_jwt
from courseplatform.schemas.enrollment import (
    EnrollmentCreate,
    EnrollmentResponse,
    EnrollmentRoleUpdate,
)
from courseplatform.services.enrollment_service import EnrollmentService

router = APIRouter(prefix="/enrollments", tags=["enrollments"])


@router.post("", response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
async def enroll_in_course(
    enrollment_request: EnrollmentCreate,
    current_user: User = Depends(get_current_user_jwt),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
):
    enrollment = enrollment_service.enroll(
        enrollment_request.user_id,
        enrollment_request.course_id,
        enrollment_request.role,
        acting_user_id=current_user.id,
    )
    return EnrollmentResponse.model_validate(enrollment)


@router.delete("/users/{user_id}/courses/{course_id}", response_model=bool)
async def unenroll_from_course(
    user_id: int,
    course_id: int,
    current_user: User = Depends(get_current_user_jwt),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
):
    """Remove a user's enrollment from a course"""
    return enrollment_service.unenroll(user_id, course_id, acting_user_id=current_user.id)


@router.patch("/{enrollment_id}/role", response_model=EnrollmentResponse)
async def update_enrollment_role(
    enrollment_id: int,
    role_update: EnrollmentRoleUpdate,
    current_user: User = Depends(get_current_user_jwt),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
):
    enrollment = enrollment_service.update_role(
        enrollment_id, role_update.role, acting_user_id=current_user.id
    )
    return EnrollmentResponse.model_validate(enrollment)


@router.get("/users/{user_id}", response_model=List[EnrollmentResponse])
async def get_user_enrollments(
    user_id: int,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
):
    """Get all enrollments of a user, newest first"""
    enrollments = enrollment_service.get_user_enrollments(user_id)
    return [EnrollmentResponse.model_validate(e) for e in enrollments]


@router.get("/courses/{course_id}", response_model=List[EnrollmentResponse])
async def get_course_enrollments(
    course_id: int,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
):
    """Get all enrollments in a course, newest first"""
    enrollments = enrollment_service.get_course_enrollments(course_id)
    return [EnrollmentResponse.model_validate(e) for e in enrollments]


@router.get("/{enrollment_id}", response_model=EnrollmentResponse)
async def get_enrollment(
    enrollment_id: int,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
):
    enrollment = enrollment_service.get_enrollment(enrollment_id)
    if not enrollment:
        raise NotFoundError("Enrollment not found")
    return EnrollmentResponse.model_validate(enrollment)
