from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from starlette import status

from courseplatform.dependencies import get_course_service
from courseplatform.exceptions import NotFoundError
from courseplatform.models import Course, User
from courseplatform.oauth2 import get_current_user_jwt
from courseplatform.roles import CourseLevel
from courseplatform.schemas.course import (
    CourseCreate,
    CourseResponse,
    CourseStats,
    CourseUpdate,
)
from courseplatform.services.course_service import CourseService

router = APIRouter(prefix="/courses", tags=["courses"])


def to_course_response(course: Course, course_service: CourseService) -> CourseResponse:
    course_dict = course.to_dict()
    course_dict.update(course_service.get_course_stats(course.id))
    course_dict["enrollments"] = [
        {
            "id": enrollment.id,
            "user_id": enrollment.user_id,
            "name": enrollment.user.name,
            "role": enrollment.role,
            "enrolled_at": enrollment.enrolled_at,
        }
        for enrollment in course.enrollments
    ]
    return CourseResponse.model_validate(course_dict)


@router.get("", response_model=List[CourseResponse])
async def get_all_courses(
    level: Optional[CourseLevel] = Query(default=None),
    has_enrollments: Optional[bool] = Query(default=None),
    course_service: CourseService = Depends(get_course_service),
):
    courses = course_service.get_all_courses(level=level, has_enrollments=has_enrollments)
    return [to_course_response(course, course_service) for course in courses]


@router.get("/count", response_model=int)
async def get_course_count(course_service: CourseService = Depends(get_course_service)):
    return course_service.get_course_count()


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(
    create_course_request: CourseCreate,
    current_user: User = Depends(get_current_user_jwt),
    course_service: CourseService = Depends(get_course_service),
):
    course = course_service.create_course(
        **create_course_request.model_dump(),
        professor_id=current_user.id,  ### creator becomes the first professor
    )
    return to_course_response(course, course_service)


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course_by_id(
    course_id: int, course_service: CourseService = Depends(get_course_service)
):
    course = course_service.get_course_by_id(course_id)
    if not course:
        raise NotFoundError("Course not found")
    return to_course_response(course, course_service)


@router.get("/{course_id}/stats", response_model=CourseStats)
async def get_course_stats(
    course_id: int, course_service: CourseService = Depends(get_course_service)
):
    if not course_service.get_course_by_id(course_id):
        raise NotFoundError("Course not found")
    return course_service.get_course_stats(course_id)


@router.patch("/{course_id}", response_model=CourseResponse)
async def update_course(
    course_id: int,
    update_course_request: CourseUpdate,
    current_user: User = Depends(get_current_user_jwt),
    course_service: CourseService = Depends(get_course_service),
):
    update_data = update_course_request.model_dump(exclude_unset=True, exclude_none=True)
    course = course_service.update_course(
        course_id, update_data, acting_user_id=current_user.id
    )
    return to_course_response(course, course_service)


@router.delete("/{course_id}", response_model=bool)
async def delete_course(
    course_id: int,
    current_user: User = Depends(get_current_user_jwt),
    course_service: CourseService = Depends(get_course_service),
):
    course_service.delete_course(course_id, acting_user_id=current_user.id)
    return True
