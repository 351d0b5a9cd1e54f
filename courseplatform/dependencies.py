from typing import Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from courseplatform.repositories import (
    SqlCourseRepository,
    SqlEnrollmentRepository,
    SqlUserRepository,
)
from courseplatform.services.auth_service import AuthService
from courseplatform.services.course_service import CourseService
from courseplatform.services.enrollment_service import EnrollmentService
from courseplatform.services.user_service import UserService


# Dependency for getting the database session
def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_auth_service(request: Request, db: Session = Depends(get_db)) -> AuthService:
    return AuthService(
        SqlUserRepository(db),
        request.app.state.settings,
        request.app.state.crypt_context,
    )


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(SqlUserRepository(db))


def get_enrollment_service(db: Session = Depends(get_db)) -> EnrollmentService:
    return EnrollmentService(
        SqlEnrollmentRepository(db),
        SqlUserRepository(db),
        SqlCourseRepository(db),
    )


def get_course_service(
    db: Session = Depends(get_db),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> CourseService:
    return CourseService(SqlCourseRepository(db), enrollment_service)
