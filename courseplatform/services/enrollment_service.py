"""
Enrollment rules: one enrollment per (user, course), role changes only
through update_role, and has_role as the single course-scoped permission
check used across the platform.
"""
import logging
from typing import List, Optional

from courseplatform.exceptions import ForbiddenError, NotFoundError, ConflictError
from courseplatform.models import Enrollment
from courseplatform.repositories import (
    CourseRepository,
    EnrollmentRepository,
    UserRepository,
)
from courseplatform.roles import EnrollmentRole

logger = logging.getLogger(__name__)


class EnrollmentService:
    def __init__(
        self,
        enrollments: EnrollmentRepository,
        users: UserRepository,
        courses: CourseRepository,
    ):
        self.enrollments = enrollments
        self.users = users
        self.courses = courses

    def has_role(self, user_id: int, course_id: int, role: EnrollmentRole) -> bool:
        enrollment = self.enrollments.find_by_user_and_course(user_id, course_id)
        return enrollment is not None and enrollment.role == role

    def is_user_professor(self, user_id: int, course_id: int) -> bool:
        return self.has_role(user_id, course_id, EnrollmentRole.PROFESSOR)

    def is_user_student(self, user_id: int, course_id: int) -> bool:
        return self.has_role(user_id, course_id, EnrollmentRole.STUDENT)

    def check_user_enrollment(self, user_id: int, course_id: int) -> Optional[Enrollment]:
        return self.enrollments.find_by_user_and_course(user_id, course_id)

    def get_all_enrollments(self) -> List[Enrollment]:
        return self.enrollments.find_all()

    def get_enrollment(self, enrollment_id: int) -> Optional[Enrollment]:
        return self.enrollments.find_by_id(enrollment_id)

    def get_user_enrollments(self, user_id: int) -> List[Enrollment]:
        if not self.users.find_by_id(user_id):
            raise NotFoundError("User not found")
        return self.enrollments.find_by_user_id(user_id)

    def get_course_enrollments(self, course_id: int) -> List[Enrollment]:
        if not self.courses.find_by_id(course_id):
            raise NotFoundError("Course not found")
        return self.enrollments.find_by_course_id(course_id)

    def enroll(
        self,
        user_id: int,
        course_id: int,
        role: EnrollmentRole,
        acting_user_id: Optional[int] = None,
    ) -> Enrollment:
        """
        Create the enrollment for (user_id, course_id) with the given role.

        An acting user may enroll themself as a student; enrolling anyone
        else, or as a professor, requires the acting user to be a professor
        of the course. The unique constraint on the pair settles races: the
        losing insert surfaces as ConflictError from the repository.
        """
        if not self.users.find_by_id(user_id):
            raise NotFoundError("User not found")
        if not self.courses.find_by_id(course_id):
            raise NotFoundError("Course not found")

        if acting_user_id is not None:
            self_enrolling = acting_user_id == user_id and role == EnrollmentRole.STUDENT
            if not self_enrolling and not self.is_user_professor(acting_user_id, course_id):
                logger.warning(
                    "User %s denied enrolling user %s in course %s as %s",
                    acting_user_id, user_id, course_id, role.value,
                )
                raise ForbiddenError("Only professors can manage enrollments for this course")

        if self.enrollments.find_by_user_and_course(user_id, course_id):
            raise ConflictError("User is already enrolled in this course")

        enrollment = self.enrollments.create(user_id=user_id, course_id=course_id, role=role)
        logger.info(
            "Enrolled user %s in course %s as %s", user_id, course_id, role.value
        )
        return enrollment

    def unenroll(
        self, user_id: int, course_id: int, acting_user_id: Optional[int] = None
    ) -> bool:
        enrollment = self.enrollments.find_by_user_and_course(user_id, course_id)
        if not enrollment:
            raise NotFoundError("Enrollment not found")

        if (
            acting_user_id is not None
            and acting_user_id != user_id
            and not self.is_user_professor(acting_user_id, course_id)
        ):
            logger.warning(
                "User %s denied unenrolling user %s from course %s",
                acting_user_id, user_id, course_id,
            )
            raise ForbiddenError("Only professors can manage enrollments for this course")

        self.enrollments.delete(enrollment)
        logger.info("Unenrolled user %s from course %s", user_id, course_id)
        return True

    def update_role(
        self,
        enrollment_id: int,
        new_role: EnrollmentRole,
        acting_user_id: Optional[int] = None,
    ) -> Enrollment:
        # (user_id, course_id) is unchanged, so uniqueness needs no re-check
        enrollment = self.enrollments.find_by_id(enrollment_id)
        if not enrollment:
            raise NotFoundError("Enrollment not found")

        if acting_user_id is not None and not self.is_user_professor(
            acting_user_id, enrollment.course_id
        ):
            logger.warning(
                "User %s denied changing role of enrollment %s", acting_user_id, enrollment_id
            )
            raise ForbiddenError("Only professors can change enrollment roles")

        enrollment = self.enrollments.update_role(enrollment, new_role)
        logger.info("Enrollment %s role set to %s", enrollment_id, new_role.value)
        return enrollment
