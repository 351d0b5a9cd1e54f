import logging
from typing import List, Optional

from courseplatform.exceptions import CoursePlatformError, ForbiddenError, NotFoundError
from courseplatform.models import Course
from courseplatform.repositories import CourseRepository
from courseplatform.roles import CourseLevel, EnrollmentRole
from courseplatform.services.enrollment_service import EnrollmentService

logger = logging.getLogger(__name__)


class CourseService:
    def __init__(self, courses: CourseRepository, enrollment_service: EnrollmentService):
        self.courses = courses
        self.enrollment_service = enrollment_service

    def get_all_courses(
        self,
        level: Optional[CourseLevel] = None,
        has_enrollments: Optional[bool] = None,
    ) -> List[Course]:
        return self.courses.find_all(level=level, has_enrollments=has_enrollments)

    def get_course_by_id(self, course_id: int) -> Optional[Course]:
        return self.courses.find_by_id(course_id)

    def get_course_count(self) -> int:
        return self.courses.count()

    def create_course(
        self,
        title: str,
        description: str,
        level: CourseLevel,
        professor_id: Optional[int] = None,
    ) -> Course:
        course = self.courses.create(title=title, description=description, level=level)
        logger.info("Created course %s", course.id)
        if professor_id is not None:
            try:
                self.enrollment_service.enroll(professor_id, course.id, EnrollmentRole.PROFESSOR)
            except CoursePlatformError:
                # Every course keeps at least one professor
                logger.warning(
                    "Removing course %s, professor %s could not be enrolled",
                    course.id, professor_id,
                )
                self.courses.delete(course)
                raise
            logger.info("User %s is professor of new course %s", professor_id, course.id)
            course = self.courses.find_by_id(course.id)
        return course

    def update_course(
        self, course_id: int, data: dict, acting_user_id: Optional[int] = None
    ) -> Course:
        """
        Apply a partial update (title, description, level).

        Keys absent from ``data`` are left untouched. When ``acting_user_id``
        is given it must hold the PROFESSOR role in the course.
        """
        course = self._get_for_mutation(course_id, acting_user_id, "edit")
        course = self.courses.update(course, data)
        logger.info("Updated course %s fields=%s", course_id, sorted(data))
        return course

    def delete_course(self, course_id: int, acting_user_id: Optional[int] = None) -> None:
        course = self._get_for_mutation(course_id, acting_user_id, "delete")
        self.courses.delete(course)
        logger.info("Deleted course %s", course_id)

    def get_course_stats(self, course_id: int) -> dict:
        # Counted per call from live rows; enrollments may change between reads
        return {
            "enrollment_count": self.courses.count_enrollments(course_id),
            "student_count": self.courses.count_enrollments(
                course_id, EnrollmentRole.STUDENT
            ),
            "professor_count": self.courses.count_enrollments(
                course_id, EnrollmentRole.PROFESSOR
            ),
        }

    def validate_professor_access(self, course_id: int, user_id: int) -> bool:
        return self.enrollment_service.has_role(user_id, course_id, EnrollmentRole.PROFESSOR)

    def _get_for_mutation(
        self, course_id: int, acting_user_id: Optional[int], action: str
    ) -> Course:
        course = self.courses.find_by_id(course_id)
        if not course:
            raise NotFoundError("Course not found")
        if acting_user_id is not None and not self.validate_professor_access(
            course_id, acting_user_id
        ):
            logger.warning(
                "User %s denied %s on course %s", acting_user_id, action, course_id
            )
            raise ForbiddenError(f"Only professors can {action} courses")
        return course
