"""
Advisory role checks for UI gating.

These mirror the server-side guards in ``CourseService`` and
``EnrollmentService`` so a client can hide controls the server would reject.
They read only the user's already-loaded enrollments and are never used to
authorize anything; enforcement always goes through ``EnrollmentService.has_role``.
"""
from typing import Iterable, List, Optional

from courseplatform.models import User
from courseplatform.roles import EnrollmentRole


class CourseAccessHints:
    def __init__(self, user: Optional[User]):
        self.user = user

    @property
    def _enrollments(self) -> List:
        if self.user is None:
            return []
        return list(self.user.enrollments)

    def role_in_course(self, course_id: int) -> Optional[EnrollmentRole]:
        for enrollment in self._enrollments:
            if enrollment.course_id == course_id:
                return enrollment.role
        return None

    def has_role(self, course_id: int, role: EnrollmentRole) -> bool:
        return self.role_in_course(course_id) == role

    def is_enrolled(self, course_id: int) -> bool:
        return self.role_in_course(course_id) is not None

    def is_professor(self) -> bool:
        """Professor in at least one course."""
        return any(e.role == EnrollmentRole.PROFESSOR for e in self._enrollments)

    def is_student(self) -> bool:
        return any(e.role == EnrollmentRole.STUDENT for e in self._enrollments)

    def can_create_course(self) -> bool:
        return self.user is not None

    def can_edit_course(self, course_id: int) -> bool:
        return self.has_role(course_id, EnrollmentRole.PROFESSOR)

    def can_delete_course(self, course_id: int) -> bool:
        return self.has_role(course_id, EnrollmentRole.PROFESSOR)

    def can_manage_course(self, course_id: int) -> bool:
        return self.has_role(course_id, EnrollmentRole.PROFESSOR)

    def can_enroll(self, course_id: int) -> bool:
        return self.user is not None and not self.is_enrolled(course_id)

    def can_unenroll(self, course_id: int) -> bool:
        return self.user is not None and self.is_enrolled(course_id)

    def can_view_course_details(self, course_id: int) -> bool:
        return self.is_enrolled(course_id)

    def has_permission(self, resource: str, action: str, context: Optional[dict] = None) -> bool:
        if self.user is None:
            return False
        context = context or {}
        course_id = context.get("course_id")

        if resource == "course":
            if action == "create":
                return self.can_create_course()
            if action == "read":
                return True
            if action in ("update", "delete", "manage"):
                return course_id is not None and self.can_manage_course(course_id)
            return False

        if resource == "enrollment":
            if course_id is None:
                return False
            if action == "enroll":
                return self.can_enroll(course_id)
            if action == "unenroll":
                return self.can_unenroll(course_id)
            if action == "manage":
                return self.can_manage_course(course_id)
            if action == "view":
                return self.is_enrolled(course_id)
            return False

        if resource == "user":
            if action == "read":
                return True
            if action in ("update", "delete"):
                return context.get("user_id") == self.user.id
            return False

        return False

    def check_all(self, permissions: Iterable[tuple]) -> bool:
        return all(self.has_permission(*permission) for permission in permissions)

    def check_any(self, permissions: Iterable[tuple]) -> bool:
        return any(self.has_permission(*permission) for permission in permissions)

    def for_course(self, course_id: int) -> dict:
        role = self.role_in_course(course_id)
        return {
            "course_id": course_id,
            "role": role,
            "is_enrolled": role is not None,
            "can_edit": self.can_edit_course(course_id),
            "can_delete": self.can_delete_course(course_id),
            "can_manage": self.can_manage_course(course_id),
            "can_enroll": self.can_enroll(course_id),
            "can_unenroll": self.can_unenroll(course_id),
            "can_view_details": self.can_view_course_details(course_id),
        }
