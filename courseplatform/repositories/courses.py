from datetime import datetime, timezone
from typing import List, Optional, Protocol

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from courseplatform.models import Course, Enrollment
from courseplatform.roles import CourseLevel, EnrollmentRole


class CourseRepository(Protocol):
    def find_all(
        self,
        level: Optional[CourseLevel] = None,
        has_enrollments: Optional[bool] = None,
    ) -> List[Course]: ...

    def find_by_id(self, course_id: int) -> Optional[Course]: ...

    def create(self, title: str, description: str, level: CourseLevel) -> Course: ...

    def update(self, course: Course, data: dict) -> Course: ...

    def delete(self, course: Course) -> None: ...

    def count(self) -> int: ...

    def count_enrollments(
        self, course_id: int, role: Optional[EnrollmentRole] = None
    ) -> int: ...


class SqlCourseRepository:
    """CourseRepository backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Course).options(
            selectinload(Course.enrollments).selectinload(Enrollment.user)
        )

    def find_all(
        self,
        level: Optional[CourseLevel] = None,
        has_enrollments: Optional[bool] = None,
    ) -> List[Course]:
        query = self._query()
        if level is not None:
            query = query.filter(Course.level == level)
        if has_enrollments is not None:
            if has_enrollments:
                query = query.filter(Course.enrollments.any())
            else:
                query = query.filter(~Course.enrollments.any())
        return query.order_by(Course.created_at.desc(), Course.id.desc()).all()

    def find_by_id(self, course_id: int) -> Optional[Course]:
        return self._query().filter(Course.id == course_id).first()

    def create(self, title: str, description: str, level: CourseLevel) -> Course:
        course = Course(title=title, description=description, level=level)
        self.db.add(course)
        self.db.commit()
        self.db.refresh(course)
        return course

    def update(self, course: Course, data: dict) -> Course:
        for key, value in data.items():
            setattr(course, key, value)
        course.updated_at = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(course)
        return course

    def delete(self, course: Course) -> None:
        self.db.delete(course)
        self.db.commit()

    def count(self) -> int:
        return self.db.query(func.count(Course.id)).scalar()

    def count_enrollments(
        self, course_id: int, role: Optional[EnrollmentRole] = None
    ) -> int:
        query = self.db.query(func.count(Enrollment.id)).filter(
            Enrollment.course_id == course_id
        )
        if role is not None:
            query = query.filter(Enrollment.role == role)
        return query.scalar()
