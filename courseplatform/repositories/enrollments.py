from typing import List, Optional, Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from courseplatform.exceptions import ConflictError, NotFoundError
from courseplatform.models import Enrollment
from courseplatform.roles import EnrollmentRole


class EnrollmentRepository(Protocol):
    def find_all(self) -> List[Enrollment]: ...

    def find_by_id(self, enrollment_id: int) -> Optional[Enrollment]: ...

    def find_by_user_and_course(
        self, user_id: int, course_id: int
    ) -> Optional[Enrollment]: ...

    def find_by_user_id(self, user_id: int) -> List[Enrollment]: ...

    def find_by_course_id(self, course_id: int) -> List[Enrollment]: ...

    def create(self, user_id: int, course_id: int, role: EnrollmentRole) -> Enrollment: ...

    def update_role(self, enrollment: Enrollment, role: EnrollmentRole) -> Enrollment: ...

    def delete(self, enrollment: Enrollment) -> None: ...


class SqlEnrollmentRepository:
    """EnrollmentRepository backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Enrollment).options(
            joinedload(Enrollment.user), joinedload(Enrollment.course)
        )

    def _newest_first(self, query):
        return query.order_by(Enrollment.enrolled_at.desc(), Enrollment.id.desc())

    def find_all(self) -> List[Enrollment]:
        return self._newest_first(self._query()).all()

    def find_by_id(self, enrollment_id: int) -> Optional[Enrollment]:
        return self._query().filter(Enrollment.id == enrollment_id).first()

    def find_by_user_and_course(
        self, user_id: int, course_id: int
    ) -> Optional[Enrollment]:
        return (
            self._query()
            .filter(Enrollment.user_id == user_id, Enrollment.course_id == course_id)
            .first()
        )

    def find_by_user_id(self, user_id: int) -> List[Enrollment]:
        query = self._query().filter(Enrollment.user_id == user_id)
        return self._newest_first(query).all()

    def find_by_course_id(self, course_id: int) -> List[Enrollment]:
        query = self._query().filter(Enrollment.course_id == course_id)
        return self._newest_first(query).all()

    def create(self, user_id: int, course_id: int, role: EnrollmentRole) -> Enrollment:
        enrollment = Enrollment(user_id=user_id, course_id=course_id, role=role)
        self.db.add(enrollment)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # _user_course_uc is the authoritative duplicate check under concurrency;
            # without a row for the pair the user or course foreign key failed
            self.db.rollback()
            pair = self.db.query(Enrollment.id).filter(
                Enrollment.user_id == user_id, Enrollment.course_id == course_id
            )
            if pair.first() is not None:
                raise ConflictError("User is already enrolled in this course") from exc
            raise NotFoundError("User or course not found") from exc
        self.db.refresh(enrollment)
        return enrollment

    def update_role(self, enrollment: Enrollment, role: EnrollmentRole) -> Enrollment:
        enrollment.role = role
        self.db.commit()
        self.db.refresh(enrollment)
        return enrollment

    def delete(self, enrollment: Enrollment) -> None:
        self.db.delete(enrollment)
        self.db.commit()
