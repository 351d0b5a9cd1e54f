from datetime import datetime, timezone
from typing import List, Optional, Protocol

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from courseplatform.exceptions import ConflictError
from courseplatform.models import Enrollment, User


class UserRepository(Protocol):
    def find_all(self) -> List[User]: ...

    def find_by_id(self, user_id: int) -> Optional[User]: ...

    def find_by_email(self, email: str) -> Optional[User]: ...

    def create(self, name: str, email: str, hashed_password: str) -> User: ...

    def update(self, user: User, data: dict) -> User: ...

    def delete(self, user: User) -> None: ...

    def count(self) -> int: ...


class SqlUserRepository:
    """UserRepository backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(User).options(
            selectinload(User.enrollments).selectinload(Enrollment.course)
        )

    def find_all(self) -> List[User]:
        return self._query().order_by(User.created_at.desc(), User.id.desc()).all()

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self._query().filter(User.id == user_id).first()

    def find_by_email(self, email: str) -> Optional[User]:
        return self._query().filter(User.email == email).first()

    def create(self, name: str, email: str, hashed_password: str) -> User:
        user = User(name=name, email=email, hashed_password=hashed_password)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError("User with this email already exists") from exc
        self.db.refresh(user)
        return user

    def update(self, user: User, data: dict) -> User:
        for key, value in data.items():
            setattr(user, key, value)
        user.updated_at = datetime.now(timezone.utc)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError("Email already in use") from exc
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.commit()

    def count(self) -> int:
        return self.db.query(func.count(User.id)).scalar()
