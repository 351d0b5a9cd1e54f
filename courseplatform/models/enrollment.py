from datetime import datetime

import sqlalchemy
from sqlalchemy import Enum, ForeignKey, Integer, TIMESTAMP, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from courseplatform.database import Base
from courseplatform.roles import EnrollmentRole


class Enrollment(Base):
    __tablename__ = "enrollments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    course_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role: Mapped[EnrollmentRole] = mapped_column(
        Enum(EnrollmentRole, name="enrollment_role"), nullable=False
    )
    enrolled_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    )

    user = relationship("User", back_populates="enrollments")
    course = relationship("Course", back_populates="enrollments")

    ### One role per user per course ###
    __table_args__ = (sqlalchemy.UniqueConstraint('user_id', 'course_id', name='_user_course_uc'),)
