from sqlalchemy import Column, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from courseplatform.models.basemodel import BaseModel
from courseplatform.roles import CourseLevel


class Course(BaseModel):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, index=True, autoincrement=True
    )
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    level = Column(Enum(CourseLevel, name="course_level"), nullable=False)

    # enrollment/student/professor counts are derived from these rows per request
    enrollments = relationship(
        "Enrollment",
        back_populates="course",
        cascade="all, delete-orphan",
        order_by="Enrollment.enrolled_at.desc()",
    )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "level": self.level,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
