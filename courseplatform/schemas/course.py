from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from courseplatform.roles import CourseLevel, EnrollmentRole


class CourseBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str
    level: CourseLevel


class CourseCreate(CourseBase):
    pass


class CourseUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    level: Optional[CourseLevel] = None


class CourseStats(BaseModel):
    enrollment_count: int
    student_count: int
    professor_count: int


class CourseMember(BaseModel):
    id: int
    user_id: int
    name: str
    role: EnrollmentRole
    enrolled_at: datetime


class CourseResponse(CourseStats):
    id: int
    title: str
    description: str
    level: CourseLevel
    created_at: datetime
    updated_at: datetime
    enrollments: List[CourseMember] = []

    model_config = ConfigDict(from_attributes=True)
