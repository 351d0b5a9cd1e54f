from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from courseplatform.roles import CourseLevel, EnrollmentRole


class CreateUserRequest(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)

    @field_validator("password")
    def validate_password(cls, v):
        if not v.strip():
            raise ValueError("Password must not be blank")
        # bcrypt only looks at the first 72 bytes
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes long")
        return v


class UpdateUserRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    email: Optional[EmailStr] = None


class UserCourse(BaseModel):
    id: int
    title: str
    level: CourseLevel

    model_config = ConfigDict(from_attributes=True)


class UserEnrollment(BaseModel):
    id: int
    course_id: int
    role: EnrollmentRole
    enrolled_at: datetime
    course: UserCourse

    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    id: int
    name: str
    email: EmailStr
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserWithEnrollments(UserResponse):
    enrollments: List[UserEnrollment] = []
