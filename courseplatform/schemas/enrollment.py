from datetime import datetime

from pydantic import BaseModel, ConfigDict

from courseplatform.roles import CourseLevel, EnrollmentRole


class EnrollmentCreate(BaseModel):
    user_id: int
    course_id: int
    role: EnrollmentRole = EnrollmentRole.STUDENT


class EnrollmentRoleUpdate(BaseModel):
    role: EnrollmentRole


class EnrolledUser(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class EnrolledCourse(BaseModel):
    id: int
    title: str
    level: CourseLevel

    model_config = ConfigDict(from_attributes=True)


class EnrollmentResponse(BaseModel):
    id: int
    role: EnrollmentRole
    enrolled_at: datetime
    user: EnrolledUser
    course: EnrolledCourse

    model_config = ConfigDict(from_attributes=True)
