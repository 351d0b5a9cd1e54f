from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr

from courseplatform.roles import EnrollmentRole
from courseplatform.schemas.user import UserWithEnrollments


class UserLogin(BaseModel):
    """Schema for login request"""
    email: EmailStr
    password: str

    class Config:
        json_schema_extra = {
            "example": {
                "email": "user@example.com",
                "password": "yourpassword"
            }
        }


class AuthPayload(BaseModel):
    """Schema for register/login response"""
    user: UserWithEnrollments
    token: str
    token_type: str = "bearer"
    expires_at: datetime


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class CourseAccessResponse(BaseModel):
    course_id: int
    role: Optional[EnrollmentRole] = None
    is_enrolled: bool
    can_edit: bool
    can_delete: bool
    can_manage: bool
    can_enroll: bool
    can_unenroll: bool
    can_view_details: bool
