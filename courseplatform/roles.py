import enum


class EnrollmentRole(str, enum.Enum):
    """Course-scoped role held through an enrollment row."""

    STUDENT = "STUDENT"
    PROFESSOR = "PROFESSOR"


class CourseLevel(str, enum.Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
