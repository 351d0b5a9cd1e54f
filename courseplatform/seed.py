"""Load idempotent demo users, courses and enrollments.

Usage:
    python -m courseplatform.seed
"""
import logging
from logging.config import dictConfig

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from courseplatform.config import LogConfig, config
from courseplatform.database import create_db_engine, create_session_factory, init_db
from courseplatform.repositories import (
    SqlCourseRepository,
    SqlEnrollmentRepository,
    SqlUserRepository,
)
from courseplatform.roles import CourseLevel, EnrollmentRole
from courseplatform.services.security import build_crypt_context

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

DEMO_USERS = [
    ("John Doe", "john.doe@example.com"),
    ("Jane Smith", "jane.smith@example.com"),
    ("Prof. Wilson", "prof.wilson@example.com"),
    ("Sarah Jones", "sarah.jones@example.com"),
    ("Mike Brown", "mike.brown@example.com"),
]

DEMO_COURSES = [
    (
        "Introduction to JavaScript",
        "Learn the fundamentals of JavaScript programming language. This course "
        "covers variables, functions, objects, and basic DOM manipulation.",
        CourseLevel.BEGINNER,
    ),
    (
        "React Fundamentals",
        "Master the basics of React including components, props, state, and hooks. "
        "Build your first interactive web applications.",
        CourseLevel.INTERMEDIATE,
    ),
    (
        "Advanced Node.js",
        "Deep dive into Node.js backend development with Express, databases, "
        "authentication, and deployment strategies.",
        CourseLevel.ADVANCED,
    ),
    (
        "CSS for Beginners",
        "Learn styling with CSS from scratch. Covers selectors, box model, flexbox, "
        "grid, and responsive design principles.",
        CourseLevel.BEGINNER,
    ),
    (
        "Python Data Science",
        "Introduction to data science with Python. Learn pandas, numpy, matplotlib, "
        "and basic machine learning concepts.",
        CourseLevel.INTERMEDIATE,
    ),
    (
        "TypeScript Masterclass",
        "Advanced TypeScript concepts including generics, decorators, advanced types, "
        "and integration with popular frameworks.",
        CourseLevel.ADVANCED,
    ),
]

# (user index, course index, role)
DEMO_ENROLLMENTS = [
    (0, 0, EnrollmentRole.STUDENT),
    (0, 1, EnrollmentRole.STUDENT),
    (1, 0, EnrollmentRole.STUDENT),
    (1, 4, EnrollmentRole.STUDENT),
    (2, 0, EnrollmentRole.PROFESSOR),
    (2, 2, EnrollmentRole.PROFESSOR),
    (3, 3, EnrollmentRole.STUDENT),
    (4, 4, EnrollmentRole.PROFESSOR),
    (4, 5, EnrollmentRole.PROFESSOR),
]


def seed_demo_data(db: Session, crypt_context: CryptContext) -> dict:
    """
    Create the demo data set if it is missing.

    Users are matched by email and courses by title, so running this twice
    leaves the store unchanged.

    Returns:
        Counts of rows created per entity
    """
    users_repo = SqlUserRepository(db)
    courses_repo = SqlCourseRepository(db)
    enrollments_repo = SqlEnrollmentRepository(db)
    created = {"users": 0, "courses": 0, "enrollments": 0}

    users = []
    for name, email in DEMO_USERS:
        user = users_repo.find_by_email(email)
        if user is None:
            user = users_repo.create(name, email, crypt_context.hash(DEMO_PASSWORD))
            created["users"] += 1
        users.append(user)

    existing_courses = {course.title: course for course in courses_repo.find_all()}
    courses = []
    for title, description, level in DEMO_COURSES:
        course = existing_courses.get(title)
        if course is None:
            course = courses_repo.create(title, description, level)
            created["courses"] += 1
        courses.append(course)

    for user_index, course_index, role in DEMO_ENROLLMENTS:
        user_id = users[user_index].id
        course_id = courses[course_index].id
        if enrollments_repo.find_by_user_and_course(user_id, course_id) is None:
            enrollments_repo.create(user_id, course_id, role)
            created["enrollments"] += 1

    logger.info(
        "Demo data seeded: %(users)s users, %(courses)s courses, %(enrollments)s enrollments",
        created,
    )
    return created


def main() -> None:
    dictConfig(LogConfig().model_dump())
    engine = create_db_engine(config)
    init_db(engine)
    db = create_session_factory(engine)()
    try:
        seed_demo_data(db, build_crypt_context(config.BCRYPT_ROUNDS))
    finally:
        db.close()


if __name__ == "__main__":
    main()
