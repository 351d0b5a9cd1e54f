import os

os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('BCRYPT_ROUNDS', '4')

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from courseplatform.config import AppSettings  # noqa: E402
from courseplatform.database import create_db_engine, create_session_factory, init_db  # noqa: E402
from courseplatform.main import create_app  # noqa: E402
from courseplatform.repositories import (  # noqa: E402
    SqlCourseRepository,
    SqlEnrollmentRepository,
    SqlUserRepository,
)
from courseplatform.roles import CourseLevel  # noqa: E402
from courseplatform.services.auth_service import AuthService  # noqa: E402
from courseplatform.services.course_service import CourseService  # noqa: E402
from courseplatform.services.enrollment_service import EnrollmentService  # noqa: E402
from courseplatform.services.security import build_crypt_context  # noqa: E402
from courseplatform.services.user_service import UserService  # noqa: E402


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        DATABASE_URL='sqlite://',
        SECRET_KEY='test-secret',
        BCRYPT_ROUNDS=4,
        SEED_DEMO_DATA=False,
    )


@pytest.fixture
def crypt_context(settings):
    return build_crypt_context(settings.BCRYPT_ROUNDS)


@pytest.fixture
def db(settings):
    engine = create_db_engine(settings)
    init_db(engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def user_repo(db) -> SqlUserRepository:
    return SqlUserRepository(db)


@pytest.fixture
def course_repo(db) -> SqlCourseRepository:
    return SqlCourseRepository(db)


@pytest.fixture
def enrollment_repo(db) -> SqlEnrollmentRepository:
    return SqlEnrollmentRepository(db)


@pytest.fixture
def auth_service(user_repo, settings, crypt_context) -> AuthService:
    return AuthService(user_repo, settings, crypt_context)


@pytest.fixture
def user_service(user_repo) -> UserService:
    return UserService(user_repo)


@pytest.fixture
def enrollment_service(enrollment_repo, user_repo, course_repo) -> EnrollmentService:
    return EnrollmentService(enrollment_repo, user_repo, course_repo)


@pytest.fixture
def course_service(course_repo, enrollment_service) -> CourseService:
    return CourseService(course_repo, enrollment_service)


@pytest.fixture
def make_user(user_repo):
    counter = {'n': 0}

    def _make_user(name: str = None, email: str = None):
        counter['n'] += 1
        name = name or f'User {counter["n"]}'
        email = email or f'user{counter["n"]}@example.com'
        return user_repo.create(name=name, email=email, hashed_password='not-a-real-hash')

    return _make_user


@pytest.fixture
def make_course(course_repo):
    def _make_course(
        title: str = 'Intro to Python',
        description: str = 'Basics of the language.',
        level: CourseLevel = CourseLevel.BEGINNER,
    ):
        return course_repo.create(title=title, description=description, level=level)

    return _make_course


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
