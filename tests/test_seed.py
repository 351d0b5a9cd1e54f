from courseplatform.models import Course, Enrollment, User
from courseplatform.seed import DEMO_COURSES, DEMO_ENROLLMENTS, DEMO_PASSWORD, DEMO_USERS, seed_demo_data


def test_seed_creates_demo_data(db, crypt_context) -> None:
    created = seed_demo_data(db, crypt_context)

    assert created == {
        'users': len(DEMO_USERS),
        'courses': len(DEMO_COURSES),
        'enrollments': len(DEMO_ENROLLMENTS),
    }
    user = db.query(User).filter(User.email == 'prof.wilson@example.com').one()
    assert crypt_context.verify(DEMO_PASSWORD, user.hashed_password)


def test_seed_is_idempotent(db, crypt_context) -> None:
    seed_demo_data(db, crypt_context)

    created = seed_demo_data(db, crypt_context)

    assert created == {'users': 0, 'courses': 0, 'enrollments': 0}
    assert db.query(User).count() == len(DEMO_USERS)
    assert db.query(Course).count() == len(DEMO_COURSES)
    assert db.query(Enrollment).count() == len(DEMO_ENROLLMENTS)
