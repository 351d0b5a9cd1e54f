import pytest

from courseplatform.exceptions import ConflictError, ForbiddenError, NotFoundError
from courseplatform.models import Enrollment
from courseplatform.roles import EnrollmentRole


def test_update_user_changes_only_given_fields(user_service, make_user) -> None:
    user = make_user(name='Ada', email='ada@example.com')

    updated = user_service.update_user(user.id, {'name': 'Ada Lovelace'}, acting_user_id=user.id)

    assert updated.name == 'Ada Lovelace'
    assert updated.email == 'ada@example.com'


def test_update_user_email_in_use_is_conflict(user_service, make_user) -> None:
    ada = make_user(email='ada@example.com')
    make_user(email='bob@example.com')

    with pytest.raises(ConflictError):
        user_service.update_user(ada.id, {'email': 'bob@example.com'})

    assert user_service.get_user_by_id(ada.id).email == 'ada@example.com'


def test_update_user_keeping_own_email_is_allowed(user_service, make_user) -> None:
    ada = make_user(email='ada@example.com')

    updated = user_service.update_user(ada.id, {'email': 'ada@example.com', 'name': 'Ada'})

    assert updated.name == 'Ada'


def test_users_may_only_modify_themselves(user_service, make_user) -> None:
    ada = make_user()
    bob = make_user()

    with pytest.raises(ForbiddenError):
        user_service.update_user(ada.id, {'name': 'Hijacked'}, acting_user_id=bob.id)
    with pytest.raises(ForbiddenError):
        user_service.delete_user(ada.id, acting_user_id=bob.id)

    assert user_service.get_user_by_id(ada.id) is not None


def test_unknown_user_is_not_found(user_service) -> None:
    with pytest.raises(NotFoundError):
        user_service.update_user(999, {'name': 'x'})
    with pytest.raises(NotFoundError):
        user_service.delete_user(999)


def test_delete_user_removes_their_enrollments(
    db, user_service, enrollment_service, make_user, make_course
) -> None:
    ada = make_user()
    bob = make_user()
    course = make_course()
    enrollment_service.enroll(ada.id, course.id, EnrollmentRole.PROFESSOR)
    enrollment_service.enroll(bob.id, course.id, EnrollmentRole.STUDENT)

    user_service.delete_user(ada.id, acting_user_id=ada.id)

    assert user_service.get_user_by_id(ada.id) is None
    assert [e.user_id for e in db.query(Enrollment).all()] == [bob.id]


def test_lookups(user_service, make_user) -> None:
    ada = make_user(email='ada@example.com')
    make_user()

    assert user_service.get_user_by_email('ada@example.com').id == ada.id
    assert user_service.get_user_by_email('nobody@example.com') is None
    assert user_service.get_user_count() == 2
    assert len(user_service.get_all_users()) == 2
