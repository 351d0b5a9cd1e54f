from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from courseplatform.exceptions import ConflictError, UnauthorizedError
from courseplatform.services.security import create_access_token, decode_access_token


def test_register_returns_token_that_resolves_to_new_user(auth_service) -> None:
    payload = auth_service.register('Ada', 'ada@example.com', 'pw1')

    user = auth_service.validate_token(payload['token'])

    assert user is not None
    assert user.id == payload['user'].id
    assert user.email == 'ada@example.com'


def test_register_stores_salted_hash_not_plaintext(auth_service, crypt_context) -> None:
    first = auth_service.register('Ada', 'ada@example.com', 'pw1')['user']
    second = auth_service.register('Bob', 'bob@example.com', 'pw1')['user']

    assert first.hashed_password != 'pw1'
    assert first.hashed_password != second.hashed_password
    assert crypt_context.verify('pw1', first.hashed_password)


def test_register_rejects_duplicate_email(auth_service, user_repo) -> None:
    auth_service.register('Ada', 'ada@example.com', 'pw1')

    with pytest.raises(ConflictError):
        auth_service.register('Other Ada', 'ada@example.com', 'pw2')

    assert user_repo.count() == 1


def test_register_maps_unique_violation_to_conflict(auth_service, user_repo, monkeypatch) -> None:
    auth_service.register('Ada', 'ada@example.com', 'pw1')
    # A concurrent registration that passed the lookup before the first insert
    monkeypatch.setattr(user_repo, 'find_by_email', lambda email: None)

    with pytest.raises(ConflictError):
        auth_service.register('Ada Again', 'ada@example.com', 'pw1')


def test_register_then_login_round_trip(auth_service) -> None:
    registered = auth_service.register('Ada', 'a@x.com', 'pw1')

    logged_in = auth_service.login('a@x.com', 'pw1')

    assert auth_service.validate_token(logged_in['token']).id == registered['user'].id


def test_login_with_wrong_password_is_unauthorized(auth_service) -> None:
    auth_service.register('Ada', 'a@x.com', 'pw1')

    with pytest.raises(UnauthorizedError):
        auth_service.login('a@x.com', 'wrong')


def test_login_with_unknown_email_is_unauthorized(auth_service) -> None:
    with pytest.raises(UnauthorizedError):
        auth_service.login('nobody@example.com', 'pw1')


def test_token_payload_and_seven_day_expiry(auth_service, settings) -> None:
    before = datetime.now(timezone.utc)
    payload = auth_service.register('Ada', 'ada@example.com', 'pw1')

    claims = decode_access_token(payload['token'], settings.SECRET_KEY, settings.ALGORITHM)

    assert claims['id'] == payload['user'].id
    assert claims['email'] == 'ada@example.com'
    assert timedelta(days=7) - timedelta(minutes=1) < payload['expires_at'] - before
    assert payload['expires_at'] - before <= timedelta(days=7, seconds=5)


@pytest.mark.parametrize('token', ['', 'garbage', 'a.b.c'])
def test_validate_token_fails_closed_on_malformed_token(auth_service, token: str) -> None:
    assert auth_service.validate_token(token) is None


def test_validate_token_rejects_expired_token(auth_service, make_user, settings) -> None:
    user = make_user()
    token, _ = create_access_token(
        user.id, user.email, settings.SECRET_KEY, settings.ALGORITHM, timedelta(seconds=-10)
    )

    assert auth_service.validate_token(token) is None


def test_validate_token_rejects_foreign_signature(auth_service, make_user, settings) -> None:
    user = make_user()
    token, _ = create_access_token(
        user.id, user.email, 'another-secret', settings.ALGORITHM, timedelta(days=1)
    )

    assert auth_service.validate_token(token) is None


def test_validate_token_rejects_unknown_user(auth_service, settings) -> None:
    token, _ = create_access_token(
        999, 'ghost@example.com', settings.SECRET_KEY, settings.ALGORITHM, timedelta(days=1)
    )

    assert auth_service.validate_token(token) is None


def test_validate_token_rejects_token_without_user_id(auth_service, settings) -> None:
    token = jwt.encode(
        {'email': 'ada@example.com', 'exp': datetime.now(timezone.utc) + timedelta(days=1)},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )

    assert auth_service.validate_token(token) is None


def test_get_current_user_looks_up_by_id(auth_service) -> None:
    user = auth_service.register('Ada', 'ada@example.com', 'pw1')['user']

    assert auth_service.get_current_user(user.id).email == 'ada@example.com'
    assert auth_service.get_current_user(999) is None
