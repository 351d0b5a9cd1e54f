from datetime import datetime, timedelta, timezone
from typing import Tuple

from jose import jwt
from passlib.context import CryptContext
from pydantic import EmailStr


def build_crypt_context(rounds: int = 12) -> CryptContext:
    """bcrypt context with a fixed work factor"""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


### Create a JWT token for user ###
def create_access_token(
    user_id: int,
    email: EmailStr,
    secret_key: str,
    algorithm: str,
    expires_delta: timedelta,
) -> Tuple[str, datetime]:
    expire = datetime.now(timezone.utc) + expires_delta
    encode = {
        "id": user_id,
        "email": email,
        "token_type": "access_token",
        "exp": expire,
    }
    return jwt.encode(encode, secret_key, algorithm=algorithm), expire


def decode_access_token(token: str, secret_key: str, algorithm: str) -> dict:
    """Raises jose.JWTError (ExpiredSignatureError included) on any failure."""
    return jwt.decode(token, secret_key, algorithms=[algorithm])
