from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from backend.core import config
from backend.core.errors import ExpiredToken, InvalidToken
from backend.models.user import Role


@dataclass(frozen=True)
class TokenPayload:
    user_id: str
    role: Role


def create_access_token(user_id: str, role: Role, expires_minutes: int | None = None) -> str:
    expire_minutes = expires_minutes or config.JWT_EXPIRES_MINUTES
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "role": Role(role).value,
        "iat": now,
        "exp": now + timedelta(minutes=expire_minutes),
    }
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str, secret: str | None = None) -> TokenPayload:
    try:
        payload = jwt.decode(
            token,
            secret or config.JWT_SECRET_KEY,
            algorithms=[config.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise ExpiredToken() from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidToken() from exc

    try:
        role = Role(payload.get("role"))
    except ValueError as exc:
        raise InvalidToken("Invalid token role") from exc

    return TokenPayload(user_id=payload["sub"], role=role)
