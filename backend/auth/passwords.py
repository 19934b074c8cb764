from passlib.context import CryptContext
from passlib.hash import bcrypt

from backend.core import config


def build_password_context(rounds: int | None = None) -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=max(rounds or config.BCRYPT_ROUNDS, config.MIN_BCRYPT_ROUNDS),
    )


pwd_context = build_password_context()


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    return pwd_context.verify(password, hashed_password)


def dummy_verify() -> None:
    """Spend the same time as a real verification when there is no stored hash."""
    pwd_context.dummy_verify()


def hash_cost(hashed_password: str) -> int:
    """Return the bcrypt work factor recorded in a stored hash."""
    return bcrypt.from_string(hashed_password).rounds
