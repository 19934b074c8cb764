import logging
import re
from dataclasses import dataclass

from backend.auth import jwt_handler, passwords
from backend.core import config
from backend.core.errors import DuplicateKey, EmailTaken, InvalidCredentials, InvalidEmail, WeakPassword
from backend.models.user import Role, User
from backend.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


@dataclass
class LoginResult:
    token: str
    user: User


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


class AuthService:
    """Registers users and exchanges credentials for session tokens."""

    def __init__(self, users: UserRepository, token_expires_minutes: int | None = None):
        self.users = users
        self.token_expires_minutes = token_expires_minutes

    def register(self, email: str, password: str) -> User:
        if not is_valid_email(email):
            raise InvalidEmail()

        if len(password) < config.MIN_PASSWORD_LENGTH:
            raise WeakPassword(f'Password must be at least {config.MIN_PASSWORD_LENGTH} characters long')

        if self.users.exists_by_email(email):
            raise EmailTaken()

        hashed_password = passwords.hash_password(password)
        try:
            user = self.users.create(email=email, hashed_password=hashed_password, role=Role.USER)
        except DuplicateKey as exc:
            # Lost a race with a concurrent registration for the same email.
            raise EmailTaken() from exc

        logger.info('Registered user %s', user.id)
        return user

    def login(self, email: str, password: str) -> LoginResult:
        user = self.users.find_by_email(email)
        if user is None:
            passwords.dummy_verify()
            logger.warning('Failed login attempt')
            raise InvalidCredentials()

        if not passwords.verify_password(password, user.hashed_password):
            logger.warning('Failed login attempt')
            raise InvalidCredentials()

        token = jwt_handler.create_access_token(
            user_id=user.id,
            role=user.role,
            expires_minutes=self.token_expires_minutes,
        )
        return LoginResult(token=token, user=user)
