import pytest

from backend.auth import jwt_handler, passwords
from backend.core.errors import EmailTaken, InvalidCredentials, InvalidEmail, WeakPassword
from backend.models.user import Role
from backend.services.auth_service import AuthService, is_valid_email


@pytest.fixture
def auth_service(user_repository) -> AuthService:
    return AuthService(user_repository)


def test_register_persists_user_with_default_role(auth_service, user_repository) -> None:
    user = auth_service.register('shopper@example.com', 'password123')

    stored = user_repository.find_by_email('shopper@example.com')
    assert stored.id == user.id
    assert stored.role is Role.USER
    assert stored.hashed_password != 'password123'
    assert passwords.hash_cost(stored.hashed_password) >= 10


@pytest.mark.parametrize('email', ['plain', 'no-at.example.com', 'a@b', 'with space@example.com', '@example.com'])
def test_register_rejects_malformed_email(auth_service, user_repository, email: str) -> None:
    with pytest.raises(InvalidEmail):
        auth_service.register(email, 'password123')

    assert user_repository.list_all() == []


def test_is_valid_email_accepts_usual_addresses() -> None:
    assert is_valid_email('first.last@shop.example.com')


def test_register_rejects_short_password(auth_service, user_repository) -> None:
    with pytest.raises(WeakPassword):
        auth_service.register('shopper@example.com', 'short')

    assert user_repository.find_by_email('shopper@example.com') is None


def test_register_accepts_eight_character_password(auth_service) -> None:
    assert auth_service.register('shopper@example.com', '12345678').email == 'shopper@example.com'


def test_register_rejects_taken_email(auth_service) -> None:
    auth_service.register('shopper@example.com', 'password123')

    with pytest.raises(EmailTaken):
        auth_service.register('shopper@example.com', 'password456')


def test_login_issues_token_with_user_id_and_role(auth_service) -> None:
    user = auth_service.register('shopper@example.com', 'password123')

    result = auth_service.login('shopper@example.com', 'password123')

    payload = jwt_handler.decode_access_token(result.token)
    assert result.user.id == user.id
    assert payload.user_id == user.id
    assert payload.role is Role.USER


def test_login_failures_are_indistinguishable(auth_service) -> None:
    auth_service.register('shopper@example.com', 'password123')

    with pytest.raises(InvalidCredentials) as wrong_password:
        auth_service.login('shopper@example.com', 'wrong-password')
    with pytest.raises(InvalidCredentials) as unknown_email:
        auth_service.login('nobody@example.com', 'password123')

    assert type(wrong_password.value) is type(unknown_email.value)
    assert str(wrong_password.value) == str(unknown_email.value) == 'Invalid credentials'
