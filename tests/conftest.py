import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault('DATABASE_URL', 'sqlite:///:memory:')

from backend.auth import jwt_handler, passwords  # noqa: E402
from backend.database import Base, get_db  # noqa: E402
from backend.main import app  # noqa: E402
from backend.models.user import Role  # noqa: E402
from backend.repositories.sweet_repository import SweetRepository  # noqa: E402
from backend.repositories.user_repository import UserRepository  # noqa: E402


@pytest.fixture
def db_engine():
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user_repository(db) -> UserRepository:
    return UserRepository(db)


@pytest.fixture
def sweet_repository(db) -> SweetRepository:
    return SweetRepository(db)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _token_for(user_repository: UserRepository, email: str, role: Role) -> str:
    user = user_repository.create(
        email=email,
        hashed_password=passwords.hash_password('password123'),
        role=role,
    )
    return jwt_handler.create_access_token(user_id=user.id, role=user.role)


@pytest.fixture
def admin_headers(user_repository) -> dict:
    token = _token_for(user_repository, 'admin@sweetshop.com', Role.ADMIN)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def user_headers(user_repository) -> dict:
    token = _token_for(user_repository, 'user@sweetshop.com', Role.USER)
    return {'Authorization': f'Bearer {token}'}
