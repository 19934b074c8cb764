from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.core.errors import DuplicateKey, NotFound
from backend.models.user import Role, User


class UserRepository:
    """Persistence for user identities and roles."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, hashed_password: str, role: Role = Role.USER) -> User:
        user = User(email=email, hashed_password=hashed_password, role=role)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if not self.exists_by_email(email):
                raise
            raise DuplicateKey(f'User with email {email} already exists') from exc
        self.db.refresh(user)
        return user

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: str) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def exists_by_email(self, email: str) -> bool:
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def list_all(self) -> list[User]:
        return self.db.query(User).order_by(User.created_at.desc()).all()

    def delete(self, user_id: str) -> None:
        deleted = self.db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        if not deleted:
            self.db.rollback()
            raise NotFound('User not found')
        self.db.commit()
