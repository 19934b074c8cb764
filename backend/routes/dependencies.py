from fastapi import Depends
from sqlalchemy.orm import Session

from backend.database import get_db
from backend.repositories.sweet_repository import SweetRepository
from backend.repositories.user_repository import UserRepository
from backend.services.auth_service import AuthService
from backend.services.inventory_service import InventoryService
from backend.services.sweet_service import SweetService


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(UserRepository(db))


def get_sweet_service(db: Session = Depends(get_db)) -> SweetService:
    return SweetService(SweetRepository(db))


def get_inventory_service(db: Session = Depends(get_db)) -> InventoryService:
    return InventoryService(SweetRepository(db))
