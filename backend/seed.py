"""Populate the database with demo accounts and a sample catalog.

Usage:
    python -m backend.seed
"""
import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from backend.auth import passwords
from backend.database import Base, SessionLocal, engine
from backend.models.user import Role
from backend.repositories.sweet_repository import SweetRepository
from backend.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

DEMO_USERS = [
    ('admin@sweetshop.com', 'admin123', Role.ADMIN),
    ('user@sweetshop.com', 'user1234', Role.USER),
]

SAMPLE_SWEETS = [
    ('Milk Chocolate Bar', 'chocolate', Decimal('2.50'), 100),
    ('Dark Chocolate Truffle', 'chocolate', Decimal('3.50'), 50),
    ('Strawberry Gummy Bears', 'gummy', Decimal('1.50'), 200),
    ('Sour Worms', 'gummy', Decimal('1.80'), 150),
    ('Peppermint Candy', 'hard candy', Decimal('1.00'), 300),
    ('Caramel Chews', 'caramel', Decimal('2.00'), 120),
    ('Lollipops Assorted', 'lollipop', Decimal('0.80'), 250),
]


def seed(db: Session) -> None:
    users = UserRepository(db)
    for email, password, role in DEMO_USERS:
        if users.exists_by_email(email):
            continue
        users.create(email=email, hashed_password=passwords.hash_password(password), role=role)
        logger.info('Created %s user %s', role.value, email)

    sweets = SweetRepository(db)
    if sweets.find_all():
        logger.info('Catalog already populated, skipping sample sweets')
        return
    for name, category, price, quantity in SAMPLE_SWEETS:
        sweets.create(name=name, category=category, price=price, quantity=quantity)
    logger.info('Created %d sample sweets', len(SAMPLE_SWEETS))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()


if __name__ == '__main__':
    main()
