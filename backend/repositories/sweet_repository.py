from decimal import Decimal
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.core.errors import NotFound
from backend.models.sweet import Sweet
from backend.models.user import utcnow


class SweetRepository:
    """Persistence and search for catalog records.

    Quantity changes are pushed down to the database as single UPDATE
    statements so concurrent requests never lose an update.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, name: str, category: str, price: Decimal, quantity: int) -> Sweet:
        sweet = Sweet(name=name, category=category, price=price, quantity=quantity)
        self.db.add(sweet)
        self.db.commit()
        self.db.refresh(sweet)
        return sweet

    def find_all(self) -> list[Sweet]:
        return self.db.query(Sweet).order_by(Sweet.created_at.desc()).all()

    def find_by_id(self, sweet_id: str) -> Sweet | None:
        return self.db.query(Sweet).filter(Sweet.id == sweet_id).first()

    def exists_by_id(self, sweet_id: str) -> bool:
        return self.db.query(Sweet.id).filter(Sweet.id == sweet_id).first() is not None

    def update(self, sweet_id: str, fields: dict[str, Any]) -> Sweet:
        sweet = self.find_by_id(sweet_id)
        if sweet is None:
            raise NotFound()

        for field_name, value in fields.items():
            setattr(sweet, field_name, value)

        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(sweet)
        return sweet

    def delete(self, sweet_id: str) -> None:
        deleted = self.db.query(Sweet).filter(Sweet.id == sweet_id).delete(synchronize_session=False)
        if not deleted:
            self.db.rollback()
            raise NotFound()
        self.db.commit()

    def search(
        self,
        name: str | None = None,
        category: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
    ) -> list[Sweet]:
        query = self.db.query(Sweet)

        if name:
            query = query.filter(Sweet.name.icontains(name, autoescape=True))
        # Exact match under the default binary collation, i.e. case-sensitive.
        if category:
            query = query.filter(Sweet.category == category)
        if min_price is not None:
            query = query.filter(Sweet.price >= min_price)
        if max_price is not None:
            query = query.filter(Sweet.price <= max_price)

        return query.order_by(Sweet.created_at.desc()).all()

    def mutate_quantity(self, sweet_id: str, delta: int) -> Sweet:
        updated = self._apply_quantity_update(
            self.db.query(Sweet).filter(Sweet.id == sweet_id),
            Sweet.quantity + delta,
        )
        if not updated:
            raise NotFound()
        return self._reload(sweet_id)

    def decrement_if_available(self, sweet_id: str, amount: int = 1) -> Sweet | None:
        """Take ``amount`` units in one statement, or return None if that would go below zero.

        None is also returned when the record does not exist; callers that need
        to tell the two apart re-read the record.
        """
        updated = self._apply_quantity_update(
            self.db.query(Sweet).filter(Sweet.id == sweet_id, Sweet.quantity >= amount),
            Sweet.quantity - amount,
        )
        if not updated:
            return None
        return self._reload(sweet_id)

    def _apply_quantity_update(self, query, quantity_expression) -> int:
        try:
            updated = query.update(
                {Sweet.quantity: quantity_expression, Sweet.updated_at: utcnow()},
                synchronize_session=False,
            )
        except SQLAlchemyError:
            self.db.rollback()
            raise

        if updated:
            self.db.commit()
        else:
            self.db.rollback()
        return updated

    def _reload(self, sweet_id: str) -> Sweet:
        sweet = self.find_by_id(sweet_id)
        if sweet is None:
            raise NotFound()
        self.db.refresh(sweet)
        return sweet
