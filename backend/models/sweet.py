"""Sweet model definitions."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Numeric, String
from backend.database import Base
from backend.models.user import new_id, utcnow


class Sweet(Base):
    """Represents a catalog item and its quantity on hand."""
    __tablename__ = "sweets"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_sweets_price_positive"),
        CheckConstraint("quantity >= 0", name="ck_sweets_quantity_non_negative"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Sweet {self.name} x{self.quantity}>"
