import logging
from decimal import Decimal

from backend.core.errors import InvalidPrice, InvalidQuantity, NotFound
from backend.models.sweet import Sweet
from backend.repositories.sweet_repository import SweetRepository
from backend.schemas import SweetCreate, SweetSearch, SweetUpdate

logger = logging.getLogger(__name__)

MAX_PRICE = Decimal('1e8')


def validate_price(price: Decimal | float) -> None:
    """Reject prices that are not positive or that ``Numeric(10, 2)`` cannot hold exactly."""
    if price is None:
        raise InvalidPrice()
    if not isinstance(price, Decimal):
        price = Decimal(str(price))
    if not price.is_finite() or price <= 0:
        raise InvalidPrice()
    if price.normalize().as_tuple().exponent < -2:
        raise InvalidPrice('Price must have at most 2 decimal places')
    if price >= MAX_PRICE:
        raise InvalidPrice('Price must be less than 100000000')


def validate_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
        raise InvalidQuantity()


class SweetService:
    """Catalog operations with price and quantity validation."""

    def __init__(self, sweets: SweetRepository):
        self.sweets = sweets

    def create_sweet(self, data: SweetCreate) -> Sweet:
        validate_price(data.price)
        validate_quantity(data.quantity)

        sweet = self.sweets.create(
            name=data.name,
            category=data.category,
            price=data.price,
            quantity=data.quantity,
        )
        logger.info('Created sweet %s (%s)', sweet.id, sweet.name)
        return sweet

    def get_all(self) -> list[Sweet]:
        return self.sweets.find_all()

    def get_by_id(self, sweet_id: str) -> Sweet:
        sweet = self.sweets.find_by_id(sweet_id)
        if sweet is None:
            raise NotFound()
        return sweet

    def search(self, criteria: SweetSearch) -> list[Sweet]:
        for bound in (criteria.min_price, criteria.max_price):
            if bound is not None and bound <= 0:
                raise InvalidPrice('Price bounds must be positive numbers')

        return self.sweets.search(
            name=criteria.name,
            category=criteria.category,
            min_price=criteria.min_price,
            max_price=criteria.max_price,
        )

    def update_sweet(self, sweet_id: str, data: SweetUpdate) -> Sweet:
        if not self.sweets.exists_by_id(sweet_id):
            raise NotFound()

        changes = data.changes()
        if 'price' in changes:
            validate_price(changes['price'])
        if 'quantity' in changes:
            validate_quantity(changes['quantity'])

        sweet = self.sweets.update(sweet_id, changes)
        logger.info('Updated sweet %s: %s', sweet_id, sorted(changes))
        return sweet

    def delete_sweet(self, sweet_id: str) -> None:
        if not self.sweets.exists_by_id(sweet_id):
            raise NotFound()

        self.sweets.delete(sweet_id)
        logger.info('Deleted sweet %s', sweet_id)
