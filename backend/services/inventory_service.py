import logging

from backend.core.errors import InvalidQuantity, NotFound, OutOfStock
from backend.models.sweet import Sweet
from backend.repositories.sweet_repository import SweetRepository

logger = logging.getLogger(__name__)


class InventoryService:
    """Purchase and restock, the only paths that change quantity on hand."""

    def __init__(self, sweets: SweetRepository):
        self.sweets = sweets

    def purchase(self, sweet_id: str) -> Sweet:
        """Take one unit of a sweet.

        The stock check and the decrement are one conditional UPDATE, so two
        buyers racing for the last unit cannot both succeed.
        """
        sweet = self.sweets.decrement_if_available(sweet_id, amount=1)
        if sweet is not None:
            logger.info('Purchased sweet %s, %d left', sweet_id, sweet.quantity)
            return sweet

        if not self.sweets.exists_by_id(sweet_id):
            raise NotFound()
        raise OutOfStock()

    def restock(self, sweet_id: str, amount: int) -> Sweet:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidQuantity('Restock quantity must be a positive integer')

        if not self.sweets.exists_by_id(sweet_id):
            raise NotFound()

        sweet = self.sweets.mutate_quantity(sweet_id, amount)
        logger.info('Restocked sweet %s by %d to %d', sweet_id, amount, sweet.quantity)
        return sweet
