from fastapi import APIRouter, Depends
from pydantic import BaseModel, StrictInt

from backend.auth.dependencies import get_current_user, require_admin
from backend.routes.dependencies import get_inventory_service
from backend.routes.sweet_routes import SweetResponse
from backend.services.inventory_service import InventoryService

router = APIRouter(tags=['inventory'])


class RestockRequest(BaseModel):
    quantity: StrictInt


@router.post('/{sweet_id}/purchase', response_model=SweetResponse, dependencies=[Depends(get_current_user)])
def purchase_sweet(sweet_id: str, inventory_service: InventoryService = Depends(get_inventory_service)):
    return inventory_service.purchase(sweet_id)


@router.post('/{sweet_id}/restock', response_model=SweetResponse, dependencies=[Depends(require_admin)])
def restock_sweet(
    sweet_id: str,
    data: RestockRequest,
    inventory_service: InventoryService = Depends(get_inventory_service),
):
    return inventory_service.restock(sweet_id, data.quantity)
