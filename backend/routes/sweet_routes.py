from datetime import datetime
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel

from backend.auth.dependencies import get_current_user, require_admin
from backend.routes.dependencies import get_sweet_service
from backend.schemas import SweetCreate, SweetSearch, SweetUpdate
from backend.services.sweet_service import SweetService

router = APIRouter(tags=['sweets'])


class SweetResponse(BaseModel):
    id: str
    name: str
    category: str
    price: float
    quantity: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


@router.get('', response_model=list[SweetResponse], dependencies=[Depends(get_current_user)])
def list_sweets(sweet_service: SweetService = Depends(get_sweet_service)):
    return sweet_service.get_all()


@router.get('/search', response_model=list[SweetResponse], dependencies=[Depends(get_current_user)])
def search_sweets(
    name: Optional[str] = Query(default=None),
    category: Optional[str] = Query(default=None),
    min_price: Optional[Decimal] = Query(default=None, alias='minPrice'),
    max_price: Optional[Decimal] = Query(default=None, alias='maxPrice'),
    sweet_service: SweetService = Depends(get_sweet_service),
):
    criteria = SweetSearch(name=name, category=category, min_price=min_price, max_price=max_price)
    return sweet_service.search(criteria)


@router.get('/{sweet_id}', response_model=SweetResponse, dependencies=[Depends(get_current_user)])
def get_sweet(sweet_id: str, sweet_service: SweetService = Depends(get_sweet_service)):
    return sweet_service.get_by_id(sweet_id)


@router.post(
    '',
    response_model=SweetResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_sweet(data: SweetCreate, sweet_service: SweetService = Depends(get_sweet_service)):
    return sweet_service.create_sweet(data)


@router.put('/{sweet_id}', response_model=SweetResponse, dependencies=[Depends(require_admin)])
def update_sweet(
    sweet_id: str,
    data: SweetUpdate,
    sweet_service: SweetService = Depends(get_sweet_service),
):
    return sweet_service.update_sweet(sweet_id, data)


@router.delete('/{sweet_id}', status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
def delete_sweet(sweet_id: str, sweet_service: SweetService = Depends(get_sweet_service)):
    sweet_service.delete_sweet(sweet_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
