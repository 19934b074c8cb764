"""Structured inputs shared by the services and the HTTP routes.

These models only check shape (types, required fields, non-empty text).
Business rules such as a positive price are enforced by the services so
that they raise the named errors from ``backend.core.errors``.
"""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, StrictInt, model_validator


class SweetCreate(BaseModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    price: Decimal
    quantity: StrictInt


class SweetUpdate(BaseModel):
    """Partial update: only the fields a caller actually sent are applied."""

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    price: Optional[Decimal] = None
    quantity: Optional[StrictInt] = None

    @model_validator(mode='after')
    def reject_explicit_nulls(self) -> 'SweetUpdate':
        for field_name in self.model_fields_set:
            if getattr(self, field_name) is None:
                raise ValueError(f'{field_name} cannot be null.')
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class SweetSearch(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
