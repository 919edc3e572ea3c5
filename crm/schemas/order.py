"""
Order Schemas
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from uuid import UUID
from decimal import Decimal

from .money import to_cents

class OrderDetails(BaseModel):
    status: Optional[str] = None
    remarks: Optional[str] = None
    mode_of_payment: Optional[str] = None
    total_amount: Decimal = Field(..., ge=0)
    discount: Optional[Decimal] = Field(None, ge=0)
    paid_amount: Optional[Decimal] = Field(None, ge=0)
    due_amount: Optional[Decimal] = Field(None, ge=0)

    @field_validator("total_amount", "discount", "paid_amount", "due_amount")
    @classmethod
    def round_to_cents(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return to_cents(v)

class OrderPlacement(BaseModel):
    phone: str
    name: Optional[str] = None
    email: Optional[str] = None
    order: OrderDetails

    @field_validator("email")
    @classmethod
    def blank_email_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

class OrderItemCreate(BaseModel):
    order_id: UUID
    item_name: str
    quantity: int
    price: Decimal
    total: Decimal

class CartLine(BaseModel):
    item_name: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    price: Decimal = Field(..., ge=0)

class Checkout(BaseModel):
    placement: OrderPlacement
    lines: List[CartLine] = []
