"""
Customer Schemas
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from decimal import Decimal

from .money import to_cents
from .order import OrderDetails

class CustomerCreate(BaseModel):
    name: str
    phone: str
    email: Optional[str] = None
    
    # Optional order recorded together with the customer
    order: Optional[OrderDetails] = None
    
    # Seed totals for a new customer
    total_amount_spent: Optional[Decimal] = Field(None, ge=0)
    due_amount: Optional[Decimal] = Field(None, ge=0)
    advanced_amount: Optional[Decimal] = Field(None, ge=0)

    @field_validator("total_amount_spent", "due_amount", "advanced_amount")
    @classmethod
    def round_to_cents(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return to_cents(v)

    @field_validator("email")
    @classmethod
    def blank_email_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v
