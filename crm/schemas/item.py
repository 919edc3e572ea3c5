"""
Inventory Item Schemas
"""
from pydantic import BaseModel, Field
from decimal import Decimal

class ItemCreate(BaseModel):
    item_name: str = Field(..., min_length=1)
    item_price: Decimal = Field(..., gt=0)
    item_inventory: int = Field(..., ge=0)
