"""
Inventory Item Model
"""
from sqlalchemy import Column, String, Numeric, Integer
from crm.core import Base
from .base import UUIDMixin, TimestampMixin

class Item(Base, UUIDMixin, TimestampMixin):
    """Catalog / inventory entry"""
    __tablename__ = "item"
    
    item_name = Column(String(300), nullable=False, index=True)
    item_price = Column(Numeric(12, 2), nullable=False)
    item_inventory = Column(Integer, nullable=False)
    total_sold = Column(Integer, default=0, nullable=False)  # Not updated by order flows
