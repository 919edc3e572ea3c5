"""
Customer Models
"""
from sqlalchemy import Column, String, Numeric
from sqlalchemy.orm import relationship
from crm.core import Base
from .base import UUIDMixin, TimestampMixin

class Customer(Base, UUIDMixin, TimestampMixin):
    """Customer Account - identified by phone"""
    __tablename__ = "customer"
    
    name = Column(String(200), nullable=False)
    email = Column(String(200), unique=True)
    phone = Column(String(20), unique=True, nullable=False, index=True)
    
    # Running totals
    total_amount_spent = Column(Numeric(12, 2), default=0, nullable=False)
    due_amount = Column(Numeric(12, 2), default=0, nullable=False)
    advanced_amount = Column(Numeric(12, 2), default=0, nullable=False)
    
    # Relationships (append-only, oldest first)
    orders = relationship("Order", back_populates="customer", order_by="Order.created_at")
