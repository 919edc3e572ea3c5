"""
Order Models
"""
from sqlalchemy import Column, String, Numeric, Integer, ForeignKey, Text, JSON, Uuid
from sqlalchemy.orm import relationship
from crm.core import Base
from .base import UUIDMixin, TimestampMixin

class Order(Base, UUIDMixin, TimestampMixin):
    """Order Header"""
    __tablename__ = "customer_order"
    
    customer_id = Column(Uuid(as_uuid=True), ForeignKey("customer.id"), nullable=False, index=True)
    
    status = Column(String(50))
    remarks = Column(Text)
    mode_of_payment = Column(String(50))  # Cash, UPI, Card, ...
    
    # Amounts
    total_amount = Column(Numeric(12, 2), nullable=False)
    discount = Column(Numeric(12, 2))
    paid_amount = Column(Numeric(12, 2))
    due_amount = Column(Numeric(12, 2))
    
    # OrderItem ids linked to this order; order-item creation does not append here
    item_ids = Column(JSON, default=list, nullable=False)
    
    # Relationships
    customer = relationship("Customer", back_populates="orders")

class OrderItem(Base, UUIDMixin, TimestampMixin):
    """Order Item/Line"""
    __tablename__ = "order_item"
    
    # Plain reference: the parent order is not checked to exist
    order_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    
    item_name = Column(String(300), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    total = Column(Numeric(12, 2), nullable=False)
