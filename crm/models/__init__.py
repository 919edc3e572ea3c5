from .base import TimestampMixin, UUIDMixin
from .customer import Customer
from .item import Item
from .order import Order, OrderItem

__all__ = [
    # Base
    "TimestampMixin", "UUIDMixin",
    # Customer
    "Customer",
    # Inventory
    "Item",
    # Order
    "Order", "OrderItem",
]
