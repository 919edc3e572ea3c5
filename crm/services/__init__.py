# Services Package
from .customer_service import CustomerService
from .order_service import OrderService
from .item_service import ItemService

__all__ = [
    "CustomerService",
    "OrderService",
    "ItemService",
]
