# Pydantic Schemas Package
from .order import OrderDetails, OrderPlacement, OrderItemCreate, CartLine, Checkout
from .customer import CustomerCreate
from .item import ItemCreate

__all__ = [
    "OrderDetails", "OrderPlacement", "OrderItemCreate", "CartLine", "Checkout",
    "CustomerCreate",
    "ItemCreate",
]
