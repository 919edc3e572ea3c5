"""
JSON representations of records (camelCase keys, `id` for the primary key)
"""
from datetime import timezone
from typing import Any, Dict, Optional

from crm.models import Customer, Item, Order, OrderItem

def _num(value) -> Optional[float]:
    return float(value) if value is not None else None

def _ts(value) -> Optional[str]:
    if not value:
        return None
    # SQLite hands back naive datetimes; they are stored in UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()

def customer_to_dict(customer: Customer, populate_orders: bool = False) -> Dict[str, Any]:
    return {
        "id": str(customer.id),
        "name": customer.name,
        "email": customer.email,
        "phone": customer.phone,
        "orders": [
            order_to_dict(o) if populate_orders else str(o.id)
            for o in customer.orders
        ],
        "totalAmountSpent": _num(customer.total_amount_spent),
        "dueAmount": _num(customer.due_amount),
        "advancedAmount": _num(customer.advanced_amount),
        "createdAt": _ts(customer.created_at),
        "updatedAt": _ts(customer.updated_at),
    }

def order_to_dict(order: Order) -> Dict[str, Any]:
    return {
        "id": str(order.id),
        "customer": str(order.customer_id) if order.customer_id else None,
        "items": [str(i) for i in (order.item_ids or [])],
        "status": order.status,
        "totalAmount": _num(order.total_amount),
        "discount": _num(order.discount),
        "remarks": order.remarks,
        "paidAmount": _num(order.paid_amount),
        "dueAmount": _num(order.due_amount),
        "modeOfPayment": order.mode_of_payment,
        "createdAt": _ts(order.created_at),
        "updatedAt": _ts(order.updated_at),
    }

def order_item_to_dict(item: OrderItem) -> Dict[str, Any]:
    return {
        "id": str(item.id),
        "order": str(item.order_id),
        "itemName": item.item_name,
        "quantity": item.quantity,
        "price": _num(item.price),
        "total": _num(item.total),
        "createdAt": _ts(item.created_at),
        "updatedAt": _ts(item.updated_at),
    }

def item_to_dict(item: Item) -> Dict[str, Any]:
    return {
        "id": str(item.id),
        "itemName": item.item_name,
        "itemPrice": _num(item.item_price),
        "itemInventory": item.item_inventory,
        "totalSold": item.total_sold,
        "createdAt": _ts(item.created_at),
        "updatedAt": _ts(item.updated_at),
    }
