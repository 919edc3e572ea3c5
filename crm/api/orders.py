"""
Order API - order placement, order lines and order lookups
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID
import logging

from crm.core import get_db
from crm.schemas.order import OrderPlacement, OrderItemCreate, CartLine, Checkout
from crm.services import OrderService
from .common import error_response, input_error, server_error, parse_order_details
from .serializers import customer_to_dict, order_to_dict, order_item_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/order", tags=["Orders"])


def _placement(data: dict) -> OrderPlacement:
    return OrderPlacement(
        name=data.get("name"),
        email=data.get("email"),
        phone=data.get("phone"),
        order=parse_order_details(data.get("order"))
    )


@router.post("/add-order", status_code=201)
async def add_order(data: dict, db: Session = Depends(get_db)):
    """Find-or-create the customer by phone and record a new order for them"""
    if not data.get("phone") or not data.get("order"):
        return error_response(400, "Phone and order details are required.")
    
    try:
        order, customer = OrderService.place_order(db, _placement(data))
    except ValueError as e:
        db.rollback()
        return input_error(e)
    except Exception as e:
        return server_error(db, e)
    
    return {
        "message": "Order added successfully",
        "order": order_to_dict(order),
        "customer": customer_to_dict(customer)
    }


@router.post("/add-orderitem", status_code=201)
async def add_order_item(data: dict, db: Session = Depends(get_db)):
    required = ("order", "itemName", "quantity", "price", "total")
    if not all(data.get(field) for field in required):
        return error_response(400, "All fields are required: order, itemName, quantity, price, total.")
    
    try:
        item_data = OrderItemCreate(
            order_id=data.get("order"),
            item_name=data.get("itemName"),
            quantity=data.get("quantity"),
            price=data.get("price"),
            total=data.get("total")
        )
        item = OrderService.add_order_item(db, item_data)
    except ValueError as e:
        db.rollback()
        return input_error(e)
    except Exception as e:
        return server_error(db, e)
    
    return {"message": "Order item added successfully", "item": order_item_to_dict(item)}


@router.post("/checkout", status_code=201)
async def checkout(data: dict, db: Session = Depends(get_db)):
    """Place an order together with its cart lines"""
    if not data.get("phone") or not data.get("order"):
        return error_response(400, "Phone and order details are required.")

    lines = data.get("lines") or []
    if not isinstance(lines, list) or not all(isinstance(line, dict) for line in lines):
        return error_response(400, "Cart lines must be a list of objects.")

    try:
        checkout_data = Checkout(
            placement=_placement(data),
            lines=[
                CartLine(
                    item_name=line.get("itemName"),
                    quantity=line.get("quantity"),
                    price=line.get("price")
                )
                for line in lines
            ]
        )
        order, customer, items = OrderService.checkout(db, checkout_data)
    except ValueError as e:
        db.rollback()
        return input_error(e)
    except Exception as e:
        return server_error(db, e)
    
    return {
        "message": "Order placed successfully",
        "order": order_to_dict(order),
        "customer": customer_to_dict(customer),
        "items": [order_item_to_dict(i) for i in items]
    }


@router.get("/get-all-orders")
async def get_all_orders(db: Session = Depends(get_db)):
    orders = OrderService.get_orders(db)
    logger.debug(f"Listing {len(orders)} orders")
    
    if not orders:
        return error_response(404, "No orders found")
    
    return {
        "message": "All orders retrieved successfully",
        "orders": [order_to_dict(o) for o in orders]
    }


@router.post("/get-customer-order")
async def get_customer_orders(data: dict, db: Session = Depends(get_db)):
    phone = data.get("phone")
    if not phone:
        return error_response(400, "Phone number is required")
    
    customer = OrderService.get_customer_orders(db, phone)
    if not customer:
        return error_response(404, "Customer not found with the provided phone number")
    
    customer_data = customer_to_dict(customer, populate_orders=True)
    return {
        "message": "Customer orders retrieved successfully",
        "orders": customer_data["orders"],
        "customer": customer_data
    }


@router.get("/get-order-by-id")
async def get_order_by_id(id: Optional[str] = Query(None), db: Session = Depends(get_db)):
    if not id:
        return error_response(400, "Order ID is required")
    
    try:
        order = OrderService.get_order_by_id(db, UUID(id))
    except Exception as e:
        return server_error(db, e, "Error fetching order")
    
    if not order:
        return error_response(404, "Order not found")
    
    return {"message": "Order retrieved successfully", "order": order_to_dict(order)}
