"""
Web Router - HTML Page Routes
"""
from fastapi import APIRouter, Request, Depends
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session
from datetime import datetime
from uuid import UUID
import os

from crm.core import get_db, settings
from crm.services import CustomerService, ItemService, OrderService

web_router = APIRouter(tags=["Web"])

# Setup templates
templates_path = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=templates_path)

# Add datetime and app name to all templates
def get_template_context(**kwargs):
    return {"now": datetime.now, "app_name": settings.APP_NAME, **kwargs}

def _parse_uuid(value: str):
    try:
        return UUID(value)
    except ValueError:
        return None

@web_router.get("/")
async def dashboard(request: Request, db: Session = Depends(get_db)):
    """Dashboard - new order with cart"""
    return templates.TemplateResponse(request, "dashboard.html", get_template_context(
        title="New Order",
        known_customers={c.phone: c.name for c in CustomerService.get_customers(db)},
        items=ItemService.get_items(db)
    ))

@web_router.get("/customers")
async def customers_list(request: Request, db: Session = Depends(get_db)):
    """Customers List page"""
    return templates.TemplateResponse(request, "customers/list.html", get_template_context(
        title="Customers",
        customers=CustomerService.get_customers(db)
    ))

@web_router.get("/customers/add")
async def customers_add(request: Request):
    """Add Customer page"""
    return templates.TemplateResponse(request, "customers/add.html", get_template_context(
        title="Add Customer"
    ))

@web_router.get("/customers/{customer_id}")
async def customer_detail(request: Request, customer_id: str, db: Session = Depends(get_db)):
    """Customer Detail page with order history"""
    customer_uuid = _parse_uuid(customer_id)
    customer = CustomerService.get_customer_by_id(db, customer_uuid) if customer_uuid else None
    return templates.TemplateResponse(request, "customers/detail.html", get_template_context(
        title=customer.name if customer else "Customer not found",
        customer=customer
    ), status_code=200 if customer else 404)

@web_router.get("/inventory")
async def inventory_list(request: Request, db: Session = Depends(get_db)):
    """Inventory List page"""
    return templates.TemplateResponse(request, "inventory/list.html", get_template_context(
        title="Inventory",
        items=ItemService.get_items(db)
    ))

@web_router.get("/inventory/add")
async def inventory_add(request: Request):
    """Add Item page"""
    return templates.TemplateResponse(request, "inventory/add.html", get_template_context(
        title="Add Item"
    ))

@web_router.get("/orders")
async def orders_list(request: Request, db: Session = Depends(get_db)):
    """Orders List page"""
    return templates.TemplateResponse(request, "orders/list.html", get_template_context(
        title="Orders",
        orders=OrderService.get_orders(db)
    ))

@web_router.get("/orders/{order_id}")
async def order_detail(request: Request, order_id: str, db: Session = Depends(get_db)):
    """Order Detail page"""
    order_uuid = _parse_uuid(order_id)
    order = OrderService.get_order_by_id(db, order_uuid) if order_uuid else None
    lines = OrderService.get_order_items(db, order.id) if order else []
    return templates.TemplateResponse(request, "orders/detail.html", get_template_context(
        title="Order Detail" if order else "Order not found",
        order=order,
        lines=lines
    ), status_code=200 if order else 404)
