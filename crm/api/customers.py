"""
Customer API - add and look up customers
"""
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID
import logging

from crm.core import get_db
from crm.schemas.customer import CustomerCreate
from crm.services import CustomerService
from .common import error_response, input_error, server_error, parse_order_details
from .serializers import customer_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customer", tags=["Customers"])


@router.post("/add-customer", status_code=201)
async def add_customer(data: dict, db: Session = Depends(get_db)):
    """Find-or-create a customer by phone, optionally recording an order"""
    name = data.get("name")
    phone = data.get("phone")
    if not name or not phone:
        return error_response(400, "Name and phone are required.")
    
    try:
        customer_data = CustomerCreate(
            name=name,
            phone=phone,
            email=data.get("email"),
            order=parse_order_details(data["order"]) if data.get("order") else None,
            total_amount_spent=data.get("totalAmountSpent"),
            due_amount=data.get("dueAmount"),
            advanced_amount=data.get("advancedAmount")
        )
        customer, order, created = CustomerService.add_customer(db, customer_data)
    except ValueError as e:
        db.rollback()
        return input_error(e)
    except Exception as e:
        return server_error(db, e)
    
    return {
        "message": "Customer added successfully" if created else "Customer updated successfully",
        "customer": customer_to_dict(customer)
    }


@router.get("/get-all-customer")
async def get_all_customers(db: Session = Depends(get_db)):
    customers = CustomerService.get_customers(db)
    logger.debug(f"Listing {len(customers)} customers")
    
    if not customers:
        return error_response(404, "No customers found")
    
    return {
        "message": "All customers retrieved successfully",
        "customers": [customer_to_dict(c) for c in customers]
    }


@router.post("/get-customer-by-id")
async def get_customer_by_id(data: dict, db: Session = Depends(get_db)):
    customer_id = data.get("id")
    if not customer_id:
        return error_response(400, "Customer ID is required")
    
    try:
        customer = CustomerService.get_customer_by_id(db, UUID(str(customer_id)))
    except Exception as e:
        return server_error(db, e, "Error retrieving customer")
    
    if not customer:
        return error_response(404, "Customer not found with the provided ID")
    
    return {"message": "Customer retrieved successfully", "customer": customer_to_dict(customer)}


@router.api_route("/get-customer", methods=["GET", "POST"])
async def get_customer_by_phone(data: Optional[dict] = Body(None), db: Session = Depends(get_db)):
    phone = (data or {}).get("phone")
    if not phone:
        return error_response(400, "Phone number is required")
    
    customer = CustomerService.get_customer_by_phone(db, phone)
    logger.debug(f"Lookup by phone {phone}: {'found' if customer else 'missing'}")
    
    if not customer:
        return error_response(404, "Customer not found with the provided phone number")
    
    return {"message": "Customer retrieved successfully", "customer": customer_to_dict(customer)}
