"""
Customer Service - Business Logic for Customers
"""
from sqlalchemy.orm import Session
from typing import List, Optional, Tuple
from uuid import UUID
from decimal import Decimal
import logging

from crm.models import Customer, Order
from crm.schemas.customer import CustomerCreate
from crm.schemas.order import OrderDetails

logger = logging.getLogger(__name__)

class CustomerService:
    """Customer business logic"""
    
    @staticmethod
    def get_customers(db: Session) -> List[Customer]:
        """Get all customers, oldest first"""
        return db.query(Customer).order_by(Customer.created_at).all()
    
    @staticmethod
    def get_customer_by_id(db: Session, customer_id: UUID) -> Optional[Customer]:
        """Get customer by ID"""
        return db.query(Customer).filter(Customer.id == customer_id).first()
    
    @staticmethod
    def get_customer_by_phone(db: Session, phone: str) -> Optional[Customer]:
        """Get customer by phone (exact match, no normalization)"""
        return db.query(Customer).filter(Customer.phone == phone).first()
    
    @staticmethod
    def new_customer(
        db: Session,
        name: Optional[str],
        phone: str,
        email: Optional[str] = None,
        total_amount_spent: Decimal = Decimal("0"),
        due_amount: Decimal = Decimal("0"),
        advanced_amount: Decimal = Decimal("0")
    ) -> Customer:
        """Stage a new customer in the session and flush it to get an id"""
        if not name:
            raise ValueError("Name and phone are required.")
        
        customer = Customer(
            name=name,
            email=email,
            phone=phone,
            total_amount_spent=total_amount_spent,
            due_amount=due_amount,
            advanced_amount=advanced_amount
        )
        db.add(customer)
        db.flush()
        logger.info(f"Created customer {customer.id} for phone {phone}")
        return customer
    
    @staticmethod
    def record_order(customer: Customer, order: Order, details: OrderDetails) -> None:
        """
        Link an order to a customer and add its amounts to the running totals.
        
        Not idempotent: recording the same details twice adds them twice.
        """
        order.customer = customer  # appends to customer.orders
        customer.total_amount_spent = (customer.total_amount_spent or 0) + (details.total_amount or 0)
        customer.due_amount = (customer.due_amount or 0) + (details.due_amount or 0)
    
    @staticmethod
    def add_customer(db: Session, data: CustomerCreate) -> Tuple[Customer, Optional[Order], bool]:
        """
        Find-or-create a customer by phone, optionally recording an order.
        
        Returns (customer, order or None, created).
        """
        from crm.services.order_service import OrderService
        
        customer = CustomerService.get_customer_by_phone(db, data.phone)
        
        order = OrderService.build_order(data.order) if data.order else None
        
        created = False
        if not customer:
            seed_total = data.order.total_amount if data.order else 0
            seed_due = (data.order.due_amount if data.order else None) or 0
            customer = CustomerService.new_customer(
                db,
                name=data.name,
                phone=data.phone,
                email=data.email,
                total_amount_spent=data.total_amount_spent or seed_total,
                due_amount=data.due_amount or seed_due,
                advanced_amount=data.advanced_amount or 0
            )
            created = True
        
        if order is not None:
            CustomerService.record_order(customer, order, data.order)
            db.add(order)
        
        db.commit()
        db.refresh(customer)
        if order is not None:
            db.refresh(order)
            logger.info(f"Recorded order {order.id} for customer {customer.id}")
        
        return customer, order, created
