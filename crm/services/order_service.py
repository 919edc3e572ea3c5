"""
Order Service - Business Logic for Orders
"""
from sqlalchemy.orm import Session
from typing import List, Optional, Tuple
from uuid import UUID
import logging

from crm.models import Customer, Order, OrderItem
from crm.schemas.order import OrderDetails, OrderPlacement, OrderItemCreate, Checkout
from .customer_service import CustomerService

logger = logging.getLogger(__name__)

class OrderService:
    """Order business logic"""
    
    @staticmethod
    def get_orders(db: Session) -> List[Order]:
        """Get all orders, oldest first"""
        return db.query(Order).order_by(Order.created_at).all()
    
    @staticmethod
    def get_order_by_id(db: Session, order_id: UUID) -> Optional[Order]:
        """Get order by ID"""
        return db.query(Order).filter(Order.id == order_id).first()
    
    @staticmethod
    def get_customer_orders(db: Session, phone: str) -> Optional[Customer]:
        """Get customer by phone; orders are loaded through customer.orders"""
        return CustomerService.get_customer_by_phone(db, phone)
    
    @staticmethod
    def get_order_items(db: Session, order_id: UUID) -> List[OrderItem]:
        """Get line items that reference an order"""
        return db.query(OrderItem).filter(OrderItem.order_id == order_id)\
            .order_by(OrderItem.created_at)\
            .all()
    
    @staticmethod
    def build_order(details: OrderDetails) -> Order:
        """Build an unsaved order with no customer set"""
        return Order(
            status=details.status,
            remarks=details.remarks,
            mode_of_payment=details.mode_of_payment,
            total_amount=details.total_amount,
            discount=details.discount,
            paid_amount=details.paid_amount,
            due_amount=details.due_amount,
            item_ids=[]
        )
    
    @staticmethod
    def place_order(db: Session, data: OrderPlacement, commit: bool = True) -> Tuple[Order, Customer]:
        """
        Place an order for the customer with the given phone.
        
        Steps:
        1. Resolve customer by phone
        2. Build the order (customer unset)
        3. Create the customer if missing, seeded with the order amounts
        4. Link order to customer, add order amounts to customer totals
        
        A new customer is seeded with the order amounts and then has the
        same amounts added when the order is recorded.
        """
        customer = CustomerService.get_customer_by_phone(db, data.phone)
        
        order = OrderService.build_order(data.order)
        
        if not customer:
            customer = CustomerService.new_customer(
                db,
                name=data.name,
                phone=data.phone,
                email=data.email,
                total_amount_spent=data.order.total_amount or 0,
                due_amount=data.order.due_amount or 0
            )
        
        CustomerService.record_order(customer, order, data.order)
        db.add(order)
        
        if commit:
            db.commit()
            db.refresh(order)
            db.refresh(customer)
        else:
            db.flush()
        
        logger.info(
            f"Placed order {order.id} for customer {customer.id} "
            f"(total={data.order.total_amount}, due={data.order.due_amount})"
        )
        return order, customer
    
    @staticmethod
    def add_order_item(db: Session, data: OrderItemCreate, commit: bool = True) -> OrderItem:
        """
        Create an order line.
        
        The parent order is neither checked nor updated, and item stock
        is left untouched.
        """
        item = OrderItem(
            order_id=data.order_id,
            item_name=data.item_name,
            quantity=data.quantity,
            price=data.price,
            total=data.total
        )
        db.add(item)
        
        if commit:
            db.commit()
            db.refresh(item)
        else:
            db.flush()
        
        logger.info(f"Added order item {item.id} ({item.item_name} x {item.quantity}) to order {item.order_id}")
        return item
    
    @staticmethod
    def checkout(db: Session, data: Checkout) -> Tuple[Order, Customer, List[OrderItem]]:
        """Place an order and create one order item per cart line, in one commit"""
        order, customer = OrderService.place_order(db, data.placement, commit=False)
        
        items = []
        for line in data.lines:
            items.append(OrderService.add_order_item(
                db,
                OrderItemCreate(
                    order_id=order.id,
                    item_name=line.item_name,
                    quantity=line.quantity,
                    price=line.price,
                    total=line.price * line.quantity
                ),
                commit=False
            ))
        
        db.commit()
        db.refresh(order)
        db.refresh(customer)
        for item in items:
            db.refresh(item)
        
        return order, customer, items
