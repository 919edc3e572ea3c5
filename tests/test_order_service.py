from decimal import Decimal

import pytest

from crm.models import Customer, Order, OrderItem
from crm.schemas import OrderDetails, OrderPlacement, CustomerCreate, Checkout, CartLine
from crm.services import CustomerService, OrderService


def placement(phone="9876543210", name="Asha", total="200", due="50"):
    return OrderPlacement(
        phone=phone,
        name=name,
        order=OrderDetails(total_amount=Decimal(total), due_amount=Decimal(due), status="Pending")
    )


def test_place_order_for_existing_customer(db):
    customer = CustomerService.new_customer(db, "Asha", "9876543210", total_amount_spent=Decimal("500"))
    db.commit()

    order, updated = OrderService.place_order(db, placement())

    assert updated.id == customer.id
    assert order.customer_id == customer.id
    assert [o.id for o in updated.orders] == [order.id]
    assert updated.total_amount_spent == Decimal("700")
    assert updated.due_amount == Decimal("50")


def test_place_order_creates_single_customer_per_phone(db):
    OrderService.place_order(db, placement())
    OrderService.place_order(db, placement(name="Other name"))

    customers = db.query(Customer).all()
    assert len(customers) == 1
    assert customers[0].name == "Asha"
    assert len(customers[0].orders) == 2
    assert db.query(Order).count() == 2


def test_place_order_new_customer_without_name(db):
    with pytest.raises(ValueError):
        OrderService.place_order(db, placement(name=None))
    db.rollback()
    assert db.query(Customer).count() == 0


def test_place_order_treats_missing_due_as_zero(db):
    data = OrderPlacement(phone="1", name="A", order=OrderDetails(total_amount=Decimal("10")))
    order, customer = OrderService.place_order(db, data)
    assert order.due_amount is None
    assert customer.due_amount == Decimal("0")
    assert customer.total_amount_spent == Decimal("20")


def test_add_customer_without_order(db):
    customer, order, created = CustomerService.add_customer(db, CustomerCreate(name="Ravi", phone="1"))
    assert created is True
    assert order is None
    assert customer.total_amount_spent == 0

    again, _, created = CustomerService.add_customer(db, CustomerCreate(name="Ravi", phone="1"))
    assert created is False
    assert again.id == customer.id


def test_add_order_item_does_not_check_order(db):
    from crm.schemas import OrderItemCreate
    from uuid import uuid4

    item = OrderService.add_order_item(db, OrderItemCreate(
        order_id=uuid4(), item_name="Cable", quantity=1, price=Decimal("5"), total=Decimal("5")
    ))
    assert db.query(OrderItem).filter(OrderItem.id == item.id).count() == 1


def test_checkout_computes_line_totals(db):
    order, customer, items = OrderService.checkout(db, Checkout(
        placement=placement(total="35", due="0"),
        lines=[
            CartLine(item_name="Pen", quantity=3, price=Decimal("10")),
            CartLine(item_name="Notebook", quantity=1, price=Decimal("5")),
        ]
    ))
    assert [i.total for i in items] == [Decimal("30"), Decimal("5")]
    assert [i.item_name for i in OrderService.get_order_items(db, order.id)] == ["Pen", "Notebook"]
    assert order.item_ids == []
