import pytest
from fastapi.testclient import TestClient

from crm.core import Database
from main import create_app


@pytest.fixture
def database():
    store = Database("sqlite://")
    store.open()
    yield store
    store.close()


@pytest.fixture
def client(database):
    app = create_app(database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(database):
    session = database.session()
    yield session
    session.close()


def place_order(client, phone="9876543210", name="Asha", total=200, due=50, **order):
    payload = {
        "name": name,
        "email": None,
        "phone": phone,
        "order": {
            "status": "Pending",
            "totalAmount": total,
            "dueAmount": due,
            "paidAmount": total - due,
            "modeOfPayment": "Cash",
            **order,
        },
    }
    return client.post("/api/order/add-order", json=payload)
