# backend/tests/test_order_service.py
import pytest

from models.order_model import ORDER_STATUSES
from schemas.orders import OrderCreate
from services.errors import InsufficientStockError, InvalidTransitionError, NotFoundError
from services.order_service import ALLOWED_TRANSITIONS, OrderService, can_transition
from tests.fakes import FakeOrderRepository, FakeProductRepository, FakeUserRepository


@pytest.fixture
def service(store):
    return OrderService(FakeOrderRepository(store), FakeProductRepository(store), FakeUserRepository(store))


def _body(**kw):
    data = {"employeeId": 3, "clientId": 1, "products": [
        {"productId": 5, "amount": 2, "price": 2.5},
        {"productId": 7, "amount": 6, "price": 0.4},
    ]}
    data.update(kw)
    return OrderCreate(**data)


def test_create_order_tags_line_items_with_producer(service, store):
    out = service.create_order(_body())

    assert out.status == "CREATED"
    assert {(p.productId, p.farmerId) for p in out.products} == {(5, 9), (7, 10)}
    assert out.totalAmount == pytest.approx(7.4)
    assert store.products[5].quantity == 48
    assert store.products[7].quantity == 114


def test_create_order_merges_repeated_products(service, store):
    out = service.create_order(_body(products=[
        {"productId": 6, "amount": 1, "price": 3.0},
        {"productId": 6, "amount": 2, "price": 3.0},
    ]))

    assert [(p.productId, p.amount) for p in out.products] == [(6, 3)]
    assert store.products[6].quantity == 17


def test_create_order_rejects_overdraw(service, store):
    with pytest.raises(InsufficientStockError):
        service.create_order(_body(products=[{"productId": 6, "amount": 21, "price": 3.0}]))
    assert store.products[6].quantity == 20
    assert store.orders == {}


def test_create_order_requires_client(service):
    with pytest.raises(NotFoundError):
        service.create_order(_body(clientId=9))


def test_create_order_with_unknown_product(service):
    with pytest.raises(NotFoundError):
        service.create_order(_body(products=[{"productId": 77, "amount": 1, "price": 1.0}]))


@pytest.mark.parametrize("current,new,ok", [
    ("CREATED", "CONFIRMED", True),
    ("CREATED", "CREATED", True),
    ("CONFIRMED", "DELIVERED", True),
    ("PENDING CANCELATION", "CANCELED", True),
    ("DELIVERED", "CREATED", False),
    ("CANCELED", "CONFIRMED", False),
    ("CREATED", "DELIVERED", False),
])
def test_transitions(current, new, ok):
    assert can_transition(current, new) is ok


def test_update_status_rejects_illegal_move(service, store):
    store.add_order(id=1, client_id=1, status="DELIVERED")

    with pytest.raises(InvalidTransitionError):
        service.update_status(1, "CREATED")
    assert store.orders[1].status == "DELIVERED"


def test_delete_only_pending_cancelation(service, store):
    store.add_order(id=1, client_id=1, status="CREATED")
    store.add_line(1, 5, 2)

    with pytest.raises(InvalidTransitionError):
        service.delete_order(1)

    service.update_status(1, "PENDING CANCELATION")
    assert service.delete_order(1) == 1
    assert 1 not in store.orders
    assert store.lines == []
    assert store.products[5].quantity == 52


def test_list_orders_newest_first(service, store):
    from datetime import datetime

    store.add_order(id=1, client_id=1, created_at=datetime(2021, 11, 1))
    store.add_order(id=2, client_id=1, created_at=datetime(2021, 11, 5))

    assert [o.id for o in service.list_orders()] == [2, 1]
    assert service.list_orders(client_id=42) == []


def test_transition_table_covers_every_status():
    assert set(ALLOWED_TRANSITIONS) == set(ORDER_STATUSES)
    for targets in ALLOWED_TRANSITIONS.values():
        assert targets <= set(ORDER_STATUSES)
