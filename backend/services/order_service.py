# backend/services/order_service.py
import logging
from typing import List, Optional

from models.order_model import Order
from repositories.base import OrderRepository, ProductRepository, UserRepository
from schemas.orders import OrderCreate, OrderItemResponse, OrderResponse
from services.errors import InsufficientStockError, InvalidTransitionError, NotFoundError

logger = logging.getLogger(__name__)

CANCELABLE_STATUS = "PENDING CANCELATION"

ALLOWED_TRANSITIONS = {
    "CREATED": {"CONFIRMED", "PENDING CANCELATION", "CANCELED"},
    "CONFIRMED": {"DELIVERED", "PENDING CANCELATION"},
    "PENDING CANCELATION": {"CREATED", "CANCELED"},
    "DELIVERED": set(),
    "CANCELED": set(),
}


def can_transition(current: str, new: str) -> bool:
    return current == new or new in ALLOWED_TRANSITIONS.get(current, set())


def to_order_response(o: Order) -> OrderResponse:
    items: List[OrderItemResponse] = []
    total = 0.0
    for it in sorted(o.items, key=lambda i: i.product_id):
        price = float(it.price)
        total += price * it.amount
        items.append(OrderItemResponse(
            productId=it.product_id,
            farmerId=it.user_id,
            amount=it.amount,
            price=price,
            confirmed=bool(it.confirmed),
            status=it.status,
        ))
    return OrderResponse(
        id=o.id,
        clientId=o.client_id,
        employeeId=o.employee_id,
        status=o.status,
        createdAt=o.created_at,
        products=items,
        totalAmount=round(total, 2),
    )


class OrderService:
    def __init__(self, orders: OrderRepository, products: ProductRepository, users: UserRepository):
        self.orders = orders
        self.products = products
        self.users = users

    def list_orders(self, client_id: Optional[int] = None) -> List[OrderResponse]:
        return [to_order_response(o) for o in self.orders.list(client_id)]

    def get_order(self, order_id: int) -> OrderResponse:
        return to_order_response(self._load(order_id))

    def create_order(self, body: OrderCreate) -> OrderResponse:
        client = self.users.get(body.clientId)
        if not client or client.role != "CLIENT":
            raise NotFoundError(f"Client {body.clientId} not found")
        if body.employeeId is not None and not self.users.get(body.employeeId):
            raise NotFoundError(f"Employee {body.employeeId} not found")

        # the same product listed twice counts once against stock
        wanted = {}
        for line in body.products:
            wanted[line.productId] = wanted.get(line.productId, 0) + line.amount

        catalog = self.products.get_many(wanted.keys())
        for product_id, amount in wanted.items():
            p = catalog.get(product_id)
            if not p:
                raise NotFoundError(f"Product {product_id} not found")
            if p.quantity < amount:
                raise InsufficientStockError(
                    f"Product {product_id} has {p.quantity} available, {amount} requested"
                )

        merged = {}
        for line in body.products:
            if line.productId in merged:
                merged[line.productId]["amount"] += line.amount
            else:
                merged[line.productId] = {
                    "product": catalog[line.productId],
                    "amount": line.amount,
                    "price": line.price,
                }

        o = self.orders.create_with_items(body.clientId, body.employeeId, list(merged.values()))
        logger.info(f"Order {o.id} created for client {body.clientId} with {len(merged)} products")
        return to_order_response(o)

    def update_status(self, order_id: int, status: str) -> OrderResponse:
        o = self._load(order_id)
        if not can_transition(o.status, status):
            raise InvalidTransitionError(f"Cannot move order {order_id} from {o.status} to {status}")
        if o.status != status:
            o = self.orders.set_status(o, status)
            logger.info(f"Order {order_id} moved to {status}")
        return to_order_response(o)

    def delete_order(self, order_id: int) -> int:
        o = self._load(order_id)
        if o.status != CANCELABLE_STATUS:
            raise InvalidTransitionError(
                f"Order {order_id} is {o.status}; only {CANCELABLE_STATUS} orders can be deleted"
            )
        removed = self.orders.delete_with_items(o)
        logger.info(f"Order {order_id} deleted with {removed} line items")
        return removed

    def _load(self, order_id: int) -> Order:
        o = self.orders.get(order_id)
        if not o:
            raise NotFoundError(f"Order {order_id} not found")
        return o
