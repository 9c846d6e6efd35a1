# backend/repositories/orders.py
from typing import Dict, List, Optional, Sequence

from sqlalchemy.orm import Session, joinedload

from models.order_model import Order
from models.order_product_model import OrderProduct
from models.product_model import Product
from repositories.base import storage_guard
from services.errors import InsufficientStockError


class SqlOrderRepository:
    def __init__(self, db: Session):
        self.db = db

    def exists(self, order_id: int) -> bool:
        with storage_guard(self.db, f"looking up order {order_id}"):
            return self.db.query(Order.id).filter(Order.id == order_id).first() is not None

    def get(self, order_id: int):
        with storage_guard(self.db, f"loading order {order_id}"):
            return (
                self.db.query(Order)
                .options(joinedload(Order.items))
                .filter(Order.id == order_id)
                .first()
            )

    def list(self, client_id: Optional[int] = None) -> List[Order]:
        with storage_guard(self.db, "listing orders"):
            q = self.db.query(Order).options(joinedload(Order.items))
            if client_id is not None:
                q = q.filter(Order.client_id == client_id)
            return q.order_by(Order.created_at.desc(), Order.id.desc()).all()

    def create_with_items(self, client_id: int, employee_id: Optional[int], lines: Sequence[Dict]) -> Order:
        """Insert the order, its line items and the stock decrements in one commit.

        Each line is ``{"product": Product, "amount": int, "price": float}``.
        """
        with storage_guard(self.db, "creating order"):
            o = Order(client_id=client_id, employee_id=employee_id, status="CREATED")
            self.db.add(o)
            self.db.flush()
            for line in lines:
                p = line["product"]
                self.db.add(OrderProduct(
                    order_id=o.id,
                    product_id=p.id,
                    user_id=p.producer_id,
                    amount=line["amount"],
                    price=line["price"],
                    confirmed=False,
                ))
                taken = (
                    self.db.query(Product)
                    .filter(Product.id == p.id, Product.quantity >= line["amount"])
                    .update(
                        {Product.quantity: Product.quantity - line["amount"]},
                        synchronize_session=False,
                    )
                )
                if taken == 0:
                    # stock changed since the service checked it
                    self.db.rollback()
                    raise InsufficientStockError(
                        f"Product {p.id} has fewer than {line['amount']} available"
                    )
            self.db.commit()
            self.db.refresh(o)
            return o

    def set_status(self, order: Order, status: str) -> Order:
        with storage_guard(self.db, f"updating status of order {order.id}"):
            order.status = status
            self.db.commit()
            self.db.refresh(order)
            return order

    def delete_with_items(self, order: Order) -> int:
        """Give line item amounts back to stock, then drop items and order."""
        with storage_guard(self.db, f"deleting order {order.id}"):
            items = self.db.query(OrderProduct).filter(OrderProduct.order_id == order.id).all()
            for it in items:
                self.db.query(Product).filter(Product.id == it.product_id).update(
                    {Product.quantity: Product.quantity + it.amount},
                    synchronize_session=False,
                )
            removed = (
                self.db.query(OrderProduct)
                .filter(OrderProduct.order_id == order.id)
                .delete(synchronize_session=False)
            )
            self.db.query(Order).filter(Order.id == order.id).delete(synchronize_session=False)
            self.db.commit()
            return removed
