# backend/repositories/order_products.py
from typing import Dict, List, Sequence, Tuple

from sqlalchemy.orm import Session, joinedload

from models.order_product_model import OrderProduct
from repositories.base import storage_guard


class SqlOrderProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_for_farmer(self, farmer_id: int) -> List[OrderProduct]:
        with storage_guard(self.db, f"listing line items of farmer {farmer_id}"):
            return (
                self.db.query(OrderProduct)
                .options(joinedload(OrderProduct.order))
                .filter(OrderProduct.user_id == farmer_id)
                .order_by(OrderProduct.order_id, OrderProduct.product_id)
                .all()
            )

    def list_for_farmer_order(self, farmer_id: int, order_id: int) -> List[OrderProduct]:
        with storage_guard(self.db, f"listing line items of order {order_id}"):
            return (
                self.db.query(OrderProduct)
                .options(joinedload(OrderProduct.order), joinedload(OrderProduct.product))
                .filter(OrderProduct.user_id == farmer_id, OrderProduct.order_id == order_id)
                .order_by(OrderProduct.product_id)
                .all()
            )

    def update_scoped(self, farmer_id: int, order_id: int,
                      updates: Sequence[Tuple[int, Dict]]) -> List[int]:
        """Apply ``(product_id, values)`` pairs in a single transaction.

        Every update is restricted to ``user_id=farmer_id AND order_id AND
        product_id``. Returns the matched row count per pair, in input order;
        a failure rolls back the whole batch.
        """
        counts: List[int] = []
        with storage_guard(self.db, f"updating line items of order {order_id}"):
            for product_id, values in updates:
                counts.append(
                    self.db.query(OrderProduct)
                    .filter(
                        OrderProduct.user_id == farmer_id,
                        OrderProduct.order_id == order_id,
                        OrderProduct.product_id == product_id,
                    )
                    .update(values, synchronize_session=False)
                )
            self.db.commit()
        return counts
