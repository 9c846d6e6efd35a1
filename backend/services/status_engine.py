# backend/services/status_engine.py
import logging
from typing import Dict, List, Sequence, Tuple

from repositories.base import OrderProductRepository, OrderRepository
from schemas.order_products import LineItemResult, ProductConfirmation, ProductFulfillment
from services.errors import NotFoundError, NothingToConfirmError

logger = logging.getLogger(__name__)


class LineItemStatusEngine:
    """Farmer-scoped writes on line items: ``confirmed`` flag and fulfillment ``status``."""

    def __init__(self, orders: OrderRepository, order_products: OrderProductRepository):
        self.orders = orders
        self.order_products = order_products

    def confirm_products(self, farmer_id: int, order_id: int,
                         items: Sequence[ProductConfirmation]) -> List[LineItemResult]:
        updates = [(it.productId, {"confirmed": it.confirmed}) for it in items]
        return self._apply(farmer_id, order_id, updates, "Nothing to confirm")

    def update_products_status(self, farmer_id: int, order_id: int,
                               items: Sequence[ProductFulfillment]) -> List[LineItemResult]:
        updates = [(it.productId, {"status": it.status}) for it in items]
        return self._apply(farmer_id, order_id, updates, "No product status to update")

    def _apply(self, farmer_id: int, order_id: int,
               updates: List[Tuple[int, Dict]], empty_message: str) -> List[LineItemResult]:
        if not self.orders.exists(order_id):
            raise NotFoundError(f"Order {order_id} not found")
        if not updates:
            raise NothingToConfirmError(empty_message)

        counts = self.order_products.update_scoped(farmer_id, order_id, updates)
        results = [
            LineItemResult(productId=product_id, updated=count)
            for (product_id, _), count in zip(updates, counts)
        ]
        logger.info(
            f"Farmer {farmer_id} updated {sum(counts)}/{len(updates)} line items of order {order_id}"
        )
        return results
