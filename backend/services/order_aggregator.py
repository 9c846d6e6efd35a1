# backend/services/order_aggregator.py
"""Rebuilds nested farmer views from flat line-item rows.

Rows are ``OrderProduct`` objects (or anything shaped like them) with the
parent ``order`` loaded and, for the single-order view, the ``product`` too.
Both folds are read-only and keep no state between calls.
"""
from typing import Dict, Iterable, List, Optional

from repositories.base import OrderProductRepository
from schemas.order_products import (
    FarmerOrderProduct, FarmerOrderView, FarmerOrderProductRef, FarmerOrderSummary,
)


def build_farmer_order_view(rows: Iterable, farmer_id: int, order_id: int) -> Optional[FarmerOrderView]:
    """Line items of one order that belong to one farmer.

    Returns ``None`` when nothing matches. ``clientId`` and ``status`` come
    from the first matching row's order.
    """
    matching = [r for r in rows if r.user_id == farmer_id and r.order_id == order_id]
    if not matching:
        return None

    products = [
        FarmerOrderProduct(
            productId=r.product.id,
            name=r.product.name,
            amount=r.amount,
            price=float(r.product.price),
            unitOfMeasure=r.product.unit_of_measure,
            confirmed=bool(r.confirmed),
        )
        for r in matching
    ]
    first = matching[0].order
    return FarmerOrderView(products=products, clientId=first.client_id, status=first.status)


def group_farmer_orders(rows: Iterable) -> List[FarmerOrderSummary]:
    """One summary per distinct order, in order of first appearance."""
    grouped: Dict[int, FarmerOrderSummary] = {}
    for r in rows:
        summary = grouped.get(r.order_id)
        if summary is None:
            summary = FarmerOrderSummary(
                orderId=r.order_id,
                createdAt=r.order.created_at,
                status=r.order.status,
                clientId=r.order.client_id,
                products=[],
            )
            grouped[r.order_id] = summary
        summary.products.append(FarmerOrderProductRef(productId=r.product_id, amount=r.amount))
    return list(grouped.values())


class OrderAggregator:
    def __init__(self, order_products: OrderProductRepository):
        self.order_products = order_products

    def order_for_farmer(self, farmer_id: int, order_id: int) -> Optional[FarmerOrderView]:
        rows = self.order_products.list_for_farmer_order(farmer_id, order_id)
        return build_farmer_order_view(rows, farmer_id, order_id)

    def orders_for_farmer(self, farmer_id: int) -> List[FarmerOrderSummary]:
        return group_farmer_orders(self.order_products.list_for_farmer(farmer_id))
