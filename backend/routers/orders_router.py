# backend/routers/orders_router.py
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from routers.deps import get_order_service
from schemas.orders import MessageResponse, OrderCreate, OrderResponse, OrderStatusUpdate
from services.order_service import OrderService

router = APIRouter(prefix="/order", tags=["orders"])


@router.get("", response_model=List[OrderResponse])
def list_orders(client_id: Optional[int] = Query(default=None, alias="clientId"),
                service: OrderService = Depends(get_order_service)):
    return service.list_orders(client_id)


@router.post("", response_model=OrderResponse, status_code=201)
def create_order(body: OrderCreate, service: OrderService = Depends(get_order_service)):
    return service.create_order(body)


@router.get("/{order_id}", response_model=OrderResponse)
def get_order_by_id(order_id: int, service: OrderService = Depends(get_order_service)):
    return service.get_order(order_id)


@router.put("/{order_id}/status", response_model=OrderResponse)
def update_order_status(order_id: int, status_update: OrderStatusUpdate,
                        service: OrderService = Depends(get_order_service)):
    return service.update_status(order_id, status_update.status)


@router.delete("/{order_id}", response_model=MessageResponse)
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    removed = service.delete_order(order_id)
    return MessageResponse(message=f"Order {order_id} deleted with {removed} products")
