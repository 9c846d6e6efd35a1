# backend/routers/farmer_router.py
from fastapi import APIRouter, Depends
from typing import List

from models.user_model import User
from repositories import SqlUserRepository
from routers.deps import get_aggregator, get_product_service, get_status_engine, get_user_repository
from schemas.order_products import (
    ConfirmProductsRequest, StatusProductsRequest, LineItemBatchResponse,
    FarmerOrderEnvelope, FarmerOrderSummary,
)
from schemas.products import ProductCreate, ProductOut, ProductUpdate, ProductUpdateResult
from schemas.users import UserOut
from services.order_aggregator import OrderAggregator
from services.product_service import ProductService
from services.status_engine import LineItemStatusEngine

router = APIRouter(prefix="/farmer", tags=["farmer"])


def _user_out(u: User) -> UserOut:
    return UserOut(id=u.id, name=u.name, surname=u.surname, email=u.email, role=u.role)


@router.get("", response_model=List[UserOut])
def list_farmers(users: SqlUserRepository = Depends(get_user_repository)):
    return [_user_out(u) for u in users.list_by_role("FARMER")]


# ---------- products owned by the farmer ----------

@router.get("/{farmer_id}/product", response_model=List[ProductOut])
def get_farmer_products(farmer_id: int, service: ProductService = Depends(get_product_service)):
    return service.list_for_farmer(farmer_id)


@router.post("/{farmer_id}/product", response_model=ProductOut, status_code=201)
def create_farmer_product(farmer_id: int, body: ProductCreate,
                          service: ProductService = Depends(get_product_service)):
    return service.create_for_farmer(farmer_id, body)


@router.put("/{farmer_id}/product/{product_id}", response_model=ProductUpdateResult)
def update_farmer_product(farmer_id: int, product_id: int, body: ProductUpdate,
                          service: ProductService = Depends(get_product_service)):
    # a product owned by someone else matches zero rows and still answers 200
    count = service.update_for_farmer(farmer_id, product_id, body)
    return ProductUpdateResult(message="Product updated", updated=count)


# ---------- orders containing the farmer's products ----------

@router.get("/{farmer_id}/order", response_model=List[FarmerOrderSummary])
def get_farmer_orders(farmer_id: int, aggregator: OrderAggregator = Depends(get_aggregator)):
    return aggregator.orders_for_farmer(farmer_id)


@router.get("/{farmer_id}/order/{order_id}", response_model=FarmerOrderEnvelope)
def get_farmer_order(farmer_id: int, order_id: int, aggregator: OrderAggregator = Depends(get_aggregator)):
    return FarmerOrderEnvelope(order=aggregator.order_for_farmer(farmer_id, order_id))


@router.post("/{farmer_id}/order/{order_id}/confirm", response_model=LineItemBatchResponse)
def confirm_order_products(farmer_id: int, order_id: int, body: ConfirmProductsRequest,
                           engine: LineItemStatusEngine = Depends(get_status_engine)):
    results = engine.confirm_products(farmer_id, order_id, body.products)
    return LineItemBatchResponse(message="Order products successfully reported", results=results)


@router.post("/{farmer_id}/order/{order_id}/status", response_model=LineItemBatchResponse)
def status_order_products(farmer_id: int, order_id: int, body: StatusProductsRequest,
                          engine: LineItemStatusEngine = Depends(get_status_engine)):
    results = engine.update_products_status(farmer_id, order_id, body.products)
    return LineItemBatchResponse(message="Order products status successfully reported", results=results)
