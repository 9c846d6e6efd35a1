# backend/gateway/gateway_router.py
from fastapi import APIRouter

from routers.farmer_router import router as farmer_router
from routers.orders_router import router as orders_router
from routers.products_router import router as products_router

gateway_router = APIRouter()

gateway_router.include_router(farmer_router)    # /api/farmer/...
gateway_router.include_router(orders_router)    # /api/order/...
gateway_router.include_router(products_router)  # /api/product/...
