# backend/routers/products_router.py
from fastapi import APIRouter, Depends
from typing import List

from routers.deps import get_product_service
from schemas.products import ProductOut
from services.product_service import ProductService

router = APIRouter(prefix="/product", tags=["products"])


@router.get("", response_model=List[ProductOut])
def list_products(service: ProductService = Depends(get_product_service)):
    return service.list_products()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return service.get_product(product_id)
