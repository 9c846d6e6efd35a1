# backend/services/product_service.py
import logging
from typing import Dict, List, Optional

from models.product_model import Product
from repositories.base import ProductRepository, UserRepository
from schemas.products import ProductCreate, ProductOut, ProductUpdate
from services.errors import NotFoundError

logger = logging.getLogger(__name__)

# request field -> Product column
_UPDATABLE = {
    "quantity": "quantity",
    "name": "name",
    "price": "price",
    "type": "type",
    "src": "src",
    "unitOfMeasure": "unit_of_measure",
    "description": "description",
}


def to_product_out(p: Product) -> ProductOut:
    return ProductOut(
        id=p.id,
        producerId=p.producer_id,
        name=p.name,
        description=p.description,
        type=p.type,
        src=p.src,
        unitOfMeasure=p.unit_of_measure,
        quantity=p.quantity,
        price=float(p.price),
    )


def collect_update_fields(body: ProductUpdate) -> Dict:
    """Columns to write: every field that is present, including 0 and ''."""
    data = body.model_dump(exclude_none=True)
    return {_UPDATABLE[k]: v for k, v in data.items() if k in _UPDATABLE}


class ProductService:
    def __init__(self, products: ProductRepository, users: Optional[UserRepository] = None):
        self.products = products
        self.users = users

    def list_products(self) -> List[ProductOut]:
        return [to_product_out(p) for p in self.products.list_all()]

    def get_product(self, product_id: int) -> ProductOut:
        p = self.products.get(product_id)
        if not p:
            raise NotFoundError(f"Product {product_id} not found")
        return to_product_out(p)

    def list_for_farmer(self, farmer_id: int) -> List[ProductOut]:
        return [to_product_out(p) for p in self.products.list_by_producer(farmer_id)]

    def create_for_farmer(self, farmer_id: int, body: ProductCreate) -> ProductOut:
        if self.users is not None:
            farmer = self.users.get(farmer_id)
            if not farmer or farmer.role != "FARMER":
                raise NotFoundError(f"Farmer {farmer_id} not found")
        p = self.products.create(
            producer_id=farmer_id,
            name=body.name,
            quantity=body.quantity,
            price=body.price,
            type=body.type,
            unit_of_measure=body.unitOfMeasure,
            description=body.description,
            src=body.src,
        )
        logger.info(f"Farmer {farmer_id} created product {p.id}")
        return to_product_out(p)

    def update_for_farmer(self, farmer_id: int, product_id: int, body: ProductUpdate) -> int:
        fields = collect_update_fields(body)
        count = self.products.update_owned(product_id, farmer_id, fields)
        if count == 0:
            logger.info(f"Product {product_id} not owned by farmer {farmer_id}; nothing updated")
        return count
