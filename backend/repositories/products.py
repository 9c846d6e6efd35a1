# backend/repositories/products.py
from typing import Dict, Iterable, List

from sqlalchemy.orm import Session

from models.product_model import Product
from repositories.base import storage_guard


class SqlProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, product_id: int):
        with storage_guard(self.db, f"loading product {product_id}"):
            return self.db.get(Product, product_id)

    def get_many(self, product_ids: Iterable[int]) -> Dict[int, Product]:
        ids = set(product_ids)
        if not ids:
            return {}
        with storage_guard(self.db, "loading products"):
            rows = self.db.query(Product).filter(Product.id.in_(ids)).all()
        return {p.id: p for p in rows}

    def list_all(self) -> List[Product]:
        with storage_guard(self.db, "listing products"):
            return self.db.query(Product).order_by(Product.id.desc()).all()

    def list_by_producer(self, farmer_id: int) -> List[Product]:
        with storage_guard(self.db, f"listing products of farmer {farmer_id}"):
            return (
                self.db.query(Product)
                .filter(Product.producer_id == farmer_id)
                .order_by(Product.id)
                .all()
            )

    def create(self, **fields) -> Product:
        with storage_guard(self.db, "creating product"):
            p = Product(**fields)
            self.db.add(p)
            self.db.commit()
            self.db.refresh(p)
            return p

    def update_owned(self, product_id: int, farmer_id: int, fields: Dict) -> int:
        """Scoped update; returns the number of rows matched (0 or 1)."""
        if not fields:
            return 0
        with storage_guard(self.db, f"updating product {product_id}"):
            count = (
                self.db.query(Product)
                .filter(Product.id == product_id, Product.producer_id == farmer_id)
                .update(fields, synchronize_session=False)
            )
            self.db.commit()
            return count
