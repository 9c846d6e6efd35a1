# backend/routers/deps.py
# Builds repositories around the request session and hands them to the services.
from fastapi import Depends
from sqlalchemy.orm import Session

from database.session import get_db
from repositories import (
    SqlUserRepository, SqlProductRepository, SqlOrderRepository, SqlOrderProductRepository,
)
from services.order_aggregator import OrderAggregator
from services.order_service import OrderService
from services.product_service import ProductService
from services.status_engine import LineItemStatusEngine


def get_user_repository(db: Session = Depends(get_db)) -> SqlUserRepository:
    return SqlUserRepository(db)


def get_aggregator(db: Session = Depends(get_db)) -> OrderAggregator:
    return OrderAggregator(SqlOrderProductRepository(db))


def get_status_engine(db: Session = Depends(get_db)) -> LineItemStatusEngine:
    return LineItemStatusEngine(SqlOrderRepository(db), SqlOrderProductRepository(db))


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(SqlProductRepository(db), SqlUserRepository(db))


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(SqlOrderRepository(db), SqlProductRepository(db), SqlUserRepository(db))
