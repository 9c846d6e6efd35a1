# backend/repositories/__init__.py
from .base import (
    storage_guard,
    UserRepository, ProductRepository, OrderRepository, OrderProductRepository,
)
from .users import SqlUserRepository
from .products import SqlProductRepository
from .orders import SqlOrderRepository
from .order_products import SqlOrderProductRepository
