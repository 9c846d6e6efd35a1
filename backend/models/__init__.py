# backend/models/__init__.py
from .user_model import User, USER_ROLES
from .product_model import Product
from .order_model import Order, ORDER_STATUSES
from .order_product_model import OrderProduct
