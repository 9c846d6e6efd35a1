# backend/schemas/__init__.py

# products
from .products import ProductCreate, ProductUpdate, ProductOut, ProductUpdateResult

# users
from .users import UserOut, Role

# orders
from .orders import (
    OrderCreate, OrderStatusUpdate, OrderResponse, OrderStatus,
    OrderProductIn, OrderItemResponse, MessageResponse,
)

# farmer line items
from .order_products import (
    ProductConfirmation, ProductFulfillment, ConfirmProductsRequest, StatusProductsRequest,
    LineItemResult, LineItemBatchResponse,
    FarmerOrderProduct, FarmerOrderView, FarmerOrderEnvelope,
    FarmerOrderProductRef, FarmerOrderSummary,
)

__all__ = [
    # products
    "ProductCreate", "ProductUpdate", "ProductOut", "ProductUpdateResult",
    # users
    "UserOut", "Role",
    # orders
    "OrderCreate", "OrderStatusUpdate", "OrderResponse", "OrderStatus",
    "OrderProductIn", "OrderItemResponse", "MessageResponse",
    # farmer line items
    "ProductConfirmation", "ProductFulfillment", "ConfirmProductsRequest", "StatusProductsRequest",
    "LineItemResult", "LineItemBatchResponse",
    "FarmerOrderProduct", "FarmerOrderView", "FarmerOrderEnvelope",
    "FarmerOrderProductRef", "FarmerOrderSummary",
]
