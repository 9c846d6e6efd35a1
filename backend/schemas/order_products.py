# backend/schemas/order_products.py
# Farmer-side views of line items and the confirm / status payloads.
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, StrictBool, StrictInt, constr

FulfillmentStatus = constr(strip_whitespace=True, min_length=1, max_length=32)


# ---------- requests ----------

class ProductConfirmation(BaseModel):
    productId: StrictInt
    confirmed: StrictBool


class ProductFulfillment(BaseModel):
    productId: StrictInt
    status: FulfillmentStatus


class ConfirmProductsRequest(BaseModel):
    # an empty list passes validation; the service rejects it with its own error
    products: List[ProductConfirmation]


class StatusProductsRequest(BaseModel):
    products: List[ProductFulfillment]


# ---------- responses ----------

class LineItemResult(BaseModel):
    productId: int
    updated: int


class LineItemBatchResponse(BaseModel):
    message: str
    results: List[LineItemResult] = []


class FarmerOrderProduct(BaseModel):
    productId: int
    name: str
    amount: int
    price: float
    unitOfMeasure: Optional[str] = None
    confirmed: bool


class FarmerOrderView(BaseModel):
    products: List[FarmerOrderProduct]
    clientId: int
    status: str


class FarmerOrderEnvelope(BaseModel):
    order: Optional[FarmerOrderView] = None


class FarmerOrderProductRef(BaseModel):
    productId: int
    amount: int


class FarmerOrderSummary(BaseModel):
    orderId: int
    createdAt: Optional[datetime] = None
    status: str
    clientId: int
    products: List[FarmerOrderProductRef] = []
