# backend/schemas/orders.py
from typing import List, Optional, Literal
from datetime import datetime
from pydantic import BaseModel, Field, StrictInt

from models.order_model import ORDER_STATUSES

OrderStatus = Literal[ORDER_STATUSES]


class OrderProductIn(BaseModel):
    productId: StrictInt
    amount: StrictInt = Field(ge=1)
    price: float = Field(ge=0)


class OrderCreate(BaseModel):
    employeeId: Optional[StrictInt] = None
    clientId: StrictInt
    products: List[OrderProductIn] = Field(min_length=1)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderItemResponse(BaseModel):
    productId: int
    farmerId: int
    amount: int
    price: float
    confirmed: bool
    status: Optional[str] = None


class OrderResponse(BaseModel):
    id: int
    clientId: int
    employeeId: Optional[int] = None
    status: OrderStatus
    createdAt: Optional[datetime] = None
    products: List[OrderItemResponse] = []
    totalAmount: float = 0.0


class MessageResponse(BaseModel):
    message: str
