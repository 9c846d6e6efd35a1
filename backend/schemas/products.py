# backend/schemas/products.py
from typing import Optional, NewType
from pydantic import BaseModel, Field, StrictInt, constr

NameStr = NewType("NameStr", constr(strip_whitespace=True, min_length=1, max_length=255))


class ProductCreate(BaseModel):
    name: NameStr
    quantity: StrictInt = Field(ge=0)
    price: float = Field(ge=0)
    type: str
    unitOfMeasure: Optional[str] = None
    description: Optional[str] = None
    src: Optional[str] = None


class ProductUpdate(BaseModel):
    """Partial update sent by the owning farmer; ``quantity`` is always required."""
    quantity: StrictInt = Field(ge=0)
    name: Optional[NameStr] = None
    price: Optional[float] = Field(default=None, ge=0)
    type: Optional[str] = None
    src: Optional[str] = None
    unitOfMeasure: Optional[str] = None
    description: Optional[str] = None


class ProductOut(BaseModel):
    id: int
    producerId: int
    name: str
    description: Optional[str] = None
    type: str
    src: Optional[str] = None
    unitOfMeasure: Optional[str] = None
    quantity: int
    price: float


class ProductUpdateResult(BaseModel):
    message: str
    updated: int
