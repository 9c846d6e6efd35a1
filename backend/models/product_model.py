# backend/models/product_model.py
from sqlalchemy import Column, Integer, Float, ForeignKey, CheckConstraint
from sqlalchemy.types import Unicode, UnicodeText
from sqlalchemy.orm import relationship

from database.session import Base


class Product(Base):
    __tablename__ = "products"

    id              = Column(Integer, primary_key=True, index=True)
    producer_id     = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name            = Column(Unicode(255), nullable=False)
    description     = Column(UnicodeText)
    type            = Column(Unicode(64), nullable=False)
    src             = Column(Unicode(512))
    unit_of_measure = Column(Unicode(32))
    quantity        = Column(Integer, nullable=False, default=0)  # stock
    price           = Column(Float, nullable=False)

    producer = relationship("User", foreign_keys=[producer_id])

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_products_quantity"),
    )
