# backend/models/order_product_model.py
from sqlalchemy import Column, Integer, Float, Boolean, ForeignKey, PrimaryKeyConstraint, CheckConstraint
from sqlalchemy.types import Unicode
from sqlalchemy.orm import relationship

from database.session import Base


class OrderProduct(Base):
    """Line item: one product inside one order.

    ``user_id`` is the producer of ``product_id`` copied at insert time, so
    farmer-scoped reads and writes can filter on it without joining products.
    """
    __tablename__ = "order_products"
    order_id   = Column(Integer, ForeignKey("orders.id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    user_id    = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount     = Column(Integer, nullable=False)
    price      = Column(Float, nullable=False)  # snapshot at order time
    confirmed  = Column(Boolean, nullable=False, default=False)
    status     = Column(Unicode(32), nullable=True)

    order   = relationship("Order", back_populates="items")
    product = relationship("Product")

    __table_args__ = (
        PrimaryKeyConstraint("order_id", "product_id"),
        CheckConstraint("amount >= 1", name="ck_order_products_amount"),
    )
