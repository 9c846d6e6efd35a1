# backend/models/order_model.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.types import Unicode
from sqlalchemy.orm import relationship

from database.session import Base

ORDER_STATUSES = ("CREATED", "CONFIRMED", "PENDING CANCELATION", "DELIVERED", "CANCELED")


class Order(Base):
    __tablename__ = "orders"
    id          = Column(Integer, primary_key=True, index=True)
    client_id   = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    employee_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    status      = Column(Unicode(32), nullable=False, default="CREATED")
    created_at  = Column(DateTime, nullable=False, server_default=func.now())

    client   = relationship("User", foreign_keys=[client_id])
    employee = relationship("User", foreign_keys=[employee_id])
    items    = relationship("OrderProduct", cascade="all, delete-orphan", back_populates="order")

    __table_args__ = (
        CheckConstraint("status in (%s)" % ", ".join(f"'{s}'" for s in ORDER_STATUSES), name="ck_orders_status"),
    )
