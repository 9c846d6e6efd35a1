# backend/models/user_model.py
from sqlalchemy import Column, Integer, CheckConstraint
from sqlalchemy.types import Unicode

from database.session import Base

USER_ROLES = ("CLIENT", "FARMER", "EMPLOYEE", "WMANAGER", "MANAGER")


class User(Base):
    __tablename__ = "users"
    id      = Column(Integer, primary_key=True, index=True)
    name    = Column(Unicode(255), nullable=False)
    surname = Column(Unicode(255))
    email   = Column(Unicode(255), unique=True, nullable=False)
    role    = Column(Unicode(20), nullable=False, index=True)  # 'CLIENT' / 'FARMER' / ...

    __table_args__ = (
        CheckConstraint("role in (%s)" % ", ".join(f"'{r}'" for r in USER_ROLES), name="ck_users_role"),
    )
