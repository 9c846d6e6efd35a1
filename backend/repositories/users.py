# backend/repositories/users.py
from typing import List

from sqlalchemy.orm import Session

from models.user_model import User
from repositories.base import storage_guard


class SqlUserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int):
        with storage_guard(self.db, f"loading user {user_id}"):
            return self.db.get(User, user_id)

    def list_by_role(self, role: str) -> List[User]:
        with storage_guard(self.db, f"listing {role} users"):
            return self.db.query(User).filter(User.role == role).order_by(User.id).all()
