# backend/schemas/users.py
from typing import Optional, Literal
from pydantic import BaseModel

from models.user_model import USER_ROLES

Role = Literal[USER_ROLES]


class UserOut(BaseModel):
    id: int
    name: str
    surname: Optional[str] = None
    email: str
    role: Role
