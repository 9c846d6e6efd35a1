# backend/repositories/base.py
# Data-access interfaces handed to the services, plus the shared storage guard.
import logging
from contextlib import contextmanager
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from services.errors import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_guard(db: Session, action: str):
    """Roll back and re-raise any SQLAlchemy failure as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        message = str(getattr(e, "orig", None) or e)
        logger.error(f"Storage failure while {action}: {message}")
        raise StorageError(message) from e


@runtime_checkable
class UserRepository(Protocol):
    def get(self, user_id: int): ...
    def list_by_role(self, role: str) -> List: ...


@runtime_checkable
class ProductRepository(Protocol):
    def get(self, product_id: int): ...
    def get_many(self, product_ids: Iterable[int]) -> Dict[int, object]: ...
    def list_all(self) -> List: ...
    def list_by_producer(self, farmer_id: int) -> List: ...
    def create(self, **fields): ...
    def update_owned(self, product_id: int, farmer_id: int, fields: Dict) -> int: ...


@runtime_checkable
class OrderRepository(Protocol):
    def exists(self, order_id: int) -> bool: ...
    def get(self, order_id: int): ...
    def list(self, client_id: Optional[int] = None) -> List: ...
    def create_with_items(self, client_id: int, employee_id: Optional[int], lines: Sequence[Dict]): ...
    def set_status(self, order, status: str): ...
    def delete_with_items(self, order) -> int: ...


@runtime_checkable
class OrderProductRepository(Protocol):
    def list_for_farmer(self, farmer_id: int) -> List: ...
    def list_for_farmer_order(self, farmer_id: int, order_id: int) -> List: ...
    def update_scoped(self, farmer_id: int, order_id: int,
                      updates: Sequence[Tuple[int, Dict]]) -> List[int]: ...
