"""
Database Models - SQLAlchemy ORM 모델
"""

from src.adapters.database.models.base import BaseModel, TimestampMixin, utc_now
from src.adapters.database.models.item import ItemModel
from src.adapters.database.models.member import MemberModel, Role
from src.adapters.database.models.order import (
    OrderItemModel,
    OrderModel,
    OrderStatus,
    OrderType,
    PaymentMethod,
)
from src.adapters.database.models.payment import PaymentModel, PaymentStatus
from src.adapters.database.models.store import StoreModel

__all__ = [
    # Base
    "BaseModel",
    "TimestampMixin",
    "utc_now",
    # Member
    "MemberModel",
    "Role",
    # Store / Item
    "StoreModel",
    "ItemModel",
    # Order
    "OrderModel",
    "OrderItemModel",
    "OrderType",
    "OrderStatus",
    "PaymentMethod",
    # Payment
    "PaymentModel",
    "PaymentStatus",
]
