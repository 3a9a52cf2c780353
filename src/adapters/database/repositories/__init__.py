"""
Database Repositories - 데이터베이스 접근 계층
"""

from src.adapters.database.repositories.base_repository import BaseRepository
from src.adapters.database.repositories.item_repository import ItemRepository
from src.adapters.database.repositories.member_repository import MemberRepository
from src.adapters.database.repositories.order_repository import OrderRepository
from src.adapters.database.repositories.store_repository import StoreRepository

__all__ = [
    # Base
    "BaseRepository",
    # Repositories
    "MemberRepository",
    "StoreRepository",
    "ItemRepository",
    "OrderRepository",
]
