# -*- coding: utf-8 -*-
"""
Item Repository - 상품 데이터 접근 계층
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.models.item import ItemModel
from src.adapters.database.repositories.base_repository import BaseRepository


class ItemRepository(BaseRepository[ItemModel]):
    """상품 Repository"""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ItemModel, session)

    async def find_by_id(self, item_id: int) -> ItemModel | None:
        """상품 ID로 조회"""
        return await self.get_by_id(item_id)
