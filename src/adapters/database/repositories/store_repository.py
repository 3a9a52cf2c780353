# -*- coding: utf-8 -*-
"""
Store Repository - 가게 데이터 접근 계층
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.models.store import StoreModel
from src.adapters.database.repositories.base_repository import BaseRepository


class StoreRepository(BaseRepository[StoreModel]):
    """가게 Repository"""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(StoreModel, session)

    async def find_by_id(self, store_id: int) -> StoreModel | None:
        """가게 ID로 조회"""
        return await self.get_by_id(store_id)
