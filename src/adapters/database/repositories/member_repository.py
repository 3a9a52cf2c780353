# -*- coding: utf-8 -*-
"""
Member Repository - 회원 데이터 접근 계층
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.models.member import MemberModel
from src.adapters.database.repositories.base_repository import BaseRepository


class MemberRepository(BaseRepository[MemberModel]):
    """회원 Repository"""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(MemberModel, session)

    async def find_by_id(self, member_id: int) -> MemberModel | None:
        """회원 ID로 조회"""
        return await self.get_by_id(member_id)
