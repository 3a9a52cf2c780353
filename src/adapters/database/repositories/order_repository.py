# -*- coding: utf-8 -*-
"""
Order Repository - 주문 데이터 접근 계층
"""

import logging
import uuid
from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from src.adapters.database.models.item import ItemModel
from src.adapters.database.models.order import OrderItemModel, OrderModel
from src.adapters.database.models.store import StoreModel
from src.adapters.database.repositories.base_repository import BaseRepository
from src.application.common.exceptions import ResourceConflictError

logger = logging.getLogger(__name__)


class OrderRepository(BaseRepository[OrderModel]):
    """주문 Repository"""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(OrderModel, session)

    # ==================== 저장 ====================

    async def save(self, order: OrderModel) -> OrderModel:
        """
        주문 저장 (최초 저장 시 ID 할당)

        Args:
            order: 저장할 주문

        Returns:
            OrderModel: 저장된 주문

        Raises:
            ResourceConflictError: 다른 요청이 먼저 같은 주문을 수정한 경우
        """
        self.session.add(order)
        try:
            await self.session.flush()
        except StaleDataError as e:
            logger.warning(f"[OrderRepository] Concurrent modification detected: {order.id}")
            raise ResourceConflictError(
                "Order was modified by another request",
                details={"order_id": str(order.id)},
            ) from e
        return order

    # ==================== 주문 조회 (도메인 특화) ====================

    async def find_by_id(self, order_id: uuid.UUID) -> OrderModel | None:
        """주문 ID로 조회"""
        return await self.get_by_id(order_id)

    async def find_by_member(self, member_id: int) -> Sequence[OrderModel]:
        """회원의 주문 목록 조회 (최신순)"""
        stmt = self._newest_first(select(self.model).where(self.model.member_id == member_id))
        return await self._fetch(stmt)

    async def find_by_store(self, store_id: int) -> Sequence[OrderModel]:
        """가게의 주문 목록 조회 (최신순)"""
        stmt = self._newest_first(select(self.model).where(self.model.store_id == store_id))
        return await self._fetch(stmt)

    async def search(
        self,
        member_id: int,
        store_name: str | None = None,
        product_name: str | None = None,
    ) -> Sequence[OrderModel]:
        """
        회원 주문 검색

        가게명/상품명 조건은 선택이며, 주어진 조건은 모두 만족해야 함 (대소문자 무시 부분 일치)
        검색어의 % 와 _ 는 와일드카드가 아닌 문자 그대로 비교

        Args:
            member_id: 주문 고객 회원 ID
            store_name: 가게명 검색어
            product_name: 상품명 검색어 (주문 라인 중 하나라도 일치)

        Returns:
            Sequence[OrderModel]: 검색된 주문 목록 (최신순)
        """
        stmt = select(self.model).where(self.model.member_id == member_id)

        if store_name:
            stmt = stmt.where(
                self.model.store.has(StoreModel.name.icontains(store_name, autoescape=True))
            )

        if product_name:
            stmt = stmt.where(
                self.model.items.any(
                    OrderItemModel.item.has(ItemModel.name.icontains(product_name, autoescape=True))
                )
            )

        return await self._fetch(self._newest_first(stmt))

    # ==================== Helpers ====================

    def _newest_first(self, stmt: Select[tuple[OrderModel]]) -> Select[tuple[OrderModel]]:
        return stmt.order_by(self.model.created_at.desc(), self.model.id)

    async def _fetch(self, stmt: Select[tuple[OrderModel]]) -> Sequence[OrderModel]:
        result = await self.session.execute(stmt)
        return result.scalars().all()
