# -*- coding: utf-8 -*-
"""
Base Repository - 공통 Repository 패턴

도메인 Repository 가 공유하는 조회 로직
"""

from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.connection import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base Repository 클래스

    모든 Repository의 기본 조회 기능 제공
    """

    def __init__(self, model: type[ModelType], session: AsyncSession) -> None:
        """
        Args:
            model: SQLAlchemy 모델 클래스
            session: AsyncSession 인스턴스
        """
        self.model = model
        self.session = session

    # ==================== Read ====================

    async def get_by_id(self, id: Any) -> ModelType | None:
        """
        ID로 단일 레코드 조회

        Args:
            id: Primary Key

        Returns:
            ModelType | None: 조회된 모델 인스턴스 또는 None
        """
        return await self.session.get(self.model, id)
