# -*- coding: utf-8 -*-
"""
Decorators - 공통 데코레이터

Service Layer 트랜잭션 관리 데코레이터
"""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database import connection

T = TypeVar("T")

logger = logging.getLogger(__name__)


# ==================== @transaction 데코레이터 ====================


def transaction(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """
    트랜잭션 데코레이터

    Service Layer 메서드에 적용하여 자동 트랜잭션 관리
    - 성공 시: commit
    - 실패 시: rollback 후 예외 재전파

    사용 예시:
        @transaction
        async def create_order(self, session: AsyncSession, request) -> OrderResponseDTO:
            # 비즈니스 로직
            pass

        await service.create_order(request)            # 새 세션에서 실행
        await service.create_order(session, request)   # 호출자 트랜잭션에 참여

    주의:
        - 외부 호출 메서드에만 적용 (내부 헬퍼 메서드는 제외)
        - 세션이 전달된 경우 commit/rollback 은 호출자 책임
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        if len(args) > 1 and isinstance(args[1], AsyncSession):
            # 이미 session이 전달된 경우 (호출자 트랜잭션)
            return await func(*args, **kwargs)

        async with connection.AsyncSessionLocal() as session:
            try:
                # self 다음 위치에 새 session 주입
                result = await func(args[0], session, *args[1:], **kwargs)
                await session.commit()
                return result

            except Exception as e:
                await session.rollback()
                logger.error(f"Transaction failed in {func.__name__}: {e}")
                raise

    return wrapper
