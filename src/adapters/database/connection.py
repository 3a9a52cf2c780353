# -*- coding: utf-8 -*-
"""
Database Connection - SQLAlchemy Async Engine 및 Session 관리
"""

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.settings.config import settings


# ==================== Base Model ====================


class Base(DeclarativeBase):
    """SQLAlchemy Base Model"""

    pass


# ==================== Engine 및 SessionMaker ====================


def create_engine(database_url: str | None = None) -> AsyncEngine:
    """
    비동기 SQLAlchemy Engine 생성

    Args:
        database_url: 연결 URL (없으면 settings.database_url)

    Returns:
        AsyncEngine: 비동기 데이터베이스 엔진
    """
    url = database_url or settings.database_url
    options: dict[str, Any] = {"echo": settings.database_echo, "pool_pre_ping": True}

    # SQLite(aiosqlite)는 QueuePool 옵션을 받지 않음
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_recycle=3600,  # 1시간마다 연결 재활용
        )

    return create_async_engine(url, **options)


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """엔진에 바인딩된 세션 팩토리 생성"""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,  # commit 후 객체 expire 방지
        autoflush=False,  # 자동 flush 비활성화
    )


# 전역 Engine 및 SessionMaker
engine: AsyncEngine = create_engine()
AsyncSessionLocal = create_session_factory(engine)


# ==================== Database 생명주기 ====================


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    데이터베이스 초기화 (테이블 생성)

    Args:
        bind: 대상 엔진 (없으면 전역 engine)
    """
    # 모든 모델을 metadata 에 등록
    import src.adapters.database.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """데이터베이스 연결 종료"""
    await engine.dispose()
