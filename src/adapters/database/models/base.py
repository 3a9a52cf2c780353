# -*- coding: utf-8 -*-
"""
Base Model - 공통 모델 Base 클래스 및 Mixin
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import BigInteger, DateTime, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

# SQLite 에서는 INTEGER PRIMARY KEY 만 autoincrement 지원
BigIntegerPK = BigInteger().with_variant(Integer(), "sqlite")


def utc_now() -> datetime:
    """현재 UTC 시각 (timezone-aware)"""
    return datetime.now(timezone.utc)


class TimestampMixin:
    """생성/수정 타임스탬프 Mixin"""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        """생성 시각"""
        return mapped_column(DateTime(timezone=True), default=utc_now, nullable=False)

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        """수정 시각"""
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            onupdate=utc_now,
            nullable=False,
        )


class BaseModel(TimestampMixin):
    """
    Base Model for all database models

    모든 모델은 이 클래스를 상속받아 created_at, updated_at 자동 포함
    """

    def to_dict(self) -> dict[str, Any]:
        """모델을 딕셔너리로 변환"""
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}

    def __repr__(self) -> str:
        """모델 문자열 표현"""
        class_name = self.__class__.__name__
        attrs = ", ".join(
            f"{k}={v!r}"
            for k, v in self.to_dict().items()
            if k not in ("created_at", "updated_at")
        )
        return f"{class_name}({attrs})"
