# -*- coding: utf-8 -*-
"""
Store Model - 가게 정보 모델
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.adapters.database.connection import Base
from src.adapters.database.models.base import BaseModel, BigIntegerPK


class StoreModel(Base, BaseModel):
    """가게 모델"""

    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True, comment="가게명")

    member_id: Mapped[int] = mapped_column(
        ForeignKey("members.id"), nullable=False, index=True, comment="가게 사장 회원 ID"
    )
