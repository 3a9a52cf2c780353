# -*- coding: utf-8 -*-
"""
Member Model - 회원 정보 모델
"""

from enum import Enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.adapters.database.connection import Base
from src.adapters.database.models.base import BaseModel, BigIntegerPK


class Role(str, Enum):
    """회원 역할"""

    CUSTOMER = "CUSTOMER"  # 고객
    OWNER = "OWNER"  # 가게 사장


class MemberModel(Base, BaseModel):
    """회원 모델"""

    __tablename__ = "members"

    # ==================== Primary Key ====================
    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)

    # ==================== 회원 정보 ====================
    username: Mapped[str] = mapped_column(
        String(50), unique=True, nullable=False, comment="로그인 아이디"
    )

    nickname: Mapped[str | None] = mapped_column(String(50), nullable=True, comment="닉네임")

    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Role.CUSTOMER.value, comment="역할 (CUSTOMER/OWNER)"
    )
