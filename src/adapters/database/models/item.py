# -*- coding: utf-8 -*-
"""
Item Model - 상품 정보 모델
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.adapters.database.connection import Base
from src.adapters.database.models.base import BaseModel, BigIntegerPK


class ItemModel(Base, BaseModel):
    """상품 모델"""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)

    store_id: Mapped[int] = mapped_column(
        ForeignKey("stores.id"), nullable=False, index=True, comment="판매 가게 ID"
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True, comment="상품명")

    # 현재 판매가 (주문 시점 가격은 order_items.price 에 고정)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, comment="현재 가격")
