# -*- coding: utf-8 -*-
"""
Order Model - 주문 정보 모델
"""

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.adapters.database.connection import Base
from src.adapters.database.models.base import BaseModel, BigIntegerPK
from src.adapters.database.models.item import ItemModel
from src.adapters.database.models.payment import PaymentModel
from src.adapters.database.models.store import StoreModel


class OrderType(str, Enum):
    """주문 유형"""

    ONLINE = "ONLINE"  # 배달/온라인 주문
    OFFLINE = "OFFLINE"  # 매장 주문


class PaymentMethod(str, Enum):
    """결제 수단"""

    CARD = "CARD"
    BANK_TRANSFER = "BANK_TRANSFER"


class OrderStatus(str, Enum):
    """주문 상태"""

    CREATED = "CREATED"  # 결제 완료 후 생성
    CANCELLED = "CANCELLED"  # 취소 (종료 상태)


class OrderItemModel(Base):
    """주문 상품 모델 (주문 시점 가격 스냅샷)"""

    __tablename__ = "order_items"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)

    order_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True, comment="주문 ID"
    )

    item_id: Mapped[int] = mapped_column(
        ForeignKey("items.id"), nullable=False, index=True, comment="상품 ID"
    )

    quantity: Mapped[int] = mapped_column(Integer, nullable=False, comment="주문 수량")

    price: Mapped[Decimal] = mapped_column(
        Numeric(18, 2), nullable=False, comment="주문 시점 단가"
    )

    item: Mapped[ItemModel] = relationship(lazy="selectin")

    @property
    def line_total(self) -> Decimal:
        """라인 금액 (단가 x 수량)"""
        return self.price * self.quantity


class OrderModel(Base, BaseModel):
    """주문 모델"""

    __tablename__ = "orders"

    # ==================== Primary Key ====================
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # ==================== 주문 주체 ====================
    member_id: Mapped[int] = mapped_column(
        ForeignKey("members.id"), nullable=False, index=True, comment="주문 고객 회원 ID"
    )

    store_id: Mapped[int] = mapped_column(
        ForeignKey("stores.id"), nullable=False, index=True, comment="주문 가게 ID"
    )

    # ==================== 주문 상세 ====================
    order_type: Mapped[str] = mapped_column(
        String(20), nullable=False, comment="주문 유형 (ONLINE/OFFLINE)"
    )

    payment_method: Mapped[str] = mapped_column(
        String(20), nullable=False, comment="결제 수단 (CARD/BANK_TRANSFER)"
    )

    store_request: Mapped[str | None] = mapped_column(
        String(500), nullable=True, comment="가게 요청사항"
    )

    # ==================== 배송지 ====================
    delivery_city: Mapped[str | None] = mapped_column(String(100), nullable=True, comment="도시")
    delivery_street: Mapped[str | None] = mapped_column(String(200), nullable=True, comment="도로명")
    delivery_zipcode: Mapped[str | None] = mapped_column(String(20), nullable=True, comment="우편번호")

    # ==================== 주문 상태 ====================
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=OrderStatus.CREATED.value,
        index=True,
        comment="주문 상태",
    )

    cancel_reason: Mapped[str | None] = mapped_column(
        String(500), nullable=True, comment="취소 사유"
    )

    cancelled_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="취소 시각"
    )

    # 낙관적 잠금 버전
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    # ==================== Relationships ====================
    store: Mapped[StoreModel] = relationship(lazy="selectin")

    items: Mapped[list[OrderItemModel]] = relationship(
        cascade="all, delete-orphan",
        order_by=OrderItemModel.id,
        lazy="selectin",
    )

    payment: Mapped[PaymentModel | None] = relationship(
        cascade="all, delete-orphan",
        uselist=False,
        lazy="selectin",
    )

    # ==================== Indexes ====================
    __table_args__ = (
        Index("ix_orders_member_created", "member_id", "created_at"),
        Index("ix_orders_store_created", "store_id", "created_at"),
    )

    __mapper_args__ = {"version_id_col": version}

    # ==================== Properties ====================

    @property
    def total_price(self) -> Decimal:
        """총 주문 금액"""
        return sum((line.line_total for line in self.items), Decimal("0"))

    @property
    def is_cancelled(self) -> bool:
        """취소 여부"""
        return self.status == OrderStatus.CANCELLED.value

