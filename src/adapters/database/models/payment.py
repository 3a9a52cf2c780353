# -*- coding: utf-8 -*-
"""
Payment Model - 결제 정보 모델
"""

import uuid
from decimal import Decimal
from enum import Enum

from sqlalchemy import ForeignKey, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.adapters.database.connection import Base
from src.adapters.database.models.base import BaseModel


class PaymentStatus(str, Enum):
    """결제 상태"""

    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    PENDING = "PENDING"


class PaymentModel(Base, BaseModel):
    """결제 모델 (주문당 1건)"""

    __tablename__ = "payments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    order_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        comment="주문 ID",
    )

    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, comment="결제 금액")

    payment_method: Mapped[str] = mapped_column(String(20), nullable=False, comment="결제 수단")

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PaymentStatus.PENDING.value, comment="결제 상태"
    )

    pg_transaction_id: Mapped[str | None] = mapped_column(
        String(100), nullable=True, comment="PG사 거래 ID"
    )

    message: Mapped[str | None] = mapped_column(String(200), nullable=True, comment="PG 응답 메시지")
