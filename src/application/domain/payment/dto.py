# -*- coding: utf-8 -*-
"""
Payment Domain DTO - 결제 관련 데이터 전송 객체
"""

from decimal import Decimal

from pydantic import Field

from src.adapters.database.models.payment import PaymentModel, PaymentStatus
from src.application.common.dto import BaseDTO


class PaymentRequestDTO(BaseDTO):
    """
    결제 승인 요청 DTO

    Attributes:
        amount: 결제 금액 (주문 총액)
        payment_method: 결제 수단
        member_id: 주문 고객 회원 ID
        store_id: 주문 가게 ID
    """

    amount: Decimal = Field(description="결제 금액", ge=0)
    payment_method: str = Field(description="결제 수단 (CARD/BANK_TRANSFER)")
    member_id: int = Field(description="주문 고객 회원 ID")
    store_id: int = Field(description="주문 가게 ID")


class PaymentResponseDTO(BaseDTO):
    """
    결제 승인 응답 DTO

    Attributes:
        status: PG 가 보고한 결제 상태 (SUCCESS 외 모든 값은 승인 거절)
        amount: 승인 금액
        payment_method: 결제 수단
        pg_transaction_id: PG사 거래 ID
        message: PG 응답 메시지
    """

    status: str = Field(description="결제 상태 (SUCCESS/FAILED/PENDING/...)", min_length=1)
    amount: Decimal = Field(description="승인 금액")
    payment_method: str = Field(description="결제 수단")
    pg_transaction_id: str | None = Field(default=None, description="PG사 거래 ID")
    message: str | None = Field(default=None, description="PG 응답 메시지")

    @property
    def is_success(self) -> bool:
        """승인 성공 여부"""
        return self.status == PaymentStatus.SUCCESS.value

    def to_model(self) -> PaymentModel:
        """주문에 연결할 결제 엔티티 생성"""
        return PaymentModel(
            amount=self.amount,
            payment_method=self.payment_method,
            status=self.status,
            pg_transaction_id=self.pg_transaction_id,
            message=self.message,
        )
