# -*- coding: utf-8 -*-
"""
Fake Payment Gateway - 외부 호출 없는 결제 게이트웨이 (개발/테스트용)

런타임에 승인/거절을 설정할 수 있으며, 요청 이력을 calls 에 기록한다.
"""

from uuid import uuid4

from src.adapters.database.models.order import OrderModel
from src.adapters.database.models.payment import PaymentStatus
from src.application.domain.payment.dto import PaymentRequestDTO, PaymentResponseDTO
from src.application.domain.payment.gateway import PaymentGateway


class FakePaymentGateway(PaymentGateway):
    """설정 가능한 가짜 결제 게이트웨이"""

    def __init__(
        self,
        status: PaymentStatus = PaymentStatus.SUCCESS,
        failure_reason: str = "Card declined",
    ) -> None:
        self.status = status
        self.failure_reason = failure_reason
        self.calls: list[PaymentRequestDTO] = []

    def configure(
        self, status: PaymentStatus, failure_reason: str = "Card declined"
    ) -> None:
        """승인 결과 변경"""
        self.status = status
        self.failure_reason = failure_reason

    async def authorize(
        self, order: OrderModel, request: PaymentRequestDTO
    ) -> PaymentResponseDTO:
        self.calls.append(request)

        if self.status == PaymentStatus.SUCCESS:
            return PaymentResponseDTO(
                status=PaymentStatus.SUCCESS.value,
                amount=request.amount,
                payment_method=request.payment_method,
                pg_transaction_id=f"fake_txn_{uuid4().hex[:12]}",
                message="Payment approved",
            )
        return PaymentResponseDTO(
            status=PaymentStatus(self.status).value,
            amount=request.amount,
            payment_method=request.payment_method,
            message=self.failure_reason,
        )
