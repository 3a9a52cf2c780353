# -*- coding: utf-8 -*-
"""
Payment Gateway Port - 결제 승인 추상 인터페이스
"""

from abc import ABC, abstractmethod

from src.adapters.database.models.order import OrderModel
from src.application.domain.payment.dto import PaymentRequestDTO, PaymentResponseDTO


class PaymentGateway(ABC):
    """
    결제 게이트웨이 포트

    구현체:
        - HttpPaymentGateway: 외부 PG HTTP API 호출
        - FakePaymentGateway: 개발/테스트용
    """

    @abstractmethod
    async def authorize(
        self, order: OrderModel, request: PaymentRequestDTO
    ) -> PaymentResponseDTO:
        """
        결제 승인 요청 (1회 요청/응답, 재시도 없음)

        Args:
            order: 저장 전 주문
            request: 결제 요청 정보

        Returns:
            PaymentResponseDTO: 결제 결과 (실패도 응답으로 반환)

        Raises:
            PaymentGatewayError: 통신/프로토콜 오류
        """
