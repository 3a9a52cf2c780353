"""
Payment Domain - 결제 승인 요청/응답 및 게이트웨이 포트
"""

from src.application.domain.payment.dto import PaymentRequestDTO, PaymentResponseDTO
from src.application.domain.payment.gateway import PaymentGateway

__all__ = [
    "PaymentGateway",
    "PaymentRequestDTO",
    "PaymentResponseDTO",
]
