"""
Order Domain - 주문 생성/수정/취소 및 조회
"""

from src.application.domain.order.dto import (
    AddressDTO,
    OrderCancelRequestDTO,
    OrderCreateRequestDTO,
    OrderDetailResponseDTO,
    OrderItemRequestDTO,
    OrderListResponseDTO,
    OrderResponseDTO,
    OrderSearchRequestDTO,
    OrderUpdateRequestDTO,
)
from src.application.domain.order.factory import OrderFactory
from src.application.domain.order.query import OrderQuery
from src.application.domain.order.service import OrderService
from src.application.domain.order.window import MutationWindow

__all__ = [
    "OrderService",
    "OrderFactory",
    "OrderQuery",
    "MutationWindow",
    "AddressDTO",
    "OrderItemRequestDTO",
    "OrderCreateRequestDTO",
    "OrderUpdateRequestDTO",
    "OrderCancelRequestDTO",
    "OrderSearchRequestDTO",
    "OrderResponseDTO",
    "OrderDetailResponseDTO",
    "OrderListResponseDTO",
]
