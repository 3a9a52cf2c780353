# -*- coding: utf-8 -*-
"""
Order Domain DTO - 주문 관련 데이터 전송 객체
"""

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator

from src.adapters.database.models.order import OrderType, PaymentMethod
from src.application.common.dto import BaseDTO


# ==================== Common DTOs ====================


class AddressDTO(BaseDTO):
    """
    배송지 DTO

    Attributes:
        city: 도시
        street: 도로명
        zipcode: 우편번호
    """

    city: str = Field(description="도시", max_length=100)
    street: str = Field(description="도로명", max_length=200)
    zipcode: str = Field(description="우편번호", max_length=20)


# ==================== Request DTOs ====================


class OrderItemRequestDTO(BaseDTO):
    """
    주문 라인 요청 DTO

    수량 양수 검증은 주문 생성/수정 시 도메인에서 수행 (V-001)
    """

    item_id: int = Field(description="상품 ID")
    quantity: int = Field(description="주문 수량")


class OrderCreateRequestDTO(BaseDTO):
    """
    주문 생성 요청 DTO

    Attributes:
        store_id: 주문 가게 ID
        items: 주문 라인 목록
        order_type: 주문 유형 (ONLINE/OFFLINE)
        payment_method: 결제 수단 (CARD/BANK_TRANSFER)
        address: 배송지
        store_request: 가게 요청사항
    """

    store_id: int = Field(description="주문 가게 ID")
    items: list[OrderItemRequestDTO] = Field(default_factory=list, description="주문 라인 목록")
    order_type: OrderType = Field(default=OrderType.ONLINE.value, description="주문 유형")
    payment_method: PaymentMethod = Field(default=PaymentMethod.CARD.value, description="결제 수단")
    address: AddressDTO | None = Field(default=None, description="배송지")
    store_request: str | None = Field(default=None, description="가게 요청사항", max_length=500)


class OrderUpdateRequestDTO(BaseDTO):
    """
    주문 수정 요청 DTO

    None 인 필드는 변경하지 않음. items 가 주어지면 주문 라인 전체를 교체.
    """

    items: list[OrderItemRequestDTO] | None = Field(default=None, description="교체할 주문 라인")
    address: AddressDTO | None = Field(default=None, description="배송지")
    store_request: str | None = Field(default=None, description="가게 요청사항", max_length=500)


class OrderCancelRequestDTO(BaseDTO):
    """
    주문 취소 요청 DTO

    Attributes:
        reason: 취소 사유
    """

    reason: str | None = Field(default=None, description="취소 사유", max_length=500)

    @field_validator("reason")
    @classmethod
    def strip_reason(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class OrderSearchRequestDTO(BaseDTO):
    """
    주문 검색 요청 DTO

    Attributes:
        store_name: 가게명 검색어 (부분 일치)
        product_name: 상품명 검색어 (부분 일치)
    """

    store_name: str | None = Field(default=None, description="가게명 검색어")
    product_name: str | None = Field(default=None, description="상품명 검색어")

    @field_validator("store_name", "product_name")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


# ==================== Response DTOs ====================


class OrderItemResponseDTO(BaseDTO):
    """주문 라인 응답 DTO"""

    item_id: int = Field(description="상품 ID")
    item_name: str = Field(description="상품명")
    quantity: int = Field(description="주문 수량")
    price: Decimal = Field(description="주문 시점 단가")
    line_total: Decimal = Field(description="라인 금액")


class PaymentSummaryDTO(BaseDTO):
    """결제 요약 DTO"""

    payment_id: uuid.UUID = Field(description="결제 ID")
    status: str = Field(description="결제 상태")
    amount: Decimal = Field(description="결제 금액")
    payment_method: str = Field(description="결제 수단")
    pg_transaction_id: str | None = Field(default=None, description="PG사 거래 ID")


class OrderResponseDTO(BaseDTO):
    """
    주문 응답 DTO

    Attributes:
        order_id: 주문 ID
        member_id: 주문 고객 회원 ID
        store_id: 주문 가게 ID
        status: 주문 상태
        total_price: 총 주문 금액
        created_at: 주문 시각
        updated_at: 수정 시각
    """

    order_id: uuid.UUID = Field(description="주문 ID")
    member_id: int = Field(description="주문 고객 회원 ID")
    store_id: int = Field(description="주문 가게 ID")
    store_name: str = Field(description="가게명")
    order_type: str = Field(description="주문 유형")
    payment_method: str = Field(description="결제 수단")
    status: str = Field(description="주문 상태")
    total_price: Decimal = Field(description="총 주문 금액")
    items: list[OrderItemResponseDTO] = Field(description="주문 라인 목록")
    created_at: datetime = Field(description="주문 시각")
    updated_at: datetime = Field(description="수정 시각")


class OrderDetailResponseDTO(OrderResponseDTO):
    """주문 상세 응답 DTO (배송지, 요청사항, 결제, 취소 정보 포함)"""

    address: AddressDTO | None = Field(default=None, description="배송지")
    store_request: str | None = Field(default=None, description="가게 요청사항")
    cancel_reason: str | None = Field(default=None, description="취소 사유")
    cancelled_at: datetime | None = Field(default=None, description="취소 시각")
    payment: PaymentSummaryDTO | None = Field(default=None, description="결제 정보")


class OrderListResponseDTO(BaseDTO):
    """
    주문 목록 응답 DTO

    Attributes:
        orders: 주문 목록
        total: 전체 주문 수
    """

    orders: list[OrderResponseDTO] = Field(description="주문 목록")
    total: int = Field(description="전체 주문 수")
