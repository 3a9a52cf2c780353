# -*- coding: utf-8 -*-
"""
Order Query - 주문 조회 (상세/목록/검색) 및 응답 변환
"""

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.models.member import MemberModel
from src.adapters.database.models.order import OrderModel
from src.adapters.database.repositories.member_repository import MemberRepository
from src.adapters.database.repositories.order_repository import OrderRepository
from src.adapters.database.repositories.store_repository import StoreRepository
from src.application.common.exceptions import (
    MemberNotFoundError,
    OrderNotFoundError,
    StoreNotFoundError,
)
from src.application.domain.order import access
from src.application.domain.order.dto import (
    AddressDTO,
    OrderDetailResponseDTO,
    OrderItemResponseDTO,
    OrderListResponseDTO,
    OrderResponseDTO,
    OrderSearchRequestDTO,
    PaymentSummaryDTO,
)

logger = logging.getLogger(__name__)


# ==================== 응답 변환 ====================


def to_response(order: OrderModel) -> OrderResponseDTO:
    """주문 -> 요약 응답"""
    return OrderResponseDTO(**_summary_fields(order))


def to_detail(order: OrderModel) -> OrderDetailResponseDTO:
    """주문 -> 상세 응답"""
    address = None
    if order.delivery_city or order.delivery_street or order.delivery_zipcode:
        address = AddressDTO(
            city=order.delivery_city or "",
            street=order.delivery_street or "",
            zipcode=order.delivery_zipcode or "",
        )

    payment = None
    if order.payment is not None:
        payment = PaymentSummaryDTO(
            payment_id=order.payment.id,
            status=order.payment.status,
            amount=order.payment.amount,
            payment_method=order.payment.payment_method,
            pg_transaction_id=order.payment.pg_transaction_id,
        )

    return OrderDetailResponseDTO(
        **_summary_fields(order),
        address=address,
        store_request=order.store_request,
        cancel_reason=order.cancel_reason,
        cancelled_at=order.cancelled_at,
        payment=payment,
    )


def to_list(orders: Sequence[OrderModel]) -> OrderListResponseDTO:
    """주문 목록 -> 목록 응답"""
    return OrderListResponseDTO(
        orders=[to_response(order) for order in orders], total=len(orders)
    )


def _summary_fields(order: OrderModel) -> dict:
    return {
        "order_id": order.id,
        "member_id": order.member_id,
        "store_id": order.store_id,
        "store_name": order.store.name,
        "order_type": order.order_type,
        "payment_method": order.payment_method,
        "status": order.status,
        "total_price": order.total_price,
        "items": [
            OrderItemResponseDTO(
                item_id=line.item_id,
                item_name=line.item.name,
                quantity=line.quantity,
                price=line.price,
                line_total=line.line_total,
            )
            for line in order.items
        ],
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


# ==================== 조회 ====================


class OrderQuery:
    """주문 조회기"""

    def __init__(self, session: AsyncSession) -> None:
        self.member_repo = MemberRepository(session)
        self.store_repo = StoreRepository(session)
        self.order_repo = OrderRepository(session)

    async def resolve_member(self, member_id: int) -> MemberModel:
        """
        회원 조회

        Raises:
            MemberNotFoundError: 회원 없음
        """
        member = await self.member_repo.find_by_id(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        return member

    async def resolve_order(self, order_id: uuid.UUID) -> OrderModel:
        """
        주문 조회

        Raises:
            OrderNotFoundError: 주문 없음
        """
        order = await self.order_repo.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def get_order_detail(
        self, order_id: uuid.UUID, acting_member_id: int
    ) -> OrderDetailResponseDTO:
        """
        주문 상세 조회 (주문 고객 또는 가게 사장만)

        Raises:
            OrderNotFoundError: 주문 없음
            MemberNotFoundError: 회원 없음
            AccessDeniedError: 접근 권한 없음
        """
        order = await self.resolve_order(order_id)
        member = await self.resolve_member(acting_member_id)
        access.authorize(order, member)
        return to_detail(order)

    async def get_orders_for_member(self, member_id: int) -> OrderListResponseDTO:
        """회원 주문 목록 (최신순)"""
        orders = await self.order_repo.find_by_member(member_id)
        return to_list(orders)

    async def get_orders_for_store(
        self, store_id: int, acting_member_id: int
    ) -> OrderListResponseDTO:
        """
        가게 주문 목록 (가게 사장 본인만)

        Raises:
            StoreNotFoundError: 가게 없음
            AccessDeniedError: 가게 사장이 아님
        """
        store = await self.store_repo.find_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)
        access.authorize_store(store, acting_member_id)

        orders = await self.order_repo.find_by_store(store_id)
        return to_list(orders)

    async def search_orders(
        self, member_id: int, criteria: OrderSearchRequestDTO
    ) -> OrderListResponseDTO:
        """회원 주문 검색 (가게명/상품명 부분 일치)"""
        orders = await self.order_repo.search(
            member_id,
            store_name=criteria.store_name,
            product_name=criteria.product_name,
        )
        logger.debug(
            f"[OrderQuery] Search member={member_id} store_name={criteria.store_name!r} "
            f"product_name={criteria.product_name!r}: {len(orders)} orders"
        )
        return to_list(orders)
