# -*- coding: utf-8 -*-
"""
Order Service - 주문 처리 서비스

주문 생성/수정/취소 및 조회의 진입점.
메서드마다 하나의 트랜잭션에서 실행된다 (@transaction).
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.models.base import utc_now
from src.adapters.database.models.order import OrderModel, OrderStatus
from src.adapters.database.repositories.order_repository import OrderRepository
from src.application.common.decorators import transaction
from src.application.common.exceptions import OrderAlreadyCancelledError
from src.application.domain.order import access
from src.application.domain.order.dto import (
    OrderCancelRequestDTO,
    OrderCreateRequestDTO,
    OrderDetailResponseDTO,
    OrderListResponseDTO,
    OrderSearchRequestDTO,
    OrderUpdateRequestDTO,
)
from src.application.domain.order.factory import OrderFactory
from src.application.domain.order.query import OrderQuery, to_detail
from src.application.domain.order.window import Clock, MutationWindow
from src.application.domain.payment.gateway import PaymentGateway

logger = logging.getLogger(__name__)


class OrderService:
    """
    주문 서비스

    주문 생성, 수정, 취소, 조회 및 검색
    """

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        clock: Clock | None = None,
        window: MutationWindow | None = None,
    ) -> None:
        """
        Args:
            payment_gateway: 결제 게이트웨이
            clock: 현재 시각 함수 (기본: UTC 현재 시각)
            window: 수정/취소 가능 시간 (기본: 설정값)
        """
        self.payment_gateway = payment_gateway
        self.clock = clock or utc_now
        self.window = window or MutationWindow(clock=self.clock)

    # ==================== 주문 생성 ====================

    @transaction
    async def create_order(
        self,
        session: AsyncSession,
        request: OrderCreateRequestDTO,
        acting_member_id: int,
    ) -> OrderDetailResponseDTO:
        """
        주문 생성

        Args:
            session: Database Session
            request: 주문 생성 요청
            acting_member_id: 요청 회원 ID

        Returns:
            OrderDetailResponseDTO: 생성된 주문
        """
        factory = OrderFactory(session, self.payment_gateway, clock=self.clock)
        order = await factory.create(request, acting_member_id)
        return to_detail(order)

    # ==================== 주문 수정 ====================

    @transaction
    async def update_order(
        self,
        session: AsyncSession,
        order_id: uuid.UUID,
        request: OrderUpdateRequestDTO,
        acting_member_id: int,
    ) -> OrderDetailResponseDTO:
        """
        주문 수정 (배송지, 요청사항, 주문 라인)

        기존 상품 라인은 주문 시점 단가를 유지하고 수량만 변경.
        결제는 다시 요청하지 않는다.

        Args:
            session: Database Session
            order_id: 주문 ID
            request: 수정 요청
            acting_member_id: 요청 회원 ID

        Returns:
            OrderDetailResponseDTO: 수정된 주문

        Raises:
            OrderNotFoundError: 주문 없음
            MemberNotFoundError: 회원 없음
            AccessDeniedError: 접근 권한 없음
            OrderTimeOutError: 수정 가능 시간 초과
            OrderAlreadyCancelledError: 취소된 주문
            ValidationError: 주문 라인 검증 실패 / 다른 가게 상품
            ItemNotFoundError: 상품 없음
        """
        order = await self._load_mutable(session, order_id, acting_member_id)

        if request.items is not None:
            factory = OrderFactory(session, self.payment_gateway, clock=self.clock)
            order.items = await factory.price_lines(
                request.items, order.store_id, existing=order.items
            )

        if request.address is not None:
            order.delivery_city = request.address.city
            order.delivery_street = request.address.street
            order.delivery_zipcode = request.address.zipcode

        if request.store_request is not None:
            order.store_request = request.store_request

        order.updated_at = self.clock()
        await OrderRepository(session).save(order)

        logger.info(f"[OrderService] Order updated: {order.id} by member={acting_member_id}")
        return to_detail(order)

    # ==================== 주문 취소 ====================

    @transaction
    async def cancel_order(
        self,
        session: AsyncSession,
        order_id: uuid.UUID,
        request: OrderCancelRequestDTO,
        acting_member_id: int,
    ) -> OrderDetailResponseDTO:
        """
        주문 취소 (CREATED -> CANCELLED)

        Args:
            session: Database Session
            order_id: 주문 ID
            request: 취소 요청 (사유)
            acting_member_id: 요청 회원 ID

        Returns:
            OrderDetailResponseDTO: 취소된 주문

        Raises:
            OrderNotFoundError: 주문 없음
            MemberNotFoundError: 회원 없음
            AccessDeniedError: 접근 권한 없음
            OrderTimeOutError: 취소 가능 시간 초과
            OrderAlreadyCancelledError: 이미 취소된 주문
        """
        order = await self._load_mutable(session, order_id, acting_member_id)

        now = self.clock()
        order.status = OrderStatus.CANCELLED.value
        order.cancel_reason = request.reason
        order.cancelled_at = now
        order.updated_at = now
        await OrderRepository(session).save(order)

        logger.info(f"[OrderService] Order cancelled: {order.id} by member={acting_member_id}")
        return to_detail(order)

    # ==================== 주문 조회 ====================

    @transaction
    async def get_order_detail(
        self, session: AsyncSession, order_id: uuid.UUID, acting_member_id: int
    ) -> OrderDetailResponseDTO:
        """주문 상세 조회"""
        return await OrderQuery(session).get_order_detail(order_id, acting_member_id)

    @transaction
    async def get_orders_for_member(
        self, session: AsyncSession, member_id: int
    ) -> OrderListResponseDTO:
        """회원 주문 목록 조회"""
        return await OrderQuery(session).get_orders_for_member(member_id)

    @transaction
    async def get_orders_for_store(
        self, session: AsyncSession, store_id: int, acting_member_id: int
    ) -> OrderListResponseDTO:
        """가게 주문 목록 조회 (가게 사장 본인만)"""
        return await OrderQuery(session).get_orders_for_store(store_id, acting_member_id)

    @transaction
    async def search_orders(
        self,
        session: AsyncSession,
        member_id: int,
        store_name: str | None = None,
        product_name: str | None = None,
    ) -> OrderListResponseDTO:
        """
        회원 주문 검색

        Args:
            session: Database Session
            member_id: 회원 ID
            store_name: 가게명 검색어 (선택)
            product_name: 상품명 검색어 (선택)

        Returns:
            OrderListResponseDTO: 검색 결과 (최신순)
        """
        criteria = OrderSearchRequestDTO(store_name=store_name, product_name=product_name)
        return await OrderQuery(session).search_orders(member_id, criteria)

    # ==================== Helpers ====================

    async def _load_mutable(
        self, session: AsyncSession, order_id: uuid.UUID, acting_member_id: int
    ) -> OrderModel:
        """수정/취소 공통 검증: 주문/회원 조회 -> 권한 -> 시간 -> 상태"""
        query = OrderQuery(session)
        order = await query.resolve_order(order_id)
        member = await query.resolve_member(acting_member_id)
        access.authorize(order, member)
        self.window.check(order)

        if order.is_cancelled:
            raise OrderAlreadyCancelledError(order.id)
        return order
