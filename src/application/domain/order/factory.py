# -*- coding: utf-8 -*-
"""
Order Factory - 주문 생성 (가격 스냅샷 + 결제 승인)

결제 승인에 성공한 경우에만 주문이 세션에 추가된다.
"""

import logging
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.models.base import utc_now
from src.adapters.database.models.order import OrderItemModel, OrderModel, OrderStatus
from src.adapters.database.repositories.item_repository import ItemRepository
from src.adapters.database.repositories.member_repository import MemberRepository
from src.adapters.database.repositories.order_repository import OrderRepository
from src.adapters.database.repositories.store_repository import StoreRepository
from src.application.common.exceptions import (
    ItemNotFoundError,
    MemberNotFoundError,
    PaymentFailedError,
    StoreNotFoundError,
    ValidationError,
)
from src.application.common.validators import validate_order_lines
from src.application.domain.order.dto import OrderCreateRequestDTO, OrderItemRequestDTO
from src.application.domain.order.window import Clock
from src.application.domain.payment.dto import PaymentRequestDTO
from src.application.domain.payment.gateway import PaymentGateway

logger = logging.getLogger(__name__)


class OrderFactory:
    """주문 생성기"""

    def __init__(
        self,
        session: AsyncSession,
        payment_gateway: PaymentGateway,
        clock: Clock | None = None,
    ) -> None:
        self.session = session
        self.payment_gateway = payment_gateway
        self.clock = clock or utc_now
        self.member_repo = MemberRepository(session)
        self.store_repo = StoreRepository(session)
        self.item_repo = ItemRepository(session)
        self.order_repo = OrderRepository(session)

    # ==================== 주문 생성 ====================

    async def create(self, request: OrderCreateRequestDTO, acting_member_id: int) -> OrderModel:
        """
        주문 생성

        처리 순서:
        1. 요청 회원 / 가게 조회
        2. 주문 라인 검증 및 현재 가격으로 스냅샷
        3. 결제 승인 요청
        4. 승인 성공 시에만 결제 정보 연결 후 저장

        Args:
            request: 주문 생성 요청
            acting_member_id: 요청 회원 ID

        Returns:
            OrderModel: 저장된 주문 (ID 할당됨)

        Raises:
            MemberNotFoundError: 회원 없음
            StoreNotFoundError: 가게 없음
            ValidationError: 주문 라인 없음 / 수량 0 이하 / 다른 가게 상품
            ItemNotFoundError: 상품 없음
            PaymentFailedError: 결제 승인 실패
            PaymentGatewayError: PG 통신 오류
        """
        member = await self.member_repo.find_by_id(acting_member_id)
        if member is None:
            raise MemberNotFoundError(acting_member_id)

        store = await self.store_repo.find_by_id(request.store_id)
        if store is None:
            raise StoreNotFoundError(request.store_id)

        lines = await self.price_lines(request.items, store.id)

        now = self.clock()
        address = request.address
        order = OrderModel(
            member_id=member.id,
            store_id=store.id,
            store=store,
            order_type=request.order_type,
            payment_method=request.payment_method,
            delivery_city=address.city if address else None,
            delivery_street=address.street if address else None,
            delivery_zipcode=address.zipcode if address else None,
            store_request=request.store_request,
            status=OrderStatus.CREATED.value,
            items=lines,
            created_at=now,
            updated_at=now,
        )

        payment_request = PaymentRequestDTO(
            amount=order.total_price,
            payment_method=order.payment_method,
            member_id=member.id,
            store_id=store.id,
        )
        payment = await self.payment_gateway.authorize(order, payment_request)

        if not payment.is_success:
            logger.warning(
                f"[OrderFactory] Payment not approved: member={member.id}, "
                f"amount={payment_request.amount}, status={payment.status}"
            )
            raise PaymentFailedError(payment.status, payment.message)

        order.payment = payment.to_model()
        await self.order_repo.save(order)

        logger.info(
            f"[OrderFactory] Order created: {order.id} (member={member.id}, "
            f"store={store.id}, total={order.total_price})"
        )
        return order

    # ==================== 주문 라인 ====================

    async def price_lines(
        self,
        requests: Sequence[OrderItemRequestDTO] | None,
        store_id: int,
        existing: Sequence[OrderItemModel] = (),
    ) -> list[OrderItemModel]:
        """
        주문 라인 검증 및 가격 확정

        이미 주문에 있는 상품은 기존 단가를 유지하고 수량만 변경,
        새 상품은 현재 가격을 스냅샷한다.

        Args:
            requests: 요청 주문 라인
            store_id: 주문 가게 ID (상품은 모두 이 가게 소속이어야 함)
            existing: 기존 주문 라인 (수정 시)

        Returns:
            list[OrderItemModel]: 가격이 확정된 주문 라인

        Raises:
            ValidationError: 주문 라인 없음 / 수량 0 이하 / 상품 중복 / 다른 가게 상품
            ItemNotFoundError: 상품 없음
        """
        try:
            validate_order_lines(requests)
        except ValueError as e:
            raise ValidationError(str(e), details={"field": "items"}) from e

        current = {line.item_id: line for line in existing}

        # 모든 신규 상품을 먼저 조회하여 실패 시 기존 라인이 변경되지 않도록 함
        new_items = {}
        for line_request in requests:
            if line_request.item_id in current:
                continue
            item = await self.item_repo.find_by_id(line_request.item_id)
            if item is None:
                raise ItemNotFoundError(line_request.item_id)
            if item.store_id != store_id:
                logger.warning(
                    f"[OrderFactory] Item {item.id} belongs to store={item.store_id}, "
                    f"not store={store_id}"
                )
                raise ValidationError(
                    "Item does not belong to the ordered store",
                    details={"field": "items", "item_id": item.id, "store_id": store_id},
                )
            new_items[item.id] = item

        lines: list[OrderItemModel] = []
        for line_request in requests:
            line = current.get(line_request.item_id)
            if line is not None:
                line.quantity = line_request.quantity
                lines.append(line)
                continue

            item = new_items[line_request.item_id]
            lines.append(
                OrderItemModel(
                    item_id=item.id,
                    item=item,
                    quantity=line_request.quantity,
                    price=item.price,
                )
            )

        return lines
