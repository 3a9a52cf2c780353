# -*- coding: utf-8 -*-
"""
Order Service 테스트

주문 생명주기 전체 흐름 테스트:
- 생성 (가격 스냅샷, 결제 승인/실패)
- 수정/취소 (권한, 수정 가능 시간, 취소 상태)
- 조회/목록/검색
"""

import uuid
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from src.adapters.database import connection
from src.adapters.database.models import ItemModel, OrderModel, PaymentModel, PaymentStatus
from src.application.common.exceptions import (
    AccessDeniedError,
    ItemNotFoundError,
    MemberNotFoundError,
    OrderAlreadyCancelledError,
    OrderNotFoundError,
    OrderTimeOutError,
    PaymentFailedError,
    StoreNotFoundError,
    ValidationError,
)
from src.application.domain.order.dto import (
    AddressDTO,
    OrderCancelRequestDTO,
    OrderCreateRequestDTO,
    OrderItemRequestDTO,
    OrderUpdateRequestDTO,
)


def create_request(store_id: int, *lines: tuple[int, int], **kwargs) -> OrderCreateRequestDTO:
    return OrderCreateRequestDTO(
        store_id=store_id,
        items=[OrderItemRequestDTO(item_id=item_id, quantity=qty) for item_id, qty in lines],
        order_type="ONLINE",
        payment_method="CARD",
        address=AddressDTO(city="Seoul", street="Main Street", zipcode="12345"),
        store_request=kwargs.get("store_request", "Please deliver quickly"),
    )


async def count_rows(session, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


class TestCreateOrder:
    """주문 생성 테스트"""

    @pytest.mark.asyncio
    async def test_create_order_success(self, service, session, seed, gateway):
        """단가 1000 x 2 -> 총액 2000, ID 할당"""
        result = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 2)), seed.customer_id
        )

        assert result.order_id is not None
        assert result.total_price == Decimal("2000")
        assert result.status == "CREATED"
        assert result.member_id == seed.customer_id
        assert result.store_name == "Seoul Chicken"
        assert result.items[0].price == Decimal("1000")
        assert result.address.city == "Seoul"
        assert result.payment.status == "SUCCESS"
        assert result.payment.amount == Decimal("2000")
        assert len(gateway.calls) == 1
        assert gateway.calls[0].amount == Decimal("2000")

    @pytest.mark.asyncio
    async def test_created_order_persisted_once(self, service, session, seed):
        await service.create_order(
            session,
            create_request(seed.store_id, (seed.chicken_id, 2), (seed.cola_id, 1)),
            seed.customer_id,
        )

        assert await count_rows(session, OrderModel) == 1
        assert await count_rows(session, PaymentModel) == 1

    @pytest.mark.asyncio
    async def test_total_is_sum_of_lines(self, service, session, seed):
        result = await service.create_order(
            session,
            create_request(seed.store_id, (seed.chicken_id, 3), (seed.cola_id, 2)),
            seed.customer_id,
        )

        assert result.total_price == Decimal("8000")
        assert [line.line_total for line in result.items] == [Decimal("3000"), Decimal("5000")]

    @pytest.mark.asyncio
    async def test_payment_failed_leaves_nothing(self, service, session, seed, gateway):
        """결제 실패 시 P-001, 주문/결제 저장 없음"""
        gateway.configure(PaymentStatus.FAILED, "Insufficient funds")

        with pytest.raises(PaymentFailedError) as exc_info:
            await service.create_order(
                session, create_request(seed.store_id, (seed.chicken_id, 2)), seed.customer_id
            )

        assert exc_info.value.code == "P-001"
        assert "Insufficient funds" in exc_info.value.message
        assert await count_rows(session, OrderModel) == 0
        assert await count_rows(session, PaymentModel) == 0

    @pytest.mark.asyncio
    async def test_pending_payment_is_not_success(self, service, session, seed, gateway):
        gateway.configure(PaymentStatus.PENDING)

        with pytest.raises(PaymentFailedError):
            await service.create_order(
                session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
            )

        assert await count_rows(session, OrderModel) == 0

    @pytest.mark.asyncio
    async def test_unknown_member(self, service, session, seed, gateway):
        with pytest.raises(MemberNotFoundError) as exc_info:
            await service.create_order(
                session, create_request(seed.store_id, (seed.chicken_id, 1)), 9999
            )

        assert exc_info.value.code == "M-001"
        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_unknown_store(self, service, session, seed):
        with pytest.raises(StoreNotFoundError, match="Store Not Found"):
            await service.create_order(
                session, create_request(9999, (seed.chicken_id, 1)), seed.customer_id
            )

    @pytest.mark.asyncio
    async def test_unknown_item(self, service, session, seed, gateway):
        with pytest.raises(ItemNotFoundError) as exc_info:
            await service.create_order(
                session,
                create_request(seed.store_id, (seed.chicken_id, 1), (9999, 1)),
                seed.customer_id,
            )

        assert exc_info.value.code == "I-001"
        assert gateway.calls == []
        assert await count_rows(session, OrderModel) == 0

    @pytest.mark.asyncio
    async def test_empty_lines_rejected(self, service, session, seed):
        with pytest.raises(ValidationError) as exc_info:
            await service.create_order(session, create_request(seed.store_id), seed.customer_id)

        assert exc_info.value.code == "V-001"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quantity", [0, -1])
    async def test_non_positive_quantity_rejected(self, service, session, seed, quantity):
        with pytest.raises(ValidationError):
            await service.create_order(
                session,
                create_request(seed.store_id, (seed.chicken_id, quantity)),
                seed.customer_id,
            )

    @pytest.mark.asyncio
    async def test_duplicate_item_rejected(self, service, session, seed):
        with pytest.raises(ValidationError):
            await service.create_order(
                session,
                create_request(seed.store_id, (seed.chicken_id, 1), (seed.chicken_id, 2)),
                seed.customer_id,
            )

    @pytest.mark.asyncio
    async def test_item_from_other_store_rejected(self, service, session, seed, gateway):
        """다른 가게 상품이 섞인 주문은 V-001, 결제 요청 없음"""
        with pytest.raises(ValidationError) as exc_info:
            await service.create_order(
                session,
                create_request(seed.store_id, (seed.chicken_id, 1), (seed.pizza_id, 1)),
                seed.customer_id,
            )

        assert exc_info.value.details["item_id"] == seed.pizza_id
        assert gateway.calls == []
        assert await count_rows(session, OrderModel) == 0

    @pytest.mark.asyncio
    async def test_price_frozen_at_order_time(self, service, session, seed):
        """주문 후 상품 가격이 바뀌어도 주문 단가 유지"""
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 2)), seed.customer_id
        )

        item = await session.get(ItemModel, seed.chicken_id)
        item.price = Decimal("5000")
        await session.flush()

        detail = await service.get_order_detail(session, created.order_id, seed.customer_id)
        assert detail.items[0].price == Decimal("1000")
        assert detail.total_price == Decimal("2000")


class TestTransactionBoundary:
    """세션 미전달 시 @transaction 이 커밋/롤백"""

    @pytest.mark.asyncio
    async def test_commit_on_success(self, service, seed, session_factory, monkeypatch):
        monkeypatch.setattr(connection, "AsyncSessionLocal", session_factory)

        created = await service.create_order(
            create_request(seed.store_id, (seed.chicken_id, 2)), seed.customer_id
        )

        async with session_factory() as session:
            order = await session.get(OrderModel, created.order_id)
            assert order is not None
            assert order.total_price == Decimal("2000")

    @pytest.mark.asyncio
    async def test_nothing_committed_on_payment_failure(
        self, service, seed, gateway, session_factory, monkeypatch
    ):
        monkeypatch.setattr(connection, "AsyncSessionLocal", session_factory)
        gateway.configure(PaymentStatus.FAILED)

        with pytest.raises(PaymentFailedError):
            await service.create_order(
                create_request(seed.store_id, (seed.chicken_id, 2)), seed.customer_id
            )

        async with session_factory() as session:
            assert await count_rows(session, OrderModel) == 0

    @pytest.mark.asyncio
    async def test_detail_across_sessions(self, service, seed, clock, session_factory, monkeypatch):
        """다른 세션에서 읽은 주문(naive 시각)도 수정 가능 시간 판정"""
        monkeypatch.setattr(connection, "AsyncSessionLocal", session_factory)
        created = await service.create_order(
            create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )

        clock.advance(minutes=6)

        with pytest.raises(OrderTimeOutError):
            await service.cancel_order(
                created.order_id, OrderCancelRequestDTO(), seed.customer_id
            )


class TestCancelOrder:
    """주문 취소 테스트"""

    @pytest.mark.asyncio
    async def test_customer_cancels_within_window(self, service, session, seed, clock):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )
        clock.advance(minutes=3)

        result = await service.cancel_order(
            session, created.order_id, OrderCancelRequestDTO(reason="Changed my mind"), seed.customer_id
        )

        assert result.status == "CANCELLED"
        assert result.cancel_reason == "Changed my mind"
        assert result.cancelled_at == clock.now
        assert await count_rows(session, OrderModel) == 1

    @pytest.mark.asyncio
    async def test_store_owner_cancels(self, service, session, seed):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )

        result = await service.cancel_order(
            session, created.order_id, OrderCancelRequestDTO(), seed.owner_id
        )

        assert result.status == "CANCELLED"

    @pytest.mark.asyncio
    async def test_cancel_after_six_minutes(self, service, session, seed, clock):
        """생성 6분 후 취소 시 O-002, 상태 유지"""
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )
        clock.advance(minutes=6)

        with pytest.raises(OrderTimeOutError) as exc_info:
            await service.cancel_order(
                session, created.order_id, OrderCancelRequestDTO(), seed.customer_id
            )

        assert exc_info.value.code == "O-002"
        detail = await service.get_order_detail(session, created.order_id, seed.customer_id)
        assert detail.status == "CREATED"

    @pytest.mark.asyncio
    async def test_window_applies_to_owner(self, service, session, seed, clock):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )
        clock.advance(minutes=10)

        with pytest.raises(OrderTimeOutError):
            await service.cancel_order(
                session, created.order_id, OrderCancelRequestDTO(), seed.owner_id
            )

    @pytest.mark.asyncio
    async def test_cancel_at_exactly_five_minutes(self, service, session, seed, clock):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )
        clock.advance(minutes=5)

        result = await service.cancel_order(
            session, created.order_id, OrderCancelRequestDTO(), seed.customer_id
        )

        assert result.status == "CANCELLED"

    @pytest.mark.asyncio
    async def test_double_cancel_rejected(self, service, session, seed):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )
        await service.cancel_order(session, created.order_id, OrderCancelRequestDTO(), seed.customer_id)

        with pytest.raises(OrderAlreadyCancelledError) as exc_info:
            await service.cancel_order(
                session, created.order_id, OrderCancelRequestDTO(), seed.customer_id
            )

        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_other_customer_denied(self, service, session, seed):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )

        with pytest.raises(AccessDeniedError):
            await service.cancel_order(
                session, created.order_id, OrderCancelRequestDTO(), seed.other_customer_id
            )

    @pytest.mark.asyncio
    async def test_unknown_order(self, service, session, seed):
        with pytest.raises(OrderNotFoundError) as exc_info:
            await service.cancel_order(
                session, uuid.uuid4(), OrderCancelRequestDTO(), seed.customer_id
            )

        assert exc_info.value.code == "O-001"

    @pytest.mark.asyncio
    async def test_unknown_acting_member(self, service, session, seed):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )

        with pytest.raises(MemberNotFoundError):
            await service.cancel_order(session, created.order_id, OrderCancelRequestDTO(), 9999)


class TestUpdateOrder:
    """주문 수정 테스트"""

    @pytest.mark.asyncio
    async def test_update_address_and_request(self, service, session, seed, clock):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )
        clock.advance(minutes=2)

        result = await service.update_order(
            session,
            created.order_id,
            OrderUpdateRequestDTO(
                address=AddressDTO(city="Busan", street="Harbor Road", zipcode="48000"),
                store_request="No pickles",
            ),
            seed.customer_id,
        )

        assert result.address.city == "Busan"
        assert result.store_request == "No pickles"
        assert result.status == "CREATED"
        assert result.updated_at == clock.now
        assert result.items[0].quantity == 1

    @pytest.mark.asyncio
    async def test_update_lines_keeps_frozen_price(self, service, session, seed, gateway):
        """기존 상품은 주문 시점 단가 유지, 새 상품은 현재 가격, 결제 재요청 없음"""
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 2)), seed.customer_id
        )
        item = await session.get(ItemModel, seed.chicken_id)
        item.price = Decimal("1500")
        await session.flush()

        result = await service.update_order(
            session,
            created.order_id,
            OrderUpdateRequestDTO(
                items=[
                    OrderItemRequestDTO(item_id=seed.chicken_id, quantity=3),
                    OrderItemRequestDTO(item_id=seed.cola_id, quantity=1),
                ]
            ),
            seed.customer_id,
        )

        prices = {line.item_id: line.price for line in result.items}
        assert prices[seed.chicken_id] == Decimal("1000")
        assert prices[seed.cola_id] == Decimal("2500")
        assert result.total_price == Decimal("5500")
        assert len(gateway.calls) == 1

    @pytest.mark.asyncio
    async def test_update_removes_omitted_lines(self, service, session, seed):
        created = await service.create_order(
            session,
            create_request(seed.store_id, (seed.chicken_id, 1), (seed.cola_id, 1)),
            seed.customer_id,
        )

        result = await service.update_order(
            session,
            created.order_id,
            OrderUpdateRequestDTO(items=[OrderItemRequestDTO(item_id=seed.cola_id, quantity=2)]),
            seed.customer_id,
        )

        assert [line.item_id for line in result.items] == [seed.cola_id]
        assert result.total_price == Decimal("5000")

    @pytest.mark.asyncio
    async def test_update_with_unknown_item_keeps_order(self, service, session, seed):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 2)), seed.customer_id
        )

        with pytest.raises(ItemNotFoundError):
            await service.update_order(
                session,
                created.order_id,
                OrderUpdateRequestDTO(
                    items=[
                        OrderItemRequestDTO(item_id=seed.chicken_id, quantity=5),
                        OrderItemRequestDTO(item_id=9999, quantity=1),
                    ]
                ),
                seed.customer_id,
            )

        detail = await service.get_order_detail(session, created.order_id, seed.customer_id)
        assert detail.items[0].quantity == 2

    @pytest.mark.asyncio
    async def test_update_with_other_store_item_rejected(self, service, session, seed):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 2)), seed.customer_id
        )

        with pytest.raises(ValidationError):
            await service.update_order(
                session,
                created.order_id,
                OrderUpdateRequestDTO(
                    items=[
                        OrderItemRequestDTO(item_id=seed.chicken_id, quantity=4),
                        OrderItemRequestDTO(item_id=seed.pizza_id, quantity=1),
                    ]
                ),
                seed.customer_id,
            )

        detail = await service.get_order_detail(session, created.order_id, seed.customer_id)
        assert [(line.item_id, line.quantity) for line in detail.items] == [(seed.chicken_id, 2)]

    @pytest.mark.asyncio
    async def test_update_empty_lines_rejected(self, service, session, seed):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )

        with pytest.raises(ValidationError):
            await service.update_order(
                session, created.order_id, OrderUpdateRequestDTO(items=[]), seed.customer_id
            )

    @pytest.mark.asyncio
    async def test_non_matching_owner_denied(self, service, session, seed):
        """다른 가게 사장의 수정 시도는 A-001"""
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )

        with pytest.raises(AccessDeniedError) as exc_info:
            await service.update_order(
                session,
                created.order_id,
                OrderUpdateRequestDTO(store_request="Extra sauce"),
                seed.other_owner_id,
            )

        assert exc_info.value.code == "A-001"

    @pytest.mark.asyncio
    async def test_update_after_window(self, service, session, seed, clock):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )
        clock.advance(minutes=5, microseconds=1)

        with pytest.raises(OrderTimeOutError):
            await service.update_order(
                session, created.order_id, OrderUpdateRequestDTO(store_request="x"), seed.customer_id
            )

    @pytest.mark.asyncio
    async def test_update_cancelled_order_rejected(self, service, session, seed):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )
        await service.cancel_order(session, created.order_id, OrderCancelRequestDTO(), seed.customer_id)

        with pytest.raises(OrderAlreadyCancelledError):
            await service.update_order(
                session, created.order_id, OrderUpdateRequestDTO(store_request="x"), seed.customer_id
            )

    @pytest.mark.asyncio
    async def test_update_bumps_version(self, service, session, seed):
        created = await service.create_order(
            session, create_request(seed.store_id, (seed.chicken_id, 1)), seed.customer_id
        )

        await service.update_order(
            session, created.order_id, OrderUpdateRequestDTO(store_request="x"), seed.customer_id
        )

        order = await session.get(OrderModel, created.order_id)
        assert order.version == 2


class TestOrderQueries:
    """주문 조회/목록/검색 테스트"""

    async def _create(self, service, session, seed, *lines, member_id=None, store_id=None):
        return await service.create_order(
            session,
            create_request(store_id or seed.store_id, *lines),
            member_id or seed.customer_id,
        )

    @pytest.mark.asyncio
    async def test_detail_for_customer_and_owner(self, service, session, seed):
        created = await self._create(service, session, seed, (seed.chicken_id, 1))

        by_customer = await service.get_order_detail(session, created.order_id, seed.customer_id)
        by_owner = await service.get_order_detail(session, created.order_id, seed.owner_id)

        assert by_customer.order_id == by_owner.order_id == created.order_id

    @pytest.mark.asyncio
    async def test_detail_is_idempotent(self, service, session, seed):
        created = await self._create(service, session, seed, (seed.chicken_id, 2))

        first = await service.get_order_detail(session, created.order_id, seed.customer_id)
        second = await service.get_order_detail(session, created.order_id, seed.customer_id)

        assert first == second

    @pytest.mark.asyncio
    async def test_detail_denied_for_other_customer(self, service, session, seed):
        """다른 고객의 주문 상세 조회는 A-001"""
        created = await self._create(service, session, seed, (seed.chicken_id, 1))

        with pytest.raises(AccessDeniedError):
            await service.get_order_detail(session, created.order_id, seed.other_customer_id)

    @pytest.mark.asyncio
    async def test_detail_unknown_order(self, service, session, seed):
        with pytest.raises(OrderNotFoundError):
            await service.get_order_detail(session, uuid.uuid4(), seed.customer_id)

    @pytest.mark.asyncio
    async def test_member_orders_newest_first(self, service, session, seed, clock):
        first = await self._create(service, session, seed, (seed.chicken_id, 1))
        clock.advance(minutes=1)
        second = await self._create(service, session, seed, (seed.cola_id, 1))
        await self._create(
            service, session, seed, (seed.chicken_id, 1), member_id=seed.other_customer_id
        )

        result = await service.get_orders_for_member(session, seed.customer_id)

        assert result.total == 2
        assert [o.order_id for o in result.orders] == [second.order_id, first.order_id]

    @pytest.mark.asyncio
    async def test_member_without_orders(self, service, session, seed):
        result = await service.get_orders_for_member(session, seed.other_customer_id)

        assert result.total == 0
        assert result.orders == []

    @pytest.mark.asyncio
    async def test_store_orders_for_owner(self, service, session, seed):
        await self._create(service, session, seed, (seed.chicken_id, 1))
        await self._create(
            service, session, seed, (seed.pizza_id, 1), store_id=seed.other_store_id
        )

        result = await service.get_orders_for_store(session, seed.store_id, seed.owner_id)

        assert result.total == 1
        assert result.orders[0].store_id == seed.store_id

    @pytest.mark.asyncio
    async def test_store_orders_denied_for_non_owner(self, service, session, seed):
        with pytest.raises(AccessDeniedError):
            await service.get_orders_for_store(session, seed.store_id, seed.other_owner_id)

    @pytest.mark.asyncio
    async def test_store_orders_unknown_store(self, service, session, seed):
        with pytest.raises(StoreNotFoundError):
            await service.get_orders_for_store(session, 9999, seed.owner_id)

    @pytest.mark.asyncio
    async def test_search_by_store_and_product(self, service, session, seed, clock):
        chicken = await self._create(service, session, seed, (seed.chicken_id, 1))
        clock.advance(minutes=1)
        cola = await self._create(service, session, seed, (seed.cola_id, 1))
        clock.advance(minutes=1)
        pizza = await self._create(
            service, session, seed, (seed.pizza_id, 1), store_id=seed.other_store_id
        )

        by_store = await service.search_orders(session, seed.customer_id, store_name="seoul")
        by_product = await service.search_orders(session, seed.customer_id, product_name="PIZZA")
        both = await service.search_orders(
            session, seed.customer_id, store_name="Chicken", product_name="cola"
        )
        unfiltered = await service.search_orders(session, seed.customer_id)

        assert {o.order_id for o in by_store.orders} == {chicken.order_id, cola.order_id}
        assert [o.order_id for o in by_product.orders] == [pizza.order_id]
        assert [o.order_id for o in both.orders] == [cola.order_id]
        assert unfiltered.total == 3

    @pytest.mark.asyncio
    async def test_search_only_own_orders(self, service, session, seed):
        await self._create(service, session, seed, (seed.chicken_id, 1))

        result = await service.search_orders(
            session, seed.other_customer_id, product_name="chicken"
        )

        assert result.total == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("term", ["%", "_", "Seoul%", "Fried_Chicken"])
    async def test_search_wildcards_match_literally(self, service, session, seed, term):
        """검색어의 % / _ 는 문자 그대로 비교"""
        await self._create(service, session, seed, (seed.chicken_id, 1))

        by_store = await service.search_orders(session, seed.customer_id, store_name=term)
        by_product = await service.search_orders(session, seed.customer_id, product_name=term)

        assert by_store.total == 0
        assert by_product.total == 0
