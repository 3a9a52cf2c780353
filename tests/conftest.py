# -*- coding: utf-8 -*-
"""
공통 테스트 픽스처

- 인메모리 SQLite (aiosqlite) 엔진/세션
- 회원/가게/상품 시드 데이터
- 고정 시계 (FakeClock)
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import src.adapters.database.models  # noqa: F401
from src.adapters.database.connection import Base, create_session_factory
from src.adapters.database.models import ItemModel, MemberModel, Role, StoreModel
from src.adapters.external.payment import FakePaymentGateway
from src.application.domain.order.service import OrderService

T0 = datetime(2026, 1, 5, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """테스트용 고정 시계"""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@dataclass
class Seed:
    """시드 데이터 ID 모음"""

    customer_id: int
    other_customer_id: int
    owner_id: int
    other_owner_id: int
    store_id: int
    other_store_id: int
    chicken_id: int
    cola_id: int
    pizza_id: int


# ==================== Database ====================


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seed(session_factory) -> Seed:
    """회원 4명, 가게 2곳, 상품 3개"""
    async with session_factory() as session:
        customer = MemberModel(username="customer", role=Role.CUSTOMER.value)
        other_customer = MemberModel(username="other_customer", role=Role.CUSTOMER.value)
        owner = MemberModel(username="owner", role=Role.OWNER.value)
        other_owner = MemberModel(username="other_owner", role=Role.OWNER.value)
        session.add_all([customer, other_customer, owner, other_owner])
        await session.flush()

        store = StoreModel(name="Seoul Chicken", member_id=owner.id)
        other_store = StoreModel(name="Busan Pizza", member_id=other_owner.id)
        session.add_all([store, other_store])
        await session.flush()

        chicken = ItemModel(store_id=store.id, name="Fried Chicken", price=Decimal("1000"))
        cola = ItemModel(store_id=store.id, name="Cola", price=Decimal("2500"))
        pizza = ItemModel(store_id=other_store.id, name="Cheese Pizza", price=Decimal("18000"))
        session.add_all([chicken, cola, pizza])
        await session.flush()

        result = Seed(
            customer_id=customer.id,
            other_customer_id=other_customer.id,
            owner_id=owner.id,
            other_owner_id=other_owner.id,
            store_id=store.id,
            other_store_id=other_store.id,
            chicken_id=chicken.id,
            cola_id=cola.id,
            pizza_id=pizza.id,
        )
        await session.commit()
    return result


# ==================== Service ====================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def service(gateway, clock) -> OrderService:
    return OrderService(payment_gateway=gateway, clock=clock)
