# -*- coding: utf-8 -*-
"""
Order Mutation Window - 주문 수정/취소 가능 시간 검증
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from src.adapters.database.models.base import utc_now
from src.adapters.database.models.order import OrderModel
from src.application.common.exceptions import OrderTimeOutError
from src.settings.config import settings

Clock = Callable[[], datetime]


def as_utc(value: datetime) -> datetime:
    """naive datetime 은 UTC 로 간주"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class MutationWindow:
    """
    주문 생성 후 일정 시간 내에만 수정/취소 허용

    경계값(정확히 window 경과)은 허용. 역할과 무관하게 적용.
    """

    def __init__(self, clock: Clock | None = None, window: timedelta | None = None) -> None:
        self.clock = clock or utc_now
        self.window = (
            window
            if window is not None
            else timedelta(minutes=settings.order_mutation_window_minutes)
        )

    def is_open(self, order: OrderModel) -> bool:
        """수정/취소 가능 여부"""
        elapsed = as_utc(self.clock()) - as_utc(order.created_at)
        return elapsed <= self.window

    def check(self, order: OrderModel) -> None:
        """
        수정/취소 가능 시간 검증

        Raises:
            OrderTimeOutError: 허용 시간 초과
        """
        if not self.is_open(order):
            raise OrderTimeOutError(order.id, self.window.total_seconds() / 60)
