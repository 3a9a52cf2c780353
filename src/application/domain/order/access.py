# -*- coding: utf-8 -*-
"""
Order Access Guard - 역할 기반 주문 접근 제어

조회와 변경에 같은 규칙을 적용한다.
- CUSTOMER: 본인이 주문한 주문만
- OWNER: 본인 가게로 들어온 주문만
"""

import logging

from src.adapters.database.models.member import MemberModel, Role
from src.adapters.database.models.order import OrderModel
from src.adapters.database.models.store import StoreModel
from src.application.common.exceptions import AccessDeniedError

logger = logging.getLogger(__name__)


def can_access(role: str, actor_id: int, order_member_id: int, store_owner_id: int) -> bool:
    """
    주문 접근 가능 여부

    Args:
        role: 요청 회원 역할
        actor_id: 요청 회원 ID
        order_member_id: 주문 고객 회원 ID
        store_owner_id: 주문 가게 사장 회원 ID

    Returns:
        bool: 접근 가능 여부
    """
    if role == Role.CUSTOMER.value:
        return actor_id == order_member_id
    if role == Role.OWNER.value:
        return actor_id == store_owner_id
    return False


def authorize(order: OrderModel, member: MemberModel) -> None:
    """
    주문 접근 권한 검증

    Raises:
        AccessDeniedError: 주문 고객도 가게 사장도 아닌 경우
    """
    if not can_access(member.role, member.id, order.member_id, order.store.member_id):
        logger.warning(
            f"[AccessGuard] Denied: member={member.id} role={member.role} order={order.id}"
        )
        raise AccessDeniedError(member.id, details={"order_id": str(order.id)})


def authorize_store(store: StoreModel, member_id: int) -> None:
    """
    가게 주문 목록 접근 권한 검증 (가게 사장 본인만)

    Raises:
        AccessDeniedError: 가게 사장이 아닌 경우
    """
    if store.member_id != member_id:
        logger.warning(f"[AccessGuard] Denied: member={member_id} store={store.id}")
        raise AccessDeniedError(member_id, details={"store_id": store.id})
