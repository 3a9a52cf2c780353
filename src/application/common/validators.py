# -*- coding: utf-8 -*-
"""
Validators - 공통 검증 함수

입력 데이터 검증을 위한 재사용 가능한 함수
"""

from decimal import Decimal
from typing import Any


# ==================== 숫자 검증 ====================


def validate_positive(value: int | float | Decimal, field_name: str = "value") -> None:
    """
    양수 검증

    Args:
        value: 검증할 값
        field_name: 필드명

    Raises:
        ValueError: 양수가 아닌 경우
    """
    if value is None or value <= 0:
        raise ValueError(f"{field_name} must be positive, got {value}")


# ==================== 리스트 검증 ====================


def validate_list_not_empty(value: list[Any] | None, field_name: str = "list") -> None:
    """
    리스트 비어있지 않음 검증

    Args:
        value: 검증할 리스트
        field_name: 필드명

    Raises:
        ValueError: 빈 리스트인 경우
    """
    if not value:
        raise ValueError(f"{field_name} cannot be empty")


def validate_unique(values: list[Any], field_name: str = "list") -> None:
    """중복 값 검증"""
    if len(set(values)) != len(values):
        raise ValueError(f"{field_name} must not contain duplicates")


# ==================== 조합 검증 ====================


def validate_order_lines(lines: list[Any] | None) -> None:
    """
    주문 라인 통합 검증

    Args:
        lines: item_id / quantity 속성을 가진 주문 라인 목록

    Raises:
        ValueError: 검증 실패
    """
    validate_list_not_empty(lines, "items")
    for index, line in enumerate(lines):
        validate_positive(line.quantity, f"items[{index}].quantity")
    validate_unique([line.item_id for line in lines], "items.item_id")
