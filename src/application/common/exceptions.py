# -*- coding: utf-8 -*-
"""
Common Exceptions - 공통 예외 클래스

애플리케이션 전역에서 사용하는 커스텀 예외 정의
"""

from typing import Any


# ==================== Base Exception ====================


class ApplicationError(Exception):
    """
    애플리케이션 기본 예외

    모든 커스텀 예외의 베이스 클래스
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """예외를 딕셔너리로 변환"""
        return {
            "code": self.code,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
        }


# ==================== Validation Exceptions ====================


class ValidationError(ApplicationError):
    """검증 실패 예외"""

    def __init__(self, message: str = "Argument Not Valid", details: dict[str, Any] | None = None):
        super().__init__(message, code="V-001", status_code=400, details=details)


# ==================== Resource Exceptions ====================


class ResourceNotFoundError(ApplicationError):
    """리소스를 찾을 수 없음 예외"""

    def __init__(self, resource: str, identifier: Any, code: str | None = None):
        super().__init__(
            message=f"{resource} Not Found: {identifier}",
            code=code or "RESOURCE_NOT_FOUND",
            status_code=404,
            details={"resource": resource, "identifier": str(identifier)},
        )


class MemberNotFoundError(ResourceNotFoundError):
    """회원 없음"""

    def __init__(self, member_id: Any):
        super().__init__("Member", member_id, code="M-001")


class StoreNotFoundError(ResourceNotFoundError):
    """가게 없음"""

    def __init__(self, store_id: Any):
        super().__init__("Store", store_id, code="S-001")


class ItemNotFoundError(ResourceNotFoundError):
    """상품 없음"""

    def __init__(self, item_id: Any):
        super().__init__("Item", item_id, code="I-001")


class OrderNotFoundError(ResourceNotFoundError):
    """주문 없음"""

    def __init__(self, order_id: Any):
        super().__init__("Order", order_id, code="O-001")


class ResourceConflictError(ApplicationError):
    """리소스 충돌 예외"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message=message, code="C-001", status_code=409, details=details)


# ==================== Authorization Exceptions ====================


class AuthorizationError(ApplicationError):
    """권한 부족 예외"""

    def __init__(
        self,
        message: str = "Authorization failed",
        code: str = "AUTHORIZATION_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, status_code=403, details=details)


class AccessDeniedError(AuthorizationError):
    """주문/가게 접근 권한 없음"""

    def __init__(self, member_id: Any, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Access Denied for member: {member_id}",
            code="A-001",
            details={"member_id": str(member_id), **(details or {})},
        )


# ==================== Business Logic Exceptions ====================


class BusinessLogicError(ApplicationError):
    """비즈니스 로직 예외"""

    def __init__(
        self,
        message: str,
        code: str = "BUSINESS_LOGIC_ERROR",
        status_code: int = 422,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message=message, code=code, status_code=status_code, details=details)


class OrderTimeOutError(BusinessLogicError):
    """수정/취소 가능 시간 초과"""

    def __init__(self, order_id: Any, window_minutes: float):
        super().__init__(
            message=f"Order can no longer be changed after {window_minutes:g} minutes",
            code="O-002",
            status_code=400,
            details={"order_id": str(order_id), "window_minutes": window_minutes},
        )


class OrderAlreadyCancelledError(BusinessLogicError):
    """이미 취소된 주문"""

    def __init__(self, order_id: Any):
        super().__init__(
            message=f"Order already cancelled: {order_id}",
            code="O-003",
            status_code=409,
            details={"order_id": str(order_id)},
        )


class PaymentFailedError(BusinessLogicError):
    """결제 승인 실패"""

    def __init__(self, status: str, reason: str | None = None):
        super().__init__(
            message=f"Payment Failed: {reason or status}",
            code="P-001",
            status_code=402,
            details={"payment_status": status, "reason": reason},
        )


# ==================== External Service Exceptions ====================


class ExternalServiceError(ApplicationError):
    """외부 서비스 오류 예외"""

    def __init__(
        self,
        service: str,
        message: str,
        code: str = "EXTERNAL_SERVICE_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=f"{service} error: {message}",
            code=code,
            status_code=502,
            details=details,
        )


class PaymentGatewayError(ExternalServiceError):
    """결제 게이트웨이 통신 오류"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(service="Payment Gateway", message=message, code="P-002", details=details)
