"""
Payment Gateway Adapters - 결제 게이트웨이 구현체 및 팩토리
"""

from src.adapters.external.payment.client import HttpPaymentGateway
from src.adapters.external.payment.fake_gateway import FakePaymentGateway
from src.application.domain.payment.gateway import PaymentGateway
from src.settings.config import Settings, settings

_fake_gateway: FakePaymentGateway | None = None


def get_payment_gateway(config: Settings | None = None) -> PaymentGateway:
    """
    설정(payment_gateway_mode)에 맞는 결제 게이트웨이 반환

    fake 모드는 프로세스 내 단일 인스턴스를 공유하여 configure() 결과가 유지됨
    """
    global _fake_gateway
    config = config or settings

    if config.payment_gateway_mode == "fake":
        if _fake_gateway is None:
            _fake_gateway = FakePaymentGateway()
        return _fake_gateway

    return HttpPaymentGateway(
        base_url=config.payment_gateway_url,
        api_key=config.payment_gateway_api_key,
        timeout=config.payment_gateway_timeout,
    )


def reset_payment_gateway() -> None:
    """공유 Fake 게이트웨이 초기화 (테스트용)"""
    global _fake_gateway
    _fake_gateway = None


__all__ = [
    "FakePaymentGateway",
    "HttpPaymentGateway",
    "get_payment_gateway",
    "reset_payment_gateway",
]
