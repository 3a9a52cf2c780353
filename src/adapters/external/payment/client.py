# -*- coding: utf-8 -*-
"""
HTTP Payment Gateway - 외부 PG 결제 승인 API 클라이언트
"""

import logging
from decimal import Decimal

import httpx

from src.adapters.database.models.order import OrderModel
from src.application.common.exceptions import PaymentGatewayError
from src.application.domain.payment.dto import PaymentRequestDTO, PaymentResponseDTO
from src.application.domain.payment.gateway import PaymentGateway
from src.settings.config import settings

logger = logging.getLogger(__name__)

AUTHORIZE_PATH = "/v1/payments/authorize"


class HttpPaymentGateway(PaymentGateway):
    """
    PG HTTP API 결제 게이트웨이

    승인 요청 1건당 POST 1회, 재시도 없음.
    승인 거절은 200 응답의 status (SUCCESS 외 값) 로 전달.
    HTTP 오류와 형식 오류는 PaymentGatewayError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            base_url: PG API Base URL (없으면 settings)
            api_key: PG API 키 (없으면 settings)
            timeout: 요청 타임아웃 초 (없으면 settings)
            client: 주입할 httpx.AsyncClient (테스트용)
        """
        self.base_url = (base_url or settings.payment_gateway_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.payment_gateway_api_key
        self.timeout = timeout or settings.payment_gateway_timeout
        self._client = client

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def authorize(
        self, order: OrderModel, request: PaymentRequestDTO
    ) -> PaymentResponseDTO:
        payload = {
            "amount": str(request.amount),
            "payment_method": request.payment_method,
            "member_id": request.member_id,
            "store_id": request.store_id,
            "order_type": order.order_type,
        }

        logger.info(
            f"[HttpPaymentGateway] Authorize request: member={request.member_id}, "
            f"store={request.store_id}, amount={request.amount}"
        )

        try:
            if self._client is not None:
                response = await self._post(self._client, payload)
            else:
                async with httpx.AsyncClient(
                    base_url=self.base_url, timeout=httpx.Timeout(self.timeout)
                ) as client:
                    response = await self._post(client, payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"[HttpPaymentGateway] HTTP {e.response.status_code}: {e.response.text}")
            raise PaymentGatewayError(
                f"HTTP {e.response.status_code}",
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"[HttpPaymentGateway] Request failed: {e}")
            raise PaymentGatewayError(str(e) or e.__class__.__name__) from e
        except ValueError as e:
            raise PaymentGatewayError("Invalid JSON response") from e

        return self._parse(body, request)

    async def _post(self, client: httpx.AsyncClient, payload: dict) -> httpx.Response:
        return await client.post(
            f"{self.base_url}{AUTHORIZE_PATH}",
            json=payload,
            headers=self._headers(),
            timeout=self.timeout,
        )

    @staticmethod
    def _parse(body: dict, request: PaymentRequestDTO) -> PaymentResponseDTO:
        """
        PG 응답 본문 -> PaymentResponseDTO

        status 는 문자열이기만 하면 그대로 전달 (SUCCESS 외 값은 호출 측에서 승인 거절 처리)
        """
        status = body.get("status") if isinstance(body, dict) else None
        if not isinstance(status, str) or not status.strip():
            raise PaymentGatewayError("Malformed response", details={"body": body})

        try:
            return PaymentResponseDTO(
                status=status.strip().upper(),
                amount=Decimal(str(body.get("amount", request.amount))),
                payment_method=body.get("payment_method", request.payment_method),
                pg_transaction_id=body.get("transaction_id"),
                message=body.get("message"),
            )
        except (ValueError, ArithmeticError) as e:
            # pydantic ValidationError / decimal 변환 실패
            raise PaymentGatewayError("Malformed response", details={"body": body}) from e
