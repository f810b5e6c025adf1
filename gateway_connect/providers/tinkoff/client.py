from typing import Any, Dict, Mapping, Optional

import httpx

from ...logging_config import get_logger
from ...utils.http import client
from ...utils.security import sha256_values_token
from .schemas import InitResponse

logger = get_logger(__name__)


class TinkoffMerchantAPI:
    """
    Минимальный клиент эквайринга Tinkoff (API v2):
    - POST {api_url}/Init
    Результат init() читается из error / error_code / payment_id / payment_url,
    как в мерчантском SDK.
    """

    def __init__(self, merchant_id: str, secret_key: str, api_url: str, http_client: Optional[httpx.Client] = None):
        self.merchant_id = merchant_id
        self._secret_key = secret_key
        self.api_url = api_url.rstrip("/")
        self._http = http_client

        self.error: str = ""
        self.error_code: str = ""
        self.payment_id: str = ""
        self.payment_url: str = ""
        self.status: str = ""
        self.response: Optional[InitResponse] = None

    def gen_token(self, fields: Mapping[str, Any]) -> str:
        data = dict(fields)
        data["Password"] = self._secret_key
        return sha256_values_token(data)

    def _build_query(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        body = dict(payload)
        body.setdefault("TerminalKey", self.merchant_id)
        body["Token"] = self.gen_token(body)
        return body

    def _post(self, method: str, body: Dict[str, Any]) -> httpx.Response:
        url = f"{self.api_url}/{method}"
        if self._http is not None:
            return self._http.post(url, json=body)
        with client() as c:
            return c.post(url, json=body)

    def init(self, payload: Mapping[str, Any]) -> InitResponse:
        self.error = ""
        self.error_code = ""
        self.payment_id = ""
        self.payment_url = ""
        self.status = ""

        body = self._build_query(payload)
        logger.info(
            "tinkoff.init.request",
            gateway="tinkoff",
            order_id=body.get("OrderId"),
            amount=body.get("Amount"),
            currency=body.get("Currency"),
        )

        resp = self._post("Init", body)
        resp.raise_for_status()
        parsed = InitResponse.model_validate(resp.json())
        self.response = parsed

        if not parsed.is_ok:
            self.error = parsed.error_text
            self.error_code = parsed.ErrorCode
            logger.warning(
                "tinkoff.init.error",
                gateway="tinkoff",
                order_id=body.get("OrderId"),
                error_code=parsed.ErrorCode,
                error=self.error,
            )
            return parsed

        self.payment_id = parsed.PaymentId or ""
        self.payment_url = parsed.PaymentURL or ""
        self.status = parsed.Status or ""
        logger.info(
            "tinkoff.init.response",
            gateway="tinkoff",
            order_id=body.get("OrderId"),
            payment_id=self.payment_id,
            status=self.status,
        )
        return parsed
