from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Union

from ...currency import CurrencyTable, ISO4217
from ...exceptions import GatewayRejected
from ...logging_config import get_logger
from .client import TinkoffMerchantAPI
from .schemas import AdapterConfig, PaymentRequest

logger = get_logger(__name__)


class TinkoffAdapter:
    """
    Tinkoff, оплата картой:
      - create_payment -> Init, возвращает PaymentURL для редиректа
      - validate       -> пересчитывает Token уведомления
      - record_response + геттеры по последнему уведомлению
    Последнее уведомление хранится в памяти экземпляра: один экземпляр на один
    платёжный поток (один запрос на входе, один ответ на выходе). Между
    параллельными запросами экземпляр не шарить.
    """

    name = "Tinkoff_Card"

    def __init__(
        self,
        config: Union[AdapterConfig, Mapping[str, Any]],
        client: Optional[TinkoffMerchantAPI] = None,
        currencies: CurrencyTable = ISO4217,
    ):
        self._config = AdapterConfig.coerce(config)
        self._client = client or TinkoffMerchantAPI(
            self._config.merchant_id,
            self._config.secret_key,
            self._config.api_url,
        )
        self._currencies = currencies
        self._response: Optional[Dict[str, Any]] = None

    @classmethod
    def from_settings(cls, **kwargs) -> "TinkoffAdapter":
        return cls(AdapterConfig.from_settings(), **kwargs)

    @property
    def config(self) -> AdapterConfig:
        return self._config

    @property
    def client(self) -> TinkoffMerchantAPI:
        return self._client

    # ---- Оплата ----
    def create_payment(
        self,
        order_id: str,
        payment_id: str,
        amount: Union[Decimal, float, int, str],
        currency: Optional[str] = None,
        success_url: str = "",
        fail_url: str = "",
        description: str = "",
    ) -> str:
        req = PaymentRequest(
            order_id=order_id,
            payment_id=payment_id,
            amount=amount,
            currency=currency if currency is not None else self._config.default_currency,
            success_url=success_url,
            fail_url=fail_url,
            description=description,
        )

        data: Dict[str, Any] = {
            "OrderId": req.order_id,
            "Amount": req.minor_units(),
            "Currency": self._currencies.numeric(req.currency),
            "Description": req.description,
            "ExtraData": f"PaymentId={req.payment_id}",
        }
        if req.success_url:
            data["SuccessURL"] = req.success_url
        if req.fail_url:
            data["FailURL"] = req.fail_url

        driver = self._client
        driver.init(data)

        if driver.error != "":
            logger.warning(
                "tinkoff.pay.rejected",
                gateway="tinkoff",
                order_id=req.order_id,
                error_code=driver.error_code,
                error=driver.error,
            )
            raise GatewayRejected(driver.error, provider=self.name, error_code=driver.error_code)

        # PaymentId из Init кладём в то же состояние, которое record_response потом заменяет целиком
        self._response = {**(self._response or {}), "PaymentId": driver.payment_id}

        logger.info("tinkoff.pay.created", gateway="tinkoff", order_id=req.order_id, payment_id=driver.payment_id)
        return driver.payment_url

    # ---- Уведомление ----
    def validate(self, payload: Mapping[str, Any]) -> bool:
        try:
            data = dict(payload)
        except (TypeError, ValueError):
            return False

        token = data.pop("Token", "")
        if token is None or token == "":
            logger.warning("tinkoff.notification.no_token", gateway="tinkoff", order_id=data.get("OrderId"))
            return False

        try:
            result = self._client.gen_token(data) == str(token)
        except (TypeError, ValueError):
            result = False
        if not result:
            logger.warning("tinkoff.notification.bad_token", gateway="tinkoff", order_id=data.get("OrderId"))
        return result

    def record_response(self, payload: Mapping[str, Any]) -> "TinkoffAdapter":
        data = dict(payload)
        data["DateTime"] = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self._response = data
        return self

    def get_response_param(self, name: str, default: Any = "") -> Any:
        if self._response is None:
            return default
        return self._response.get(name, default)

    # ---- Геттеры ----
    def get_order_id(self) -> str:
        return self.get_response_param("OrderId")

    def get_status(self) -> str:
        return self.get_response_param("Status")

    def is_success(self) -> bool:
        return self.get_response_param("Success", "false") == "true"

    def get_transaction_id(self) -> str:
        return self.get_response_param("PaymentId")

    def get_amount(self) -> Any:
        return self.get_response_param("Amount")

    def get_error_code(self) -> Any:
        return self.get_response_param("ErrorCode")

    def get_pan(self) -> str:
        """Маскированный номер карты, как прислал шлюз."""
        return self.get_response_param("Pan")

    def get_date_time(self) -> str:
        return self.get_response_param("DateTime")

    def get_provider(self) -> str:
        return "card"
